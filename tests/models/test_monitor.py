# tests/models/test_monitor.py
"""Tests for Monitor and CheckInterval."""
from datetime import date

import pytest

from trend_monitor.models.monitor import (
    CheckInterval,
    InvalidMonitorConfiguration,
    Monitor,
    parse_terms,
)


class TestParseTerms:
    def test_splits_commas_and_trims(self):
        assert parse_terms(" widget , gadget,,  ") == ["widget", "gadget"]

    def test_list_keeps_order(self):
        assert parse_terms(["b", " a ", ""]) == ["b", "a"]

    def test_none_is_empty(self):
        assert parse_terms(None) == []


class TestCheckInterval:
    """Tests for CheckInterval."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("daily", CheckInterval.DAILY),
            ("day", CheckInterval.DAILY),
            ("Week", CheckInterval.WEEKLY),
            ("weekly", CheckInterval.WEEKLY),
            ("month", CheckInterval.MONTHLY),
        ],
    )
    def test_parse_aliases(self, value, expected):
        assert CheckInterval.parse(value) == expected

    def test_days(self):
        assert CheckInterval.DAILY.days == 1
        assert CheckInterval.WEEKLY.days == 7
        assert CheckInterval.MONTHLY.days == 30

    def test_unknown_interval_raises(self):
        with pytest.raises(ValueError):
            CheckInterval.parse("hourly")


class TestMonitor:
    """Tests for Monitor model."""

    def test_from_record_accepts_comma_separated_terms(self):
        """Test that a canonical record with a terms string builds a monitor."""
        monitor = Monitor.from_record(
            {"id": "ai-chips", "terms": "nvidia, tpu", "threshold": 15, "interval": "week"}
        )

        assert monitor.terms == ["nvidia", "tpu"]
        assert monitor.threshold == 15
        assert monitor.interval == CheckInterval.WEEKLY
        assert monitor.active is True

    def test_defaults(self):
        monitor = Monitor(id="m1", terms=["widget"])

        assert monitor.threshold == 20
        assert monitor.interval == CheckInterval.WEEKLY
        assert monitor.last_check is None
        assert monitor.trend_score is None

    def test_no_terms_raises_invalid_configuration(self):
        """Test that a monitor without usable terms is rejected."""
        with pytest.raises(InvalidMonitorConfiguration):
            Monitor.from_record({"id": "m1", "terms": " , "})

    def test_non_positive_threshold_raises(self):
        with pytest.raises(InvalidMonitorConfiguration):
            Monitor.from_record({"id": "m1", "terms": "widget", "threshold": 0})

    def test_unknown_interval_raises(self):
        with pytest.raises(InvalidMonitorConfiguration):
            Monitor.from_record({"id": "m1", "terms": "widget", "interval": "hourly"})

    def test_invalid_configuration_is_value_error(self):
        assert issubclass(InvalidMonitorConfiguration, ValueError)

    def test_history_score_prefers_smoothed(self):
        """Test that the smoothed score seeds history over the trend score."""
        monitor = Monitor(id="m1", terms=["widget"], trend_score=70, smoothed_score=62)

        assert monitor.history_score == 62

    def test_history_score_falls_back_to_trend_score(self):
        monitor = Monitor(id="m1", terms=["widget"], trend_score=70)

        assert monitor.history_score == 70


class TestIsDue:
    """Tests for Monitor.is_due."""

    def test_never_checked_is_due(self):
        monitor = Monitor(id="m1", terms=["widget"])

        assert monitor.is_due(date(2024, 1, 15)) is True

    def test_weekly_not_due_before_seven_days(self):
        monitor = Monitor(id="m1", terms=["widget"], last_check=date(2024, 1, 10))

        assert monitor.is_due(date(2024, 1, 16)) is False
        assert monitor.is_due(date(2024, 1, 17)) is True

    def test_daily_due_next_day(self):
        monitor = Monitor(
            id="m1", terms=["widget"], interval="daily", last_check=date(2024, 1, 10)
        )

        assert monitor.is_due(date(2024, 1, 10)) is False
        assert monitor.is_due(date(2024, 1, 11)) is True

    def test_monthly_interval(self):
        monitor = Monitor(
            id="m1", terms=["widget"], interval="monthly", last_check=date(2024, 1, 1)
        )

        assert monitor.is_due(date(2024, 1, 30)) is False
        assert monitor.is_due(date(2024, 1, 31)) is True
