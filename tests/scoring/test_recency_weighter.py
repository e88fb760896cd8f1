# tests/scoring/test_recency_weighter.py
"""Tests for recency weighting and timestamp parsing."""
from datetime import datetime, timedelta, timezone

import pytest

from trend_monitor.scoring.recency_weighter import RecencyWeighter, parse_timestamp

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class TestRecencyWeighter:
    """Tests for RecencyWeighter."""

    def test_age_zero_is_full_weight(self):
        """Test that weight(0) == 1.0."""
        assert RecencyWeighter().calculate_weight(NOW, now=NOW) == pytest.approx(1.0)

    def test_one_half_life_is_half_weight(self):
        """Test that an item one half-life (3 days) old weighs 0.5."""
        weighter = RecencyWeighter()

        weight = weighter.calculate_weight(NOW - timedelta(days=3), now=NOW)

        assert weight == pytest.approx(0.5)

    def test_two_half_lives_is_quarter_weight(self):
        weight = RecencyWeighter().calculate_weight(NOW - timedelta(days=6), now=NOW)

        assert weight == pytest.approx(0.25)

    def test_strictly_decreasing_with_age(self):
        """Test that older items always weigh less."""
        weighter = RecencyWeighter()
        weights = [weighter.weight_for_age(age) for age in [0, 0.5, 1, 2, 5, 10, 30]]

        assert all(a > b for a, b in zip(weights, weights[1:]))

    def test_missing_timestamp_is_half(self):
        """Test that weight(None) == 0.5."""
        assert RecencyWeighter().calculate_weight(None, now=NOW) == 0.5

    def test_unparseable_timestamp_is_half(self):
        assert RecencyWeighter().calculate_weight("not a date", now=NOW) == 0.5

    def test_impossible_compact_date_is_half(self):
        assert RecencyWeighter().calculate_weight("20240230T120000Z", now=NOW) == 0.5

    def test_future_timestamp_clamps_to_full_weight(self):
        """Test that future timestamps never exceed 1.0."""
        weight = RecencyWeighter().calculate_weight(NOW + timedelta(days=2), now=NOW)

        assert weight == pytest.approx(1.0)

    def test_ancient_items_stay_positive(self):
        weight = RecencyWeighter().calculate_weight(NOW - timedelta(days=100000), now=NOW)

        assert 0 < weight <= 1

    def test_custom_half_life(self):
        weighter = RecencyWeighter(half_life_days=1.0, unknown_weight=0.3)

        assert weighter.calculate_weight(NOW - timedelta(days=1), now=NOW) == pytest.approx(0.5)
        assert weighter.calculate_weight(None, now=NOW) == 0.3

    def test_naive_now_treated_as_utc(self):
        naive_now = NOW.replace(tzinfo=None)

        weight = RecencyWeighter().calculate_weight("2024-01-12T12:00:00Z", now=naive_now)

        assert weight == pytest.approx(0.5)


class TestParseTimestamp:
    """Tests for parse_timestamp provider formats."""

    EXPECTED = datetime(2024, 1, 15, 8, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-15T08:00:00Z",
            "2024-01-15T08:00:00+00:00",
            "Mon, 15 Jan 2024 08:00:00 GMT",
            "20240115T080000Z",
            "01/15/2024, 08:00 AM, +0000 UTC",
            1705305600,
        ],
    )
    def test_provider_formats(self, value):
        assert parse_timestamp(value) == self.EXPECTED

    def test_naive_datetime_becomes_utc(self):
        parsed = parse_timestamp(datetime(2024, 1, 15, 8, 0, 0))

        assert parsed == self.EXPECTED
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize(
        "value",
        [None, "", "yesterday-ish", True, "20240230T120000Z", "20241301T000000Z"],
    )
    def test_unparseable_values(self, value):
        assert parse_timestamp(value) is None
