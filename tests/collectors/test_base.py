# tests/collectors/test_base.py
from datetime import datetime, timezone

import pytest

from trend_monitor.collectors.base import TermAggregator, engagement_multiplier, valid_url
from trend_monitor.models.article import SourceName

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class MockAggregator(TermAggregator):
    """Mock aggregator whose payload is a list of titles."""

    def __init__(self):
        super().__init__(name="mock", source=SourceName.GDELT)

    def _parse_term(self, payload, now):
        items = [
            self._make_article(title=title, url=None, published=NOW, now=now)
            for title in payload
        ]
        return len(items) * 10, items


class TestValidUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com/a", "http://example.com", "  https://example.com/b  "],
    )
    def test_accepts_http_urls(self, url):
        assert valid_url(url) == url.strip()

    @pytest.mark.parametrize("url", [None, "", "ftp://example.com", "/relative/path", "example.com", 42])
    def test_rejects_everything_else(self, url):
        assert valid_url(url) is None


class TestEngagementMultiplier:
    def test_no_engagement(self):
        assert engagement_multiplier(0, 100) == 1.0

    def test_linear_below_cap(self):
        assert engagement_multiplier(50, 100) == 1.5

    def test_capped_at_two(self):
        assert engagement_multiplier(10_000, 100) == 2.0

    def test_negative_engagement_ignored(self):
        assert engagement_multiplier(-20, 100) == 1.0


class TestTermAggregator:
    """Tests for the per-term aggregation loop."""

    @pytest.fixture
    def aggregator(self):
        return MockAggregator()

    def test_absent_source_returns_none(self, aggregator):
        assert aggregator.aggregate(["widget"], None, now=NOW) is None

    def test_results_follow_term_order(self, aggregator):
        raw = {"gadget": ["g1"], "widget": ["w1", "w2"]}

        report = aggregator.aggregate(["widget", "gadget"], raw, now=NOW)

        assert [r.term for r in report.results] == ["widget", "gadget"]
        assert report.source == SourceName.GDELT

    def test_unqueried_terms_get_no_result(self, aggregator):
        report = aggregator.aggregate(["widget", "gadget"], {"widget": ["w1"]}, now=NOW)

        assert [r.term for r in report.results] == ["widget"]

    def test_queried_without_hits_is_zero_result(self, aggregator):
        report = aggregator.aggregate(["widget"], {"widget": []}, now=NOW)

        assert report.results[0].total_count == 0
        assert report.is_present
        assert not report.has_data

    def test_counts_and_weights(self, aggregator):
        report = aggregator.aggregate(["widget"], {"widget": ["w1", "w2"]}, now=NOW)
        result = report.results[0]

        assert result.total_count == 20
        assert result.weighted_count == pytest.approx(2.0)
        assert report.scanned_count == 2
        assert all(item.source == SourceName.GDELT for item in result.items)
