# tests/collectors/test_news_aggregators.py
"""Tests for the news search aggregators."""
from datetime import datetime, timezone

import pytest

from trend_monitor.collectors.gdelt_aggregator import GdeltAggregator
from trend_monitor.collectors.google_news_aggregator import GoogleNewsAggregator, extract_publisher
from trend_monitor.collectors.newsdata_aggregator import NewsDataAggregator
from trend_monitor.collectors.serpapi_aggregator import SerpApiAggregator
from trend_monitor.models.article import SourceName

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestGoogleNewsAggregator:
    """Tests for GoogleNewsAggregator."""

    def test_extract_publisher(self):
        assert extract_publisher("Widget sales soar - Example Times") == "Example Times"
        assert extract_publisher("No publisher here") == "Unknown"
        assert extract_publisher("") == "Unknown"

    def test_parses_rss_items(self):
        raw = {
            "widget": [
                {
                    "title": "Widget sales soar - Example Times",
                    "link": "https://news.example.com/1",
                    "pubDate": "Sat, 01 Jun 2024 12:00:00 GMT",
                },
                {"title": "Widget recall", "link": "https://news.example.com/2", "source": "Daily Wire"},
            ]
        }

        report = GoogleNewsAggregator().aggregate(["widget"], raw, now=NOW)
        items = report.results[0].items

        assert report.source == SourceName.GOOGLE_NEWS
        assert report.results[0].total_count == 2
        assert items[0].publisher == "Example Times"
        assert items[1].publisher == "Daily Wire"
        assert items[0].weight == pytest.approx(1.0)
        assert items[1].weight == pytest.approx(0.5)

    def test_caps_items(self):
        raw = {"widget": [{"title": f"Widget {i}"} for i in range(15)]}

        report = GoogleNewsAggregator(max_items=10).aggregate(["widget"], raw, now=NOW)

        assert report.results[0].total_count == 10
        assert len(report.results[0].items) == 10


class TestNewsDataAggregator:
    def test_total_from_provider(self):
        """Test that total is totalResults while only the first items are weighted."""
        raw = {
            "widget": {
                "totalResults": 42,
                "results": [
                    {"title": f"Widget {i}", "link": f"https://nd.example.com/{i}",
                     "pubDate": "2024-06-01 12:00:00", "source_id": "example"}
                    for i in range(8)
                ],
            }
        }

        report = NewsDataAggregator().aggregate(["widget"], raw, now=NOW)
        result = report.results[0]

        assert result.total_count == 42
        assert len(result.items) == 5
        assert result.weighted_count == pytest.approx(5.0)
        assert result.items[0].publisher == "example"

    def test_missing_total(self):
        report = NewsDataAggregator().aggregate(["widget"], {"widget": {"results": []}}, now=NOW)

        assert report.results[0].total_count == 0


class TestSerpApiAggregator:
    def test_parses_news_results(self):
        raw = {
            "widget": {
                "news_results": [
                    {
                        "title": "Widget maker expands",
                        "link": "https://serp.example.com/1",
                        "date": "06/01/2024, 12:00 PM, +0000 UTC",
                        "source": {"name": "Example Wire"},
                    },
                    {"title": "Widget review", "link": "not a url"},
                ]
            }
        }

        report = SerpApiAggregator().aggregate(["widget"], raw, now=NOW)
        items = report.results[0].items

        assert report.results[0].total_count == 2
        assert items[0].publisher == "Example Wire"
        assert items[0].weight == pytest.approx(1.0)
        assert items[1].url is None
        assert items[1].publisher is None

    def test_no_news_results(self):
        report = SerpApiAggregator().aggregate(["widget"], {"widget": {}}, now=NOW)

        assert report.results[0].total_count == 0


class TestGdeltAggregator:
    def test_parses_articles(self):
        raw = {
            "widget": {
                "articles": [
                    {
                        "title": "Widget exports",
                        "url": "https://gdelt.example.com/1",
                        "seendate": "20240601T120000Z",
                        "domain": "gdelt.example.com",
                    },
                    {
                        "title": "Widget imports",
                        "url": "https://gdelt.example.com/2",
                        "seendate": "20240529T120000Z",
                        "domain": "gdelt.example.com",
                    },
                ]
            }
        }

        report = GdeltAggregator().aggregate(["widget"], raw, now=NOW)
        result = report.results[0]

        assert result.total_count == 2
        # Three days old is one half-life
        assert result.weighted_count == pytest.approx(1.5)
        assert result.items[1].published_at == datetime(2024, 5, 29, 12, 0, tzinfo=timezone.utc)
        assert result.items[0].publisher == "gdelt.example.com"

    def test_malformed_payload_raises(self):
        with pytest.raises(AttributeError):
            GdeltAggregator().aggregate(["widget"], {"widget": ["not", "a", "dict"]}, now=NOW)
