# tests/integration/test_end_to_end.py
"""End-to-end scoring scenarios across aggregation, scoring and storage."""
import json
from datetime import datetime, timezone

import pytest

from trend_monitor.collectors import AggregatorManager, GdeltAggregator, GoogleTrendsAggregator, RedditAggregator
from trend_monitor.models.article import SourceName, SourceReport, SourceResult
from trend_monitor.models.monitor import Monitor
from trend_monitor.orchestrator import MonitorRunner, MonitorStatus
from trend_monitor.scoring import TrendAnalyzer
from trend_monitor.scoring.models import TrendDirection
from trend_monitor.storage import AlertStore, FetchedDataLoader, MonitorStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestSingleSourceScenario:
    """One news source with 10 items (8 weighted) and a trend feed with no term match."""

    @pytest.fixture
    def reports(self):
        return [
            SourceReport(
                source=SourceName.NEWSDATA,
                results=[SourceResult(term="widget", total_count=10, weighted_count=8.0)],
                scanned_count=10,
            ),
            SourceReport(
                source=SourceName.GOOGLE_TRENDS,
                results=[SourceResult(term="widget", total_count=0, weighted_count=0.0)],
                scanned_count=80,
                region_matches={"US": 3, "GB": 1, "CA": 0, "AU": 0},
            ),
        ]

    def test_factors(self, reports):
        monitor = Monitor(id="widget", terms=["widget"])

        snapshot = TrendAnalyzer().analyze(monitor, reports, now=NOW)
        factors = snapshot.trend.factors

        assert factors.recency == 80
        assert factors.momentum == 50
        assert factors.relevance == 0
        assert factors.sentiment == 50
        # 0.80 reliability x min(100, 10 / 50 x 100)
        assert factors.authority == 16
        assert snapshot.trend_score == 39
        assert snapshot.change_percent == -22
        assert snapshot.direction == TrendDirection.STRONG_DOWN

    def test_repeated_pass_is_stable(self, reports):
        """Test that identical inputs converge: no change on the second pass."""
        monitor = Monitor(id="widget", terms=["widget"])
        analyzer = TrendAnalyzer()

        analyzer.analyze(monitor, reports, now=NOW)
        second = analyzer.analyze(monitor, reports, now=NOW)

        assert second.trend.previous_score == 39
        assert second.trend.smoothed_score == 39
        assert second.change_percent == 0
        assert second.direction == TrendDirection.STABLE


class TestFetchedDataPipeline:
    """Full runs from fetched provider payloads to stored snapshots and alerts."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        (tmp_path / "monitors.json").write_text(json.dumps({
            "monitors": [
                {"monitorId": "widget", "searchTerms": "widget, gadget", "threshold": 10, "interval": "daily"},
            ]
        }))
        fetched = tmp_path / "fetched"
        fetched.mkdir()
        (fetched / "widget.json").write_text(json.dumps({
            "google_trends": {
                "regions": {
                    "US": [{"title": "Widget shortage", "description": "", "traffic": "50K+"}],
                    "GB": [{"title": "Cricket", "description": ""}],
                    "CA": [{"title": "Gadget show", "description": "widget reveal"}],
                    "AU": None,
                }
            },
            "gdelt": {
                "widget": {"articles": [
                    {"title": "Widget shortage hits stores", "url": "https://g.example.com/1?utm_source=feed",
                     "seendate": "20240601T090000Z"},
                    {"title": "Widget shortage hits stores", "url": "https://g.example.com/1",
                     "seendate": "20240601T090000Z"},
                ]},
                "gadget": {"articles": [
                    {"title": "Gadget fair opens", "url": "https://g.example.com/2", "seendate": "20240531T090000Z"},
                ]},
            },
            "reddit": {
                "widget": {"data": {"children": [
                    {"data": {"title": "Anyone else hit by the widget shortage?",
                              "permalink": "/r/gadgets/comments/x1/", "created_utc": 1717228800,
                              "score": 80, "num_comments": 40, "subreddit": "gadgets"}},
                ]}},
            },
            "hackernews": "ignored: no aggregator registered",
        }))
        return tmp_path

    def make_runner(self, data_dir):
        return MonitorRunner(
            monitor_store=MonitorStore(data_dir / "monitors.json"),
            alert_store=AlertStore(data_dir / "alerts.jsonl"),
            data_loader=FetchedDataLoader(data_dir / "fetched"),
            aggregator_manager=AggregatorManager(
                [GoogleTrendsAggregator(), GdeltAggregator(), RedditAggregator()]
            ),
            analyzer=TrendAnalyzer(),
        )

    def test_run(self, data_dir):
        summary = self.make_runner(data_dir).run(now=NOW)
        snapshot = summary.outcomes[0].snapshot

        assert summary.checked == 1
        assert snapshot.trend.data_sources_used == 3
        # Two trending topics matched, in US and CA
        assert snapshot.trend.factors.relevance == 50
        assert snapshot.trend.factors.momentum == 50
        # Two gdelt copies of one story merge into a single article
        assert snapshot.deduplication.original_count == 6
        assert snapshot.deduplication.deduplicated_count < 6
        assert 0 <= snapshot.trend_score <= 100
        assert 10 <= snapshot.confidence.confidence <= 98

        record = json.loads((data_dir / "monitors.json").read_text())["monitors"][0]
        assert record["monitorId"] == "widget"
        assert record["trend_score"] == snapshot.trend_score
        assert record["last_check"] == "2024-06-01"

    def test_alert_matches_outcome(self, data_dir):
        summary = self.make_runner(data_dir).run(now=NOW)
        outcome = summary.outcomes[0]
        alerts = AlertStore(data_dir / "alerts.jsonl").load()

        if abs(outcome.snapshot.change_percent) >= 10:
            assert outcome.status == MonitorStatus.ALERTED
            assert [a.alert_id for a in alerts] == [outcome.alert_id]
            assert alerts[0].entity == "widget, gadget"
        else:
            assert outcome.status == MonitorStatus.CHECKED
            assert alerts == []
