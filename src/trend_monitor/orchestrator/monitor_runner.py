# src/trend_monitor/orchestrator/monitor_runner.py
"""Sequential run over all active monitors."""

import logging
from datetime import date, datetime, timezone
from typing import Optional

from trend_monitor.collectors.aggregator_manager import AggregatorManager
from trend_monitor.models.monitor import Monitor
from trend_monitor.notifications.alert_formatter import AlertFormatter
from trend_monitor.notifications.models import Alert, AlertType, new_alert_id
from trend_monitor.orchestrator.models import MonitorOutcome, MonitorStatus, RunSummary
from trend_monitor.scoring.models import ScoreSnapshot
from trend_monitor.scoring.score_history import ScoreHistoryStore
from trend_monitor.scoring.trend_analyzer import TrendAnalyzer, should_alert
from trend_monitor.storage.alert_store import AlertStore
from trend_monitor.storage.fetched_data_loader import FetchedDataLoader
from trend_monitor.storage.monitor_store import MonitorStore
from trend_monitor.storage.report_store import ReportStore

logger = logging.getLogger(__name__)


class MonitorRunner:
    """Scores every due monitor once and persists the results.

    For each monitor, in file order:
    1. seed the score history from the persisted snapshot
    2. load the fetched payloads and project them per source
    3. run the scoring pass and write the snapshot back
    4. raise an alert when the change crosses the threshold, at most
       once per monitor per day

    A failing monitor is logged and counted; the run continues. Dry runs
    score everything but write nothing. Backfill runs ignore intervals,
    write a report per monitor and raise no alerts.
    """

    def __init__(
        self,
        monitor_store: MonitorStore,
        alert_store: AlertStore,
        data_loader: FetchedDataLoader,
        aggregator_manager: AggregatorManager,
        analyzer: TrendAnalyzer,
        formatter: Optional[AlertFormatter] = None,
        report_store: Optional[ReportStore] = None,
        dry_run: bool = False,
        backfill: bool = False,
    ):
        self._monitor_store = monitor_store
        self._alert_store = alert_store
        self._data_loader = data_loader
        self._aggregators = aggregator_manager
        self._analyzer = analyzer
        self._formatter = formatter or AlertFormatter()
        self._report_store = report_store
        self._dry_run = dry_run
        self._backfill = backfill

    @property
    def history(self) -> ScoreHistoryStore:
        return self._analyzer.engine.history

    def run(self, now: Optional[datetime] = None) -> RunSummary:
        """Process all active monitors.

        Args:
            now: Reference time of the run (defaults to current UTC time).

        Returns:
            RunSummary with the run's counts.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        today = now.date()

        summary = RunSummary(dry_run=self._dry_run, started_at=now)
        if self._dry_run:
            logger.info("Mode: DRY RUN (no updates will be made)")

        monitors, invalid = self._monitor_store.load_monitors(active_only=True)
        summary.total_monitors = len(monitors)
        summary.invalid_monitors = invalid
        logger.info(f"Found {len(monitors)} active monitors")

        if self._backfill:
            due = monitors
        else:
            due = [monitor for monitor in monitors if monitor.is_due(today)]
        summary.due_monitors = len(due)
        logger.info(f"{len(due)} monitors due for check")

        for monitor in due:
            try:
                outcome = self.process_monitor(monitor, now)
            except Exception as e:
                logger.error(f"Error analyzing {monitor.id}: {e}")
                summary.errors += 1
                summary.outcomes.append(
                    MonitorOutcome(monitor.id, MonitorStatus.ERROR, error=str(e))
                )
                continue

            summary.checked += 1
            if outcome.status == MonitorStatus.ALERTED:
                summary.alerts_created += 1
            elif outcome.status == MonitorStatus.DUPLICATE_ALERT:
                summary.duplicate_alerts += 1
            summary.outcomes.append(outcome)

        summary.completed_at = datetime.now(timezone.utc)
        return summary

    def process_monitor(self, monitor: Monitor, now: datetime) -> MonitorOutcome:
        """Run one monitor through load, score, persist and alert."""
        self._seed_history(monitor)

        raw_by_source = self._data_loader.load(monitor.id)
        reports = self._aggregators.aggregate_all(monitor.terms, raw_by_source, now=now)
        snapshot = self._analyzer.analyze(monitor, reports, now=now)

        if self._dry_run:
            logger.info(
                f"[DRY RUN] Would update {monitor.id}: trend_score={snapshot.trend_score} "
                f"coherence={snapshot.coherence.score} confidence={snapshot.confidence.confidence}"
            )
        else:
            self._monitor_store.save_snapshot(monitor.id, snapshot, now.date())
            if self._report_store is not None:
                self._report_store.write(monitor.id, self._formatter.format_report(monitor, snapshot))

        if self._backfill or not should_alert(monitor, snapshot):
            return MonitorOutcome(monitor.id, MonitorStatus.CHECKED, snapshot=snapshot)

        logger.info(
            f"THRESHOLD EXCEEDED for {monitor.id}: {snapshot.change_percent}% "
            f"(threshold: {monitor.threshold:g}%)"
        )
        return self._raise_alert(monitor, snapshot, now)

    def _seed_history(self, monitor: Monitor) -> None:
        persisted = monitor.history_score
        if persisted is not None and self.history.get(monitor.id) is None:
            self.history.set(monitor.id, persisted)

    def _raise_alert(self, monitor: Monitor, snapshot: ScoreSnapshot, now: datetime) -> MonitorOutcome:
        if self._alert_store.exists_for_day(monitor.id, now.date()):
            logger.info(f"Skipping duplicate alert for {monitor.id}")
            return MonitorOutcome(monitor.id, MonitorStatus.DUPLICATE_ALERT, snapshot=snapshot)

        alert = Alert(
            alert_id=new_alert_id(now),
            alert_type=AlertType.TREND,
            monitor_id=monitor.id,
            entity=", ".join(monitor.terms)[:100],
            content=self._formatter.format_alert_content(snapshot)[:200],
            confidence=snapshot.confidence.confidence,
            message=self._formatter.format_trend_alert(monitor, snapshot),
            timestamp=now,
        )

        if self._dry_run:
            logger.info(f"[DRY RUN] Would create alert for {monitor.id}")
        else:
            self._alert_store.append(alert)

        return MonitorOutcome(
            monitor.id, MonitorStatus.ALERTED, snapshot=snapshot, alert_id=alert.alert_id
        )
