"""Data models for the monitor runner."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from trend_monitor.scoring.models import ScoreSnapshot


class MonitorStatus(Enum):
    """Outcome of one monitor in a run."""

    CHECKED = "checked"
    ALERTED = "alerted"
    DUPLICATE_ALERT = "duplicate_alert"
    ERROR = "error"


@dataclass
class MonitorOutcome:
    """Result of running one monitor through the pipeline."""

    monitor_id: str
    status: MonitorStatus
    snapshot: ScoreSnapshot | None = None
    alert_id: str | None = None
    error: str | None = None


@dataclass
class RunSummary:
    """Counts of one run over all monitors.

    Attributes:
        total_monitors: Active monitors read from storage.
        due_monitors: Monitors whose interval had elapsed (all in backfill).
        checked: Monitors scored successfully.
        alerts_created: Alerts written.
        duplicate_alerts: Alerts skipped because one exists for today.
        invalid_monitors: Records skipped for invalid configuration.
        errors: Monitors whose scoring pass failed.
        dry_run: Whether writes were suppressed.
        outcomes: Per-monitor outcomes in processing order.
        started_at: When the run started.
        completed_at: When the run finished.
    """

    total_monitors: int = 0
    due_monitors: int = 0
    checked: int = 0
    alerts_created: int = 0
    duplicate_alerts: int = 0
    invalid_monitors: int = 0
    errors: int = 0
    dry_run: bool = False
    outcomes: list[MonitorOutcome] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.errors > 0 else 0
