# src/trend_monitor/storage/alert_store.py
"""Append-only JSON-lines log of trend alerts."""

import json
import logging
from datetime import date
from pathlib import Path

from trend_monitor.notifications.models import Alert

logger = logging.getLogger(__name__)


class AlertStore:
    """Stores alerts one JSON object per line.

    At most one alert per monitor per day is expected; callers check
    exists_for_day before appending.
    """

    def __init__(self, path: Path = Path("data/alerts.jsonl")):
        """Initialize the store.

        Args:
            path: JSON-lines file holding the alerts.
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Alert]:
        """Read all alerts, skipping corrupt lines."""
        if not self._path.exists():
            return []

        alerts = []
        with open(self._path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    alerts.append(Alert.from_record(json.loads(line)))
                except (KeyError, ValueError) as e:
                    logger.warning(f"Skipping corrupt alert at {self._path}:{line_number}: {e}")
        return alerts

    def exists_for_day(self, monitor_id: str, day: date) -> bool:
        """Check whether an alert was already raised for a monitor on a day."""
        return any(
            alert.monitor_id == monitor_id and alert.timestamp.date() == day
            for alert in self.load()
        )

    def append(self, alert: Alert) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(json.dumps(alert.to_record(), ensure_ascii=False) + "\n")
