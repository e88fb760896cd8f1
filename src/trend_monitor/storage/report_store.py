# src/trend_monitor/storage/report_store.py
"""Writes per-monitor analysis reports as text files."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ReportStore:
    """Keeps the latest analysis report of each monitor in <reports_dir>/<id>.txt."""

    def __init__(self, reports_dir: Path = Path("data/reports")):
        self._reports_dir = reports_dir

    def path_for(self, monitor_id: str) -> Path:
        return self._reports_dir / f"{monitor_id}.txt"

    def write(self, monitor_id: str, report: str) -> Path:
        """Replace the monitor's report and return its path."""
        self._reports_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(monitor_id)
        path.write_text(report + "\n", encoding="utf-8")
        logger.debug(f"Wrote report for {monitor_id} to {path}")
        return path
