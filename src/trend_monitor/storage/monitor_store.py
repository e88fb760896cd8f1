# src/trend_monitor/storage/monitor_store.py
"""JSON file persistence for monitor records and their score snapshots."""

import json
import logging
import math
import os
from datetime import date
from pathlib import Path
from typing import Any, Optional

from trend_monitor.models.monitor import InvalidMonitorConfiguration, Monitor
from trend_monitor.numeric import round_half_up
from trend_monitor.scoring.models import ScoreSnapshot

logger = logging.getLogger(__name__)

# Canonical field -> accepted spellings, canonical first
FIELD_VARIANTS = {
    "id": ["id", "monitor_id", "monitorId"],
    "terms": ["terms", "search_terms", "searchTerms"],
    "threshold": ["threshold"],
    "interval": ["interval"],
    "last_check": ["last_check", "lastCheck"],
    "active": ["active"],
    "trend_score": ["trend_score", "trendScore"],
    "smoothed_score": ["smoothed_score", "smoothedScore"],
    "coherence": ["coherence", "Coherency", "coherency"],
    "confidence": ["confidence"],
    "change_percent": ["change_percent", "changePercent"],
}


# Snapshot fields written back after each pass
SNAPSHOT_FIELDS = ("trend_score", "smoothed_score", "coherence", "confidence", "change_percent")


def _normalize_snapshot_value(field_name: str, value: Any) -> Optional[int]:
    """Coerce a stored snapshot number to the integer percent form.

    Fractions are rounded half up and a confidence stored as a 0-1 float
    is scaled to percent. Returns None for values that are not numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return None
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    if field_name == "confidence" and isinstance(value, float) and 0.0 <= value <= 1.0:
        value = value * 100
    return round_half_up(value)


def _record_id(record: dict[str, Any]) -> Optional[str]:
    for key in FIELD_VARIANTS["id"]:
        if record.get(key) is not None:
            return record[key]
    return None


def canonicalize_record(record: dict[str, Any]) -> dict[str, Any]:
    """Map a stored record's naming variants onto canonical Monitor fields.

    The first non-null spelling wins. Unknown keys are dropped, and snapshot
    values that are not numbers are dropped with a warning so the monitor is
    still scored.
    """
    canonical = {}
    for field_name, variants in FIELD_VARIANTS.items():
        for key in variants:
            value = record.get(key)
            if value is not None:
                canonical[field_name] = value
                break

    for field_name in SNAPSHOT_FIELDS:
        if field_name not in canonical:
            continue
        normalized = _normalize_snapshot_value(field_name, canonical[field_name])
        if normalized is None:
            logger.warning(
                f"Ignoring stored {field_name} {canonical[field_name]!r} "
                f"for monitor {canonical.get('id', '<unknown>')}"
            )
            del canonical[field_name]
        else:
            canonical[field_name] = normalized
    return canonical


class MonitorStore:
    """Stores monitor records in a single JSON file.

    The file holds either a list of records or {"monitors": [...]}. Records
    are cached in memory after the first read; writes go through to disk.
    """

    def __init__(self, path: Path = Path("data/monitors.json")):
        """Initialize the store.

        Args:
            path: JSON file holding the monitor records.
        """
        self._path = path
        self._records: Optional[list[dict[str, Any]]] = None

    @property
    def path(self) -> Path:
        return self._path

    def load_records(self) -> list[dict[str, Any]]:
        """Raw records as stored, in file order."""
        if self._records is None:
            self._records = self._read()
        return self._records

    def load_monitors(self, active_only: bool = True) -> tuple[list[Monitor], int]:
        """Load and validate monitors.

        Invalid records are logged and skipped.

        Args:
            active_only: Skip records whose active flag is false.

        Returns:
            Tuple of (valid monitors, number of invalid records skipped).
        """
        monitors = []
        invalid = 0
        for record in self.load_records():
            try:
                monitor = Monitor.from_record(canonicalize_record(record))
            except InvalidMonitorConfiguration as e:
                logger.warning(f"Skipping monitor record: {e}")
                invalid += 1
                continue
            if active_only and not monitor.active:
                continue
            monitors.append(monitor)
        return monitors, invalid

    def save_snapshot(self, monitor_id: str, snapshot: ScoreSnapshot, checked_on: date) -> bool:
        """Write a scoring pass back onto the monitor's record.

        Naming variants of the written fields are replaced by the canonical
        spelling so later reads are unambiguous.

        Args:
            monitor_id: Monitor to update.
            snapshot: Result of the scoring pass.
            checked_on: Date recorded as last_check.

        Returns:
            True if the record was found and written.
        """
        records = self.load_records()
        for record in records:
            if _record_id(record) != monitor_id:
                continue

            updates = {
                "last_check": checked_on.isoformat(),
                "trend_score": snapshot.trend.trend_score,
                "smoothed_score": snapshot.trend.smoothed_score,
                "coherence": snapshot.coherence.score,
                "confidence": snapshot.confidence.confidence,
                "change_percent": snapshot.trend.change_percent,
            }
            for field_name, value in updates.items():
                for variant in FIELD_VARIANTS[field_name][1:]:
                    record.pop(variant, None)
                record[field_name] = value

            self._write(records)
            return True

        logger.warning(f"Monitor {monitor_id} not found in {self._path}")
        return False

    def _read(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            logger.warning(f"Monitor file {self._path} does not exist")
            return []
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("monitors", [])
        return [record for record in data if isinstance(record, dict)]

    def _write(self, records: list[dict[str, Any]]) -> None:
        # Write a sibling file, then swap it in
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump({"monitors": records}, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(self._path)
