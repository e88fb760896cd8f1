# src/trend_monitor/storage/fetched_data_loader.py
"""Loads provider payloads that were fetched ahead of a run."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FetchedDataLoader:
    """Reads <fetched_dir>/<monitor_id>.json, a map of source name -> payload.

    A missing file means nothing was fetched for the monitor: every source
    is absent and the scorers fall back to their defaults.
    """

    def __init__(self, fetched_dir: Path = Path("data/fetched")):
        self._fetched_dir = fetched_dir

    def path_for(self, monitor_id: str) -> Path:
        return self._fetched_dir / f"{monitor_id}.json"

    def load(self, monitor_id: str) -> dict[str, Any]:
        """Load the payloads fetched for one monitor.

        Args:
            monitor_id: The monitor's identifier.

        Returns:
            Provider payloads keyed by source name; empty if none were fetched.

        Raises:
            ValueError: If the file is not a JSON object.
        """
        path = self.path_for(monitor_id)
        if not path.exists():
            logger.warning(f"No fetched data for {monitor_id} at {path}")
            return {}

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Fetched data for {monitor_id} must be a JSON object")
        return data
