"""Per-monitor smoothed score history used for EMA and velocity."""
import threading
from typing import Optional, Protocol


class ScoreHistoryStore(Protocol):
    """Key-value store of the previous smoothed score per monitor."""

    def get(self, monitor_id: str) -> Optional[int]:
        ...

    def set(self, monitor_id: str, score: int) -> None:
        ...


class InMemoryScoreHistory:
    """Thread-safe in-process score history.

    Lost when the process exits unless seeded from persisted monitor
    records at start-up.
    """

    def __init__(self, initial: Optional[dict[str, int]] = None):
        self._scores: dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, monitor_id: str) -> Optional[int]:
        with self._lock:
            return self._scores.get(monitor_id)

    def set(self, monitor_id: str, score: int) -> None:
        with self._lock:
            self._scores[monitor_id] = score

    def __contains__(self, monitor_id: str) -> bool:
        with self._lock:
            return monitor_id in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)
