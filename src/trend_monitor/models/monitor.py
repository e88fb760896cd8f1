# src/trend_monitor/models/monitor.py
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class InvalidMonitorConfiguration(ValueError):
    """Raised when a monitor cannot be scored (no terms, bad threshold...)."""


class CheckInterval(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def days(self) -> int:
        """Minimum number of days between two checks."""
        if self == CheckInterval.WEEKLY:
            return 7
        elif self == CheckInterval.MONTHLY:
            return 30
        return 1

    @classmethod
    def parse(cls, value: Any) -> "CheckInterval":
        """Accept 'daily'/'day', 'weekly'/'week', 'monthly'/'month'."""
        if isinstance(value, cls):
            return value
        aliases = {"day": cls.DAILY, "week": cls.WEEKLY, "month": cls.MONTHLY}
        text = str(value).strip().lower()
        if text in aliases:
            return aliases[text]
        return cls(text)


def parse_terms(terms: Any) -> list[str]:
    """Split comma-separated terms, trim, drop empties, keep order."""
    if terms is None:
        return []
    if isinstance(terms, str):
        terms = terms.split(",")
    return [str(term).strip() for term in terms if str(term).strip()]


class Monitor(BaseModel):
    """A named tracking configuration scored repeatedly over time."""

    id: str = Field(min_length=1)
    terms: list[str]
    threshold: float = Field(default=20.0, gt=0)
    interval: CheckInterval = CheckInterval.WEEKLY
    last_check: Optional[date] = None
    active: bool = True

    # Most recent score snapshot (None until the first run)
    trend_score: Optional[int] = None
    smoothed_score: Optional[int] = None
    coherence: Optional[int] = None
    confidence: Optional[int] = None
    change_percent: Optional[int] = None

    @field_validator("terms", mode="before")
    @classmethod
    def _split_terms(cls, value: Any) -> list[str]:
        terms = parse_terms(value)
        if not terms:
            raise ValueError("monitor must have at least one search term")
        return terms

    @field_validator("interval", mode="before")
    @classmethod
    def _parse_interval(cls, value: Any) -> CheckInterval:
        return CheckInterval.parse(value)

    @classmethod
    def from_record(cls, record: dict) -> "Monitor":
        """Build a monitor from a canonical record.

        Raises:
            InvalidMonitorConfiguration: If the record fails validation.
        """
        try:
            return cls(**record)
        except ValidationError as e:
            monitor_id = record.get("id", "<unknown>")
            raise InvalidMonitorConfiguration(
                f"Invalid monitor {monitor_id}: {e.errors()[0]['msg']}"
            ) from e

    @property
    def history_score(self) -> Optional[int]:
        """Score to seed smoothing history with (smoothed preferred)."""
        if self.smoothed_score is not None:
            return self.smoothed_score
        return self.trend_score

    def is_due(self, today: date) -> bool:
        """Check whether the monitor's interval has elapsed.

        Args:
            today: The current date.

        Returns:
            True if never checked or at least interval.days have passed.
        """
        if self.last_check is None:
            return True
        return (today - self.last_check).days >= self.interval.days
