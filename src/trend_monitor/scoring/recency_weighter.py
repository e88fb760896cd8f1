# src/trend_monitor/scoring/recency_weighter.py
"""Exponential recency decay for article timestamps."""
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional

# GDELT "seendate" format, e.g. 20240115T083000Z
_GDELT_PATTERN = re.compile(r"^\d{8}T\d{6}Z$")

# SerpAPI google_news "date", e.g. "01/15/2024, 08:00 AM, +0000 UTC"
_SERPAPI_FORMAT = "%m/%d/%Y, %I:%M %p, %z"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse the timestamp formats the source providers emit.

    Accepts datetimes, epoch seconds, ISO-8601, RFC 2822 (RSS pubDate),
    GDELT compact and SerpAPI strings. Naive results are assumed UTC.

    Args:
        value: Raw timestamp value.

    Returns:
        Timezone-aware datetime, or None if missing or unparseable.
    """
    if value is None or value == "":
        return None

    parsed: Optional[datetime] = None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        parsed = _parse_string(value.strip())

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_string(text: str) -> Optional[datetime]:
    if _GDELT_PATTERN.match(text):
        try:
            return datetime.strptime(text, "%Y%m%dT%H%M%SZ").replace(tzinfo=timezone.utc)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    try:
        return datetime.strptime(text.replace(" UTC", ""), _SERPAPI_FORMAT)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


class RecencyWeighter:
    """Converts timestamps into decay-weighted relevance multipliers.

    weight = 2 ** (-age_days / half_life_days)

    - Age 0 -> 1.0
    - Age of one half-life -> 0.5
    - Missing or unparseable timestamp -> unknown_weight (0.5)
    - Future timestamps are treated as age 0

    Attributes:
        half_life_days: Days after which an item keeps half its weight.
        unknown_weight: Weight for items without a usable timestamp.
    """

    SECONDS_PER_DAY = 86400.0

    def __init__(self, half_life_days: float = 3.0, unknown_weight: float = 0.5):
        """Initialize the weighter.

        Args:
            half_life_days: Half-life of the decay in days (default 3).
            unknown_weight: Weight for missing timestamps (default 0.5).
        """
        self._half_life_days = half_life_days
        self._unknown_weight = unknown_weight

    @property
    def half_life_days(self) -> float:
        return self._half_life_days

    def weight_for_age(self, age_days: float) -> float:
        """Decay weight for an age in days (negative ages clamp to 0)."""
        age_days = max(0.0, age_days)
        return 2 ** (-age_days / self._half_life_days)

    def calculate_weight(self, timestamp: Any, now: Optional[datetime] = None) -> float:
        """Calculate the recency weight of a timestamp.

        Args:
            timestamp: Datetime or any format accepted by parse_timestamp.
            now: Reference time (defaults to current UTC time).

        Returns:
            Weight in (0, 1].
        """
        published = parse_timestamp(timestamp)
        if published is None:
            return self._unknown_weight

        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        age_days = (now - published).total_seconds() / self.SECONDS_PER_DAY
        weight = self.weight_for_age(age_days)
        # Extremely old items underflow to 0.0, keep the weight positive
        return max(weight, 1e-9)
