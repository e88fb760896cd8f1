"""Data model shared by aggregators, scorers and storage."""

from trend_monitor.models.article import Article, SourceName, SourceReport, SourceResult
from trend_monitor.models.monitor import (
    CheckInterval,
    InvalidMonitorConfiguration,
    Monitor,
    parse_terms,
)

__all__ = [
    "Article",
    "CheckInterval",
    "InvalidMonitorConfiguration",
    "Monitor",
    "SourceName",
    "SourceReport",
    "SourceResult",
    "parse_terms",
]
