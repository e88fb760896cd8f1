# src/trend_monitor/collectors/aggregator_manager.py
"""Aggregator manager for projecting every source's payload in one pass."""
import logging
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import BaseAggregator
from trend_monitor.models.article import SourceReport

logger = logging.getLogger(__name__)


class AggregatorManager:
    """Runs all registered aggregators over one monitor's fetched data."""

    def __init__(self, aggregators: list[BaseAggregator]):
        """Initialize the aggregator manager.

        Args:
            aggregators: List of aggregator instances to manage, one per source.
        """
        self._aggregators = aggregators

    @property
    def aggregators(self) -> list[BaseAggregator]:
        """Return the list of managed aggregators."""
        return self._aggregators

    @property
    def source_count(self) -> int:
        return len(self._aggregators)

    def aggregate_all(
        self,
        terms: list[str],
        raw_by_source: dict[str, Any],
        now: Optional[datetime] = None,
    ) -> list[SourceReport]:
        """Project each source's raw payload into a SourceReport.

        Sources missing from raw_by_source are absent. A payload that an
        aggregator cannot parse is logged and treated as absent too, so one
        malformed provider response never fails the whole monitor.

        Args:
            terms: The monitor's search terms.
            raw_by_source: Provider payloads keyed by source name.
            now: Reference time for recency weighting.

        Returns:
            Reports of the present sources, in registration order.
        """
        reports = []
        for aggregator in self._aggregators:
            raw = raw_by_source.get(aggregator.name)
            try:
                report = aggregator.aggregate(terms, raw, now=now)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Malformed {aggregator.name} payload, skipping source: {e}")
                continue
            if report is not None:
                reports.append(report)
        return reports
