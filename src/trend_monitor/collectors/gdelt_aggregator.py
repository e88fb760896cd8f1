# src/trend_monitor/collectors/gdelt_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter


class GdeltAggregator(TermAggregator):
    """Aggregator for GDELT DOC 2.0 artlist responses.

    Payload per term: {"articles": [{"title", "url", "seendate", "domain"}]}
    where seendate looks like 20240115T083000Z.
    """

    def __init__(self, recency_weighter: Optional[RecencyWeighter] = None):
        super().__init__(
            name="gdelt",
            source=SourceName.GDELT,
            recency_weighter=recency_weighter,
        )

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        items = [
            self._make_article(
                title=entry.get("title") or "",
                url=entry.get("url"),
                published=entry.get("seendate"),
                now=now,
                publisher=entry.get("domain"),
            )
            for entry in payload.get("articles") or []
        ]
        return len(items), items
