# src/trend_monitor/collectors/newsdata_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter


class NewsDataAggregator(TermAggregator):
    """Aggregator for NewsData.io /news responses.

    Payload per term: {"totalResults": int, "results": [{"title", "link",
    "pubDate", "source_id"}]}. Total is the provider's totalResults while
    only the first max_items articles are weighted.
    """

    def __init__(self, max_items: int = 5, recency_weighter: Optional[RecencyWeighter] = None):
        super().__init__(
            name="newsdata",
            source=SourceName.NEWSDATA,
            recency_weighter=recency_weighter,
        )
        self._max_items = max_items

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        entries = (payload.get("results") or [])[: self._max_items]
        items = [
            self._make_article(
                title=entry.get("title") or "",
                url=entry.get("link"),
                published=entry.get("pubDate"),
                now=now,
                publisher=entry.get("source_id"),
            )
            for entry in entries
        ]
        total = payload.get("totalResults") or 0
        return int(total), items
