# src/trend_monitor/collectors/serpapi_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter


class SerpApiAggregator(TermAggregator):
    """Aggregator for SerpAPI google_news engine responses.

    Payload per term: {"news_results": [{"title", "link", "date",
    "source": {"name"}}]}. Total is the number of news results.
    """

    def __init__(self, recency_weighter: Optional[RecencyWeighter] = None):
        super().__init__(
            name="serpapi",
            source=SourceName.SERPAPI,
            recency_weighter=recency_weighter,
        )

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        items = [
            self._make_article(
                title=entry.get("title") or "",
                url=entry.get("link"),
                published=entry.get("date"),
                now=now,
                publisher=(entry.get("source") or {}).get("name"),
            )
            for entry in payload.get("news_results") or []
        ]
        return len(items), items
