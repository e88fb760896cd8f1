# src/trend_monitor/collectors/google_news_aggregator.py
import re
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter

# Google News RSS titles end with " - Publisher Name"
_PUBLISHER_SUFFIX = re.compile(r" - ([^-]+)$")


def extract_publisher(title: str) -> str:
    """Extract the publisher name from a Google News RSS title."""
    if not title:
        return "Unknown"
    match = _PUBLISHER_SUFFIX.search(title)
    return match.group(1).strip() if match else "Unknown"


class GoogleNewsAggregator(TermAggregator):
    """Aggregator for Google News RSS search results.

    Payload per term: list of RSS items {"title", "link", "pubDate", "source"}.
    Total is the number of items kept (at most max_items).
    """

    def __init__(self, max_items: int = 10, recency_weighter: Optional[RecencyWeighter] = None):
        super().__init__(
            name="google_news",
            source=SourceName.GOOGLE_NEWS,
            recency_weighter=recency_weighter,
        )
        self._max_items = max_items

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        items = []
        for entry in list(payload)[: self._max_items]:
            title = entry.get("title") or ""
            publisher = entry.get("source")
            if not isinstance(publisher, str) or not publisher:
                publisher = extract_publisher(title)
            items.append(
                self._make_article(
                    title=title,
                    url=entry.get("link"),
                    published=entry.get("pubDate") or entry.get("isoDate"),
                    now=now,
                    publisher=publisher,
                )
            )
        return len(items), items
