# src/trend_monitor/collectors/hackernews_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator, engagement_multiplier
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter

HN_ITEM_URL = "https://news.ycombinator.com/item?id={}"


class HackerNewsAggregator(TermAggregator):
    """Aggregator for Hacker News Algolia search responses.

    Payload per term: {"nbHits": int, "hits": [{"title", "url",
    "created_at_i", "points", "num_comments", "objectID"}]}. Total is
    nbHits; Ask HN posts without a url link to the discussion page.
    """

    def __init__(
        self,
        engagement_constant: float = 50.0,
        recency_weighter: Optional[RecencyWeighter] = None,
    ):
        super().__init__(
            name="hackernews",
            source=SourceName.HACKERNEWS,
            recency_weighter=recency_weighter,
        )
        self._engagement_constant = engagement_constant

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        hits = payload.get("hits") or []
        items = []
        for hit in hits:
            points = float(hit.get("points") or 0)
            comments = float(hit.get("num_comments") or 0)

            url = hit.get("url")
            if not url and hit.get("objectID"):
                url = HN_ITEM_URL.format(hit["objectID"])

            items.append(
                self._make_article(
                    title=hit.get("title") or hit.get("story_title") or "",
                    url=url,
                    published=hit.get("created_at_i") or hit.get("created_at"),
                    now=now,
                    engagement={"points": points, "num_comments": comments},
                    multiplier=engagement_multiplier(points + comments, self._engagement_constant),
                    publisher="Hacker News",
                )
            )
        total = payload.get("nbHits")
        if total is None:
            total = len(items)
        return int(total), items
