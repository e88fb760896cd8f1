# src/trend_monitor/collectors/reddit_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator, engagement_multiplier
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter

REDDIT_BASE_URL = "https://www.reddit.com"


class RedditAggregator(TermAggregator):
    """Aggregator for Reddit search listings.

    Payload per term: {"data": {"children": [{"data": post}]}} where each
    post carries title, url, permalink, created_utc, score, num_comments
    and subreddit. Upvotes plus comments boost the item weight.
    """

    def __init__(
        self,
        engagement_constant: float = 100.0,
        recency_weighter: Optional[RecencyWeighter] = None,
    ):
        super().__init__(
            name="reddit",
            source=SourceName.REDDIT,
            recency_weighter=recency_weighter,
        )
        self._engagement_constant = engagement_constant

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        children = (payload.get("data") or {}).get("children") or []
        items = []
        for child in children:
            post = child.get("data") or {}
            score = float(post.get("score") or 0)
            comments = float(post.get("num_comments") or 0)
            subreddit = post.get("subreddit")

            url = post.get("url")
            if not url and post.get("permalink"):
                url = f"{REDDIT_BASE_URL}{post['permalink']}"

            items.append(
                self._make_article(
                    title=post.get("title") or "",
                    url=url,
                    published=post.get("created_utc"),
                    now=now,
                    engagement={"score": score, "num_comments": comments},
                    multiplier=engagement_multiplier(score + comments, self._engagement_constant),
                    publisher=f"r/{subreddit}" if subreddit else None,
                )
            )
        return len(items), items
