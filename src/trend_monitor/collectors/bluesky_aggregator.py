# src/trend_monitor/collectors/bluesky_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import TermAggregator, engagement_multiplier
from trend_monitor.models.article import Article, SourceName
from trend_monitor.scoring.recency_weighter import RecencyWeighter

MAX_TITLE_LENGTH = 200


def post_url(uri: Optional[str], handle: Optional[str]) -> Optional[str]:
    """Build the web URL of a post from its at:// URI and author handle."""
    if not uri or not handle:
        return None
    rkey = uri.rstrip("/").rsplit("/", 1)[-1]
    return f"https://bsky.app/profile/{handle}/post/{rkey}"


class BlueskyAggregator(TermAggregator):
    """Aggregator for Bluesky app.bsky.feed.searchPosts responses.

    Payload per term: {"posts": [{"uri", "record": {"text", "createdAt"},
    "likeCount", "repostCount", "replyCount", "author": {"handle"}}]}.
    Posts have no title, so the first characters of the text stand in.
    """

    def __init__(
        self,
        engagement_constant: float = 50.0,
        recency_weighter: Optional[RecencyWeighter] = None,
    ):
        super().__init__(
            name="bluesky",
            source=SourceName.BLUESKY,
            recency_weighter=recency_weighter,
        )
        self._engagement_constant = engagement_constant

    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        items = []
        for post in payload.get("posts") or []:
            record = post.get("record") or {}
            handle = (post.get("author") or {}).get("handle")
            likes = float(post.get("likeCount") or 0)
            reposts = float(post.get("repostCount") or 0)
            replies = float(post.get("replyCount") or 0)
            text = " ".join((record.get("text") or "").split())

            items.append(
                self._make_article(
                    title=text[:MAX_TITLE_LENGTH],
                    url=post_url(post.get("uri"), handle),
                    published=record.get("createdAt") or post.get("indexedAt"),
                    now=now,
                    engagement={"likes": likes, "reposts": reposts, "replies": replies},
                    multiplier=engagement_multiplier(
                        likes + reposts + replies, self._engagement_constant
                    ),
                    publisher=f"@{handle}" if handle else None,
                )
            )
        return len(items), items
