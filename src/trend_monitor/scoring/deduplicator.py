# src/trend_monitor/scoring/deduplicator.py
"""Cross-source article deduplication by URL and title similarity."""
import logging
import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from trend_monitor.models.article import Article
from trend_monitor.scoring.models import DeduplicationResult

logger = logging.getLogger(__name__)

DEFAULT_TRACKING_PARAMS = ["utm_*", "ref", "source", "fbclid", "gclid", "msclkid"]

_NON_ALPHANUMERIC = re.compile(r"[\W_]+")


def jaccard_similarity(a: set[str], b: set[str]) -> float:
    """Jaccard index of two token sets; two empty sets score 0."""
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


class ArticleDeduplicator:
    """Merges near-duplicate articles reported by several sources.

    Two phases, first match wins:
    1. URL-exact: URLs are lowercased and stripped of tracking parameters;
       identical URLs merge into the first-seen article.
    2. Title similarity: each surviving article is compared with the first
       article of every existing group by Jaccard similarity of title
       tokens; at or above the threshold it joins the first such group.

    Merged articles contribute their sources to the kept article. Output
    keeps first-seen order.
    """

    def __init__(
        self,
        title_similarity_threshold: float = 0.6,
        min_token_length: int = 3,
        tracking_params: Optional[list[str]] = None,
    ):
        """Initialize the deduplicator.

        Args:
            title_similarity_threshold: Minimum Jaccard similarity to merge titles.
            min_token_length: Shortest title token that takes part in matching.
            tracking_params: Query parameters to strip; a trailing * matches a prefix.
        """
        self._threshold = title_similarity_threshold
        self._min_token_length = min_token_length
        params = tracking_params if tracking_params is not None else DEFAULT_TRACKING_PARAMS
        self._exact_params = {p.lower() for p in params if not p.endswith("*")}
        self._prefix_params = tuple(p[:-1].lower() for p in params if p.endswith("*"))

    def normalize_url(self, url: Optional[str]) -> Optional[str]:
        """Lowercase a URL and drop its tracking query parameters.

        Remaining parameters keep their original order.

        Args:
            url: The article URL.

        Returns:
            Normalized URL, or None if url is empty.
        """
        if not url:
            return None
        parts = urlsplit(url.strip().lower())
        kept = [
            pair
            for pair in parts.query.split("&")
            if pair and not self._is_tracking_param(pair.split("=", 1)[0])
        ]
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(kept), parts.fragment))

    def title_tokens(self, title: Optional[str]) -> set[str]:
        """Lowercased alphanumeric title tokens of at least min_token_length chars."""
        if not title:
            return set()
        words = _NON_ALPHANUMERIC.sub(" ", title.lower()).split()
        return {word for word in words if len(word) >= self._min_token_length}

    def deduplicate(self, articles: list[Article]) -> DeduplicationResult:
        """Merge duplicate articles.

        Input articles are not modified; kept articles are copies.

        Args:
            articles: Articles pooled from all sources.

        Returns:
            DeduplicationResult with the kept articles and both counts.
        """
        url_survivors = self._merge_by_url(articles)
        kept = self._merge_by_title(url_survivors)

        if len(kept) < len(articles):
            logger.debug(f"Deduplicated {len(articles)} articles into {len(kept)}")

        return DeduplicationResult(
            articles=kept,
            original_count=len(articles),
            deduplicated_count=len(kept),
        )

    def _is_tracking_param(self, key: str) -> bool:
        return key in self._exact_params or (
            bool(self._prefix_params) and key.startswith(self._prefix_params)
        )

    def _merge_by_url(self, articles: list[Article]) -> list[Article]:
        by_url: dict[str, Article] = {}
        survivors = []
        for article in articles:
            copy = article.model_copy(update={"sources": list(article.sources)})
            key = self.normalize_url(article.url)
            if key is None:
                survivors.append(copy)
                continue
            existing = by_url.get(key)
            if existing is not None:
                existing.merge_sources(article)
                continue
            by_url[key] = copy
            survivors.append(copy)
        return survivors

    def _merge_by_title(self, articles: list[Article]) -> list[Article]:
        groups: list[tuple[set[str], Article]] = []
        for article in articles:
            tokens = self.title_tokens(article.title)
            for group_tokens, leader in groups:
                if jaccard_similarity(tokens, group_tokens) >= self._threshold:
                    leader.merge_sources(article)
                    break
            else:
                groups.append((tokens, article))
        return [leader for _, leader in groups]
