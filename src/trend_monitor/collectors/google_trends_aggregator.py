# src/trend_monitor/collectors/google_trends_aggregator.py
from datetime import datetime
from typing import Any, Optional

from trend_monitor.collectors.base import BaseAggregator
from trend_monitor.models.article import Article, SourceName, SourceReport
from trend_monitor.scoring.recency_weighter import RecencyWeighter

DEFAULT_REGIONS = ["US", "GB", "CA", "AU"]


class GoogleTrendsAggregator(BaseAggregator):
    """Aggregator for the Google Trends daily trending-searches RSS feeds.

    Unlike the search sources, the payload is not keyed by term: it holds
    the full trending feed of each region, and terms are matched against
    every topic's title and description.

    Payload shape:
        {"regions": {"US": [{"title", "description", "traffic", "pubDate"}], ...}}

    A region whose fetch failed is present with a None value and counts
    as zero matches.
    """

    def __init__(
        self,
        regions: Optional[list[str]] = None,
        recency_weighter: Optional[RecencyWeighter] = None,
    ):
        super().__init__(
            name="google_trends",
            source=SourceName.GOOGLE_TRENDS,
            recency_weighter=recency_weighter,
        )
        self._regions = regions or list(DEFAULT_REGIONS)

    @property
    def regions(self) -> list[str]:
        return self._regions

    def aggregate(
        self,
        terms: list[str],
        raw: Optional[dict[str, Any]],
        now: Optional[datetime] = None,
    ) -> Optional[SourceReport]:
        """Match monitor terms against each region's trending topics.

        Each matched topic is attributed to the first term it matches, so
        a topic matching several terms is counted once.
        """
        if raw is None:
            return None

        region_feeds = raw.get("regions") or {}
        lowered = [term.lower() for term in terms]
        matches_by_term: dict[str, list[Article]] = {term: [] for term in terms}
        region_matches: dict[str, int] = {}
        scanned = 0

        for region in self._regions:
            feed = region_feeds.get(region)
            if feed is None:
                region_matches[region] = 0
                continue

            scanned += len(feed)
            matched = 0
            for topic in feed:
                title = topic.get("title") or ""
                description = topic.get("description") or ""
                haystack = f"{title}\n{description}".lower()

                for term, needle in zip(terms, lowered):
                    if needle and needle in haystack:
                        matches_by_term[term].append(
                            self._make_article(
                                title=title,
                                url=topic.get("link"),
                                published=topic.get("pubDate"),
                                now=now,
                                engagement=self._traffic(topic.get("traffic")),
                                region=region,
                            )
                        )
                        matched += 1
                        break

            region_matches[region] = matched

        results = [
            self._build_result(term, len(items), items)
            for term, items in matches_by_term.items()
        ]

        return SourceReport(
            source=self.source,
            results=results,
            scanned_count=scanned,
            region_matches=region_matches,
        )

    @staticmethod
    def _traffic(value: Any) -> dict[str, float]:
        """Parse approximate traffic like '200K+' into a number."""
        if not value or not isinstance(value, str):
            return {}
        text = value.strip().rstrip("+").replace(",", "").upper()
        multiplier = 1
        if text.endswith("K"):
            multiplier, text = 1_000, text[:-1]
        elif text.endswith("M"):
            multiplier, text = 1_000_000, text[:-1]
        try:
            return {"traffic": float(text) * multiplier}
        except ValueError:
            return {}
