# src/trend_monitor/models/article.py
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SourceName(str, Enum):
    GOOGLE_TRENDS = "google_trends"
    GOOGLE_NEWS = "google_news"
    NEWSDATA = "newsdata"
    SERPAPI = "serpapi"
    GDELT = "gdelt"
    REDDIT = "reddit"
    HACKERNEWS = "hackernews"
    BLUESKY = "bluesky"


class Article(BaseModel):
    """A single content item from any source."""

    title: str
    url: Optional[str] = None
    published_at: Optional[datetime] = None
    publisher: Optional[str] = None
    source: SourceName
    sources: list[SourceName] = Field(default_factory=list)

    recency_weight: float = Field(default=0.5, gt=0.0, le=1.0)
    # Source-specific metrics (upvotes, points, comments, likes...)
    engagement: dict[str, float] = Field(default_factory=dict)
    # Recency weight with any engagement multiplier folded in
    weight: Optional[float] = Field(default=None, ge=0.0)

    # Trend-source only
    region: Optional[str] = None

    def model_post_init(self, __context) -> None:
        if not self.sources:
            self.sources.append(self.source)
        if self.weight is None:
            self.weight = self.recency_weight

    def merge_sources(self, other: "Article") -> None:
        """Union another article's sources onto this one, keeping order."""
        for source in other.sources:
            if source not in self.sources:
                self.sources.append(source)


class SourceResult(BaseModel):
    """Uniform per-source, per-term result consumed by every scorer."""

    term: str
    total_count: int = Field(default=0, ge=0)
    weighted_count: float = Field(default=0.0, ge=0.0)
    items: list[Article] = Field(default_factory=list)


class SourceReport(BaseModel):
    """All per-term results one source produced for a monitor.

    Attributes:
        source: Which source produced the results.
        results: One SourceResult per queried term, in term order.
        scanned_count: Items the source returned before term matching
            (only differs from total_count for the trend source).
        region_matches: Matched item count per region, trend source only.
    """

    source: SourceName
    results: list[SourceResult] = Field(default_factory=list)
    scanned_count: int = Field(default=0, ge=0)
    region_matches: Optional[dict[str, int]] = None

    @property
    def total_count(self) -> int:
        return sum(r.total_count for r in self.results)

    @property
    def weighted_count(self) -> float:
        return sum(r.weighted_count for r in self.results)

    @property
    def items(self) -> list[Article]:
        return [item for r in self.results for item in r.items]

    @property
    def has_signal(self) -> bool:
        """True if any term produced results."""
        return self.total_count > 0

    @property
    def has_data(self) -> bool:
        """True if the source returned anything at all."""
        return self.scanned_count > 0 or self.total_count > 0

    @property
    def is_present(self) -> bool:
        """True if the source reported on anything (even with zero counts)."""
        return bool(self.results) or self.region_matches is not None

    @property
    def term_coverage(self) -> Optional[float]:
        """Fraction of queried terms with results, None without per-term results."""
        if not self.results:
            return None
        matched = sum(1 for r in self.results if r.total_count > 0)
        return matched / len(self.results)
