# src/trend_monitor/collectors/base.py
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional
from urllib.parse import urlparse

from trend_monitor.models.article import Article, SourceName, SourceReport, SourceResult
from trend_monitor.scoring.recency_weighter import RecencyWeighter, parse_timestamp


def valid_url(url: Any) -> Optional[str]:
    """Return url if it is an absolute http(s) URL, else None."""
    if not url or not isinstance(url, str):
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return url.strip()
    return None


def engagement_multiplier(engagement: float, constant: float) -> float:
    """Engagement boost for social items: min(2, 1 + engagement / constant)."""
    return min(2.0, 1.0 + max(0.0, engagement) / constant)


class BaseAggregator(ABC):
    """Abstract base class for all source aggregators.

    An aggregator is a pure projection: it takes the payload one provider
    already returned and reshapes it into SourceResults. It never fetches.
    """

    def __init__(
        self,
        name: str,
        source: SourceName,
        recency_weighter: Optional[RecencyWeighter] = None,
    ):
        self._name = name
        self._source = source
        self._recency = recency_weighter or RecencyWeighter()

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> SourceName:
        return self._source

    @abstractmethod
    def aggregate(
        self,
        terms: list[str],
        raw: Optional[dict[str, Any]],
        now: Optional[datetime] = None,
    ) -> Optional[SourceReport]:
        """Project a provider payload into a SourceReport.

        Args:
            terms: The monitor's search terms, in order.
            raw: Provider payload, or None if the source was not queried.
            now: Reference time for recency weighting.

        Returns:
            SourceReport, or None if the source is absent.
        """
        pass

    def _build_result(self, term: str, total: int, items: list[Article]) -> SourceResult:
        weighted = sum(item.weight for item in items)
        return SourceResult(
            term=term,
            total_count=max(0, int(total)),
            weighted_count=weighted,
            items=items,
        )

    def _make_article(
        self,
        title: str,
        url: Optional[str],
        published: Any,
        now: Optional[datetime],
        engagement: Optional[dict[str, float]] = None,
        multiplier: float = 1.0,
        region: Optional[str] = None,
        publisher: Optional[str] = None,
    ) -> Article:
        recency = self._recency.calculate_weight(published, now=now)
        return Article(
            title=title or "",
            url=valid_url(url),
            published_at=parse_timestamp(published),
            source=self._source,
            recency_weight=recency,
            engagement=engagement or {},
            weight=recency * multiplier,
            region=region,
            publisher=publisher,
        )


class TermAggregator(BaseAggregator):
    """Base for sources queried once per search term.

    The payload is keyed by term. Terms missing from the payload were not
    queried (providers cap how many terms they are asked about) and get no
    result; terms queried without hits get a zero-count result.
    """

    def aggregate(
        self,
        terms: list[str],
        raw: Optional[dict[str, Any]],
        now: Optional[datetime] = None,
    ) -> Optional[SourceReport]:
        if raw is None:
            return None

        results = []
        scanned = 0
        for term in terms:
            payload = raw.get(term)
            if payload is None:
                continue
            total, items = self._parse_term(payload, now)
            scanned += len(items)
            results.append(self._build_result(term, total, items))

        return SourceReport(source=self._source, results=results, scanned_count=scanned)

    @abstractmethod
    def _parse_term(self, payload: Any, now: Optional[datetime]) -> tuple[int, list[Article]]:
        """Parse one term's payload.

        Returns:
            Tuple of (total count reported by the source, parsed articles).
        """
        pass
