# src/trend_monitor/scoring/trend_classifier.py
"""Direction and momentum labels derived from already computed scores."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from trend_monitor.models.article import Article
from trend_monitor.numeric import round_half_up
from trend_monitor.scoring.models import MomentumLabel, MomentumResult, TrendDirection


def classify_direction(change_percent: float) -> TrendDirection:
    """Bucket a change percent into one of seven direction bands.

    Args:
        change_percent: Signed change of the trend score.

    Returns:
        TrendDirection:
            - > 20 -> STRONG_UP
            - > 10 -> MODERATE_UP
            - > 3 -> WEAK_UP
            - -3 to 3 -> STABLE
            - < -3 -> WEAK_DOWN
            - < -10 -> MODERATE_DOWN
            - < -20 -> STRONG_DOWN
    """
    if change_percent > 20:
        return TrendDirection.STRONG_UP
    elif change_percent > 10:
        return TrendDirection.MODERATE_UP
    elif change_percent > 3:
        return TrendDirection.WEAK_UP
    elif change_percent >= -3:
        return TrendDirection.STABLE
    elif change_percent >= -10:
        return TrendDirection.WEAK_DOWN
    elif change_percent >= -20:
        return TrendDirection.MODERATE_DOWN
    else:
        return TrendDirection.STRONG_DOWN


class MomentumClassifier:
    """Labels whether interest in a monitor is accelerating.

    Combines regional coverage (the momentum factor, 40%) with a recency
    trend (60%) comparing articles published in the last 24 hours against
    the 24 hours before:
    - ratio > 1.5 -> 100
    - ratio > 0.75 -> 50
    - otherwise -> 0
    Both windows empty counts as steady (50); only the newer window
    populated counts as accelerating (100).

    Combined >= 70 -> accelerating, >= 30 -> steady, else decelerating.
    """

    def __init__(
        self,
        coverage_weight: float = 0.4,
        recency_weight: float = 0.6,
        window_hours: int = 24,
    ):
        self._coverage_weight = coverage_weight
        self._recency_weight = recency_weight
        self._window = timedelta(hours=window_hours)

    def recency_trend(self, articles: list[Article], now: Optional[datetime] = None) -> int:
        """Score the change in publishing rate between the last two windows."""
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        recent_start = now - self._window
        previous_start = now - 2 * self._window
        recent = 0
        previous = 0
        for article in articles:
            published = article.published_at
            if published is None:
                continue
            if published >= recent_start:
                recent += 1
            elif published >= previous_start:
                previous += 1

        if previous == 0:
            return 100 if recent > 0 else 50

        ratio = recent / previous
        if ratio > 1.5:
            return 100
        elif ratio > 0.75:
            return 50
        return 0

    def classify(
        self,
        regional_coverage: int,
        articles: list[Article],
        now: Optional[datetime] = None,
    ) -> MomentumResult:
        """Combine regional coverage and recency trend into a label.

        Args:
            regional_coverage: Share of regions with signal (0-100).
            articles: Deduplicated articles of the pass.
            now: Reference time for the windows.

        Returns:
            MomentumResult with the label and both sub-scores.
        """
        recency_trend = self.recency_trend(articles, now)
        combined = round_half_up(
            self._coverage_weight * regional_coverage + self._recency_weight * recency_trend
        )

        if combined >= 70:
            label = MomentumLabel.ACCELERATING
        elif combined >= 30:
            label = MomentumLabel.STEADY
        else:
            label = MomentumLabel.DECELERATING

        return MomentumResult(
            label=label,
            score=combined,
            regional_coverage=regional_coverage,
            recency_trend=recency_trend,
        )
