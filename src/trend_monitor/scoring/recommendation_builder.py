# src/trend_monitor/scoring/recommendation_builder.py
"""Recommendation builder for monitor follow-up actions."""
from .models import Recommendation, RecommendationPriority, RecommendationSet

HIGH_PRIORITY_ACTIONS = [
    "Escalate: publish a briefing on this trend",
    "Increase monitoring frequency to daily",
    "Expand the monitor with related search terms",
]

MEDIUM_PRIORITY_ACTIONS = [
    "Keep monitoring at the current interval",
    "Review top articles for emerging angles",
    "Cross-check the signal against additional sources",
]

LOW_PRIORITY_ACTIONS = [
    "Consider reducing monitoring frequency",
    "Review whether the search terms are still relevant",
    "Archive the monitor if the signal stays flat",
]

LOW_CONFIDENCE_ACTION = "Low confidence: add data sources before acting"
HIGH_CONFIDENCE_ACTION = "High confidence: signal is backed by multiple fresh sources"
NEGATIVE_SENTIMENT_ACTION = "Negative sentiment detected: check for reputational risk"
POSITIVE_SENTIMENT_ACTION = "Positive sentiment: consider amplifying coverage"

DEFAULT_RECOMMENDATION = "No action required: continue routine monitoring"


class RecommendationBuilder:
    """Maps a monitor's scores to prioritized actions."""

    def __init__(
        self,
        high_trend_threshold: int = 70,
        high_coherence_threshold: int = 60,
        medium_trend_threshold: int = 40,
        medium_coherence_threshold: int = 40,
        low_confidence_threshold: int = 30,
        high_confidence_threshold: int = 70,
        negative_sentiment_threshold: int = 40,
        positive_sentiment_threshold: int = 60,
        max_recommendations: int = 3,
    ):
        """Initialize RecommendationBuilder with configurable thresholds.

        Args:
            high_trend_threshold: Trend score above which the high tier applies.
            high_coherence_threshold: Coherence above which the high tier applies.
            medium_trend_threshold: Lowest trend score of the medium tier.
            medium_coherence_threshold: Lowest coherence of the medium tier.
            low_confidence_threshold: Confidence below which a warning is added.
            high_confidence_threshold: Confidence above which a note is added.
            negative_sentiment_threshold: Sentiment below which a risk check is added.
            positive_sentiment_threshold: Sentiment above which amplifying is suggested.
            max_recommendations: Number of recommendations kept.
        """
        self.high_trend_threshold = high_trend_threshold
        self.high_coherence_threshold = high_coherence_threshold
        self.medium_trend_threshold = medium_trend_threshold
        self.medium_coherence_threshold = medium_coherence_threshold
        self.low_confidence_threshold = low_confidence_threshold
        self.high_confidence_threshold = high_confidence_threshold
        self.negative_sentiment_threshold = negative_sentiment_threshold
        self.positive_sentiment_threshold = positive_sentiment_threshold
        self.max_recommendations = max_recommendations

    def build(
        self,
        trend_score: int,
        coherence: int,
        confidence: int,
        sentiment: int,
    ) -> RecommendationSet:
        """Build the ranked recommendations for one monitor pass.

        Tiers are not exclusive: a monitor can get both high and medium
        entries. Modifiers are appended after the tiers, then everything is
        stably sorted high -> medium -> low and truncated.

        Args:
            trend_score: Final trend score (0-100).
            coherence: Coherence score (0-100).
            confidence: Confidence percent.
            sentiment: Sentiment factor (0-100).

        Returns:
            RecommendationSet with the ranked list and the top entry.
        """
        recommendations: list[Recommendation] = []

        if trend_score > self.high_trend_threshold and coherence > self.high_coherence_threshold:
            recommendations += self._tier(HIGH_PRIORITY_ACTIONS, RecommendationPriority.HIGH)

        if (
            self.medium_trend_threshold <= trend_score <= self.high_trend_threshold
            or self.medium_coherence_threshold <= coherence <= self.high_coherence_threshold
        ):
            recommendations += self._tier(MEDIUM_PRIORITY_ACTIONS, RecommendationPriority.MEDIUM)

        if trend_score < self.medium_trend_threshold:
            recommendations += self._tier(LOW_PRIORITY_ACTIONS, RecommendationPriority.LOW)

        if confidence < self.low_confidence_threshold:
            recommendations.append(
                Recommendation(LOW_CONFIDENCE_ACTION, RecommendationPriority.MEDIUM)
            )
        elif confidence > self.high_confidence_threshold:
            recommendations.append(
                Recommendation(HIGH_CONFIDENCE_ACTION, RecommendationPriority.LOW)
            )

        if sentiment < self.negative_sentiment_threshold:
            recommendations.append(
                Recommendation(NEGATIVE_SENTIMENT_ACTION, RecommendationPriority.HIGH)
            )
        elif sentiment > self.positive_sentiment_threshold:
            recommendations.append(
                Recommendation(POSITIVE_SENTIMENT_ACTION, RecommendationPriority.MEDIUM)
            )

        # sorted() is stable, insertion order is kept within a priority
        ranked = sorted(recommendations, key=lambda rec: rec.priority.rank)
        ranked = ranked[: self.max_recommendations]

        return RecommendationSet(
            recommendations=ranked,
            top_recommendation=ranked[0].formatted() if ranked else DEFAULT_RECOMMENDATION,
        )

    @staticmethod
    def _tier(actions: list[str], priority: RecommendationPriority) -> list[Recommendation]:
        return [Recommendation(text, priority) for text in actions]
