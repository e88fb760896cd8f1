# tests/scoring/test_recommendation_builder.py
"""Tests for RecommendationBuilder."""
from trend_monitor.scoring.models import RecommendationPriority
from trend_monitor.scoring.recommendation_builder import (
    DEFAULT_RECOMMENDATION,
    HIGH_CONFIDENCE_ACTION,
    HIGH_PRIORITY_ACTIONS,
    LOW_CONFIDENCE_ACTION,
    LOW_PRIORITY_ACTIONS,
    MEDIUM_PRIORITY_ACTIONS,
    NEGATIVE_SENTIMENT_ACTION,
    POSITIVE_SENTIMENT_ACTION,
    RecommendationBuilder,
)


class TestRecommendationBuilder:
    """Tests for tiering, modifiers and ranking."""

    def test_high_tier(self):
        """Test that a strong coherent trend gets the three high actions."""
        result = RecommendationBuilder().build(trend_score=80, coherence=70, confidence=50, sentiment=50)

        assert [rec.text for rec in result.recommendations] == HIGH_PRIORITY_ACTIONS
        assert all(rec.priority == RecommendationPriority.HIGH for rec in result.recommendations)
        assert result.top_recommendation == "🔴 Escalate: publish a briefing on this trend"

    def test_high_tier_needs_coherence(self):
        result = RecommendationBuilder().build(trend_score=80, coherence=30, confidence=50, sentiment=50)

        assert result.recommendations == []
        assert result.top_recommendation == DEFAULT_RECOMMENDATION

    def test_medium_tier_from_trend_score(self):
        result = RecommendationBuilder().build(trend_score=55, coherence=20, confidence=50, sentiment=50)

        assert [rec.text for rec in result.recommendations] == MEDIUM_PRIORITY_ACTIONS
        assert result.top_recommendation.startswith("🟡 ")

    def test_medium_tier_from_coherence(self):
        """Test that mid coherence adds the medium tier alongside the low tier."""
        result = RecommendationBuilder(max_recommendations=10).build(
            trend_score=20, coherence=50, confidence=50, sentiment=50
        )
        texts = [rec.text for rec in result.recommendations]

        assert texts == MEDIUM_PRIORITY_ACTIONS + LOW_PRIORITY_ACTIONS

    def test_low_tier(self):
        result = RecommendationBuilder().build(trend_score=20, coherence=10, confidence=50, sentiment=50)

        assert [rec.text for rec in result.recommendations] == LOW_PRIORITY_ACTIONS
        assert result.top_recommendation == "🟢 Consider reducing monitoring frequency"

    def test_boundaries_are_inclusive_for_medium(self):
        builder = RecommendationBuilder()

        at_forty = builder.build(trend_score=40, coherence=0, confidence=50, sentiment=50)
        at_seventy = builder.build(trend_score=70, coherence=70, confidence=50, sentiment=50)

        assert at_forty.recommendations[0].priority == RecommendationPriority.MEDIUM
        assert at_seventy.recommendations[0].priority == RecommendationPriority.MEDIUM

    def test_negative_sentiment_ranks_first(self):
        result = RecommendationBuilder().build(trend_score=55, coherence=20, confidence=50, sentiment=30)

        assert result.recommendations[0].text == NEGATIVE_SENTIMENT_ACTION
        assert result.recommendations[0].priority == RecommendationPriority.HIGH
        assert len(result.recommendations) == 3

    def test_positive_sentiment_is_medium(self):
        result = RecommendationBuilder(max_recommendations=10).build(
            trend_score=20, coherence=10, confidence=50, sentiment=75
        )

        assert result.recommendations[0].text == POSITIVE_SENTIMENT_ACTION
        assert result.recommendations[0].priority == RecommendationPriority.MEDIUM

    def test_confidence_modifiers(self):
        builder = RecommendationBuilder(max_recommendations=10)

        low = builder.build(trend_score=20, coherence=10, confidence=20, sentiment=50)
        high = builder.build(trend_score=20, coherence=10, confidence=90, sentiment=50)

        assert LOW_CONFIDENCE_ACTION in [rec.text for rec in low.recommendations]
        assert HIGH_CONFIDENCE_ACTION in [rec.text for rec in high.recommendations]
        assert HIGH_CONFIDENCE_ACTION not in [rec.text for rec in low.recommendations]

    def test_stable_order_within_priority(self):
        """Test that the low confidence warning follows the medium tier entries."""
        result = RecommendationBuilder(max_recommendations=10).build(
            trend_score=55, coherence=20, confidence=10, sentiment=50
        )
        texts = [rec.text for rec in result.recommendations]

        assert texts == MEDIUM_PRIORITY_ACTIONS + [LOW_CONFIDENCE_ACTION]

    def test_truncated_to_max(self):
        result = RecommendationBuilder().build(trend_score=80, coherence=70, confidence=90, sentiment=20)

        assert len(result.recommendations) == 3
        assert result.recommendations[0].text == HIGH_PRIORITY_ACTIONS[0]

    def test_formatted_entries(self):
        result = RecommendationBuilder().build(trend_score=20, coherence=10, confidence=50, sentiment=50)

        assert result.formatted[0] == "🟢 " + LOW_PRIORITY_ACTIONS[0]
