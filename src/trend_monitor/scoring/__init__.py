"""Scoring package: recency, deduplication, coherence, confidence and trend score."""

from .coherence_scorer import CoherenceScorer
from .confidence_scorer import ConfidenceScorer
from .deduplicator import ArticleDeduplicator, jaccard_similarity
from .models import (
    CoherenceLevel,
    CoherenceResult,
    ConfidenceResult,
    DeduplicationResult,
    MomentumLabel,
    MomentumResult,
    Recommendation,
    RecommendationPriority,
    RecommendationSet,
    ScoreSnapshot,
    TrendDirection,
    TrendFactors,
    TrendScoreResult,
)
from .recency_weighter import RecencyWeighter, parse_timestamp
from .recommendation_builder import RecommendationBuilder
from .score_history import InMemoryScoreHistory, ScoreHistoryStore
from .source_credibility import SourceCredibilityManager, SourceProfile
from .trend_analyzer import TrendAnalyzer, should_alert
from .trend_classifier import MomentumClassifier, classify_direction
from .trend_scorer import TrendScoreEngine

__all__ = [
    "ArticleDeduplicator",
    "CoherenceLevel",
    "CoherenceResult",
    "CoherenceScorer",
    "ConfidenceResult",
    "ConfidenceScorer",
    "DeduplicationResult",
    "InMemoryScoreHistory",
    "MomentumClassifier",
    "MomentumLabel",
    "MomentumResult",
    "RecencyWeighter",
    "Recommendation",
    "RecommendationBuilder",
    "RecommendationPriority",
    "RecommendationSet",
    "ScoreHistoryStore",
    "ScoreSnapshot",
    "SourceCredibilityManager",
    "SourceProfile",
    "TrendAnalyzer",
    "TrendDirection",
    "TrendFactors",
    "TrendScoreEngine",
    "TrendScoreResult",
    "classify_direction",
    "jaccard_similarity",
    "parse_timestamp",
    "should_alert",
]
