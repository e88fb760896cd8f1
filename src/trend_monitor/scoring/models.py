# src/trend_monitor/scoring/models.py
"""Data models for the trend scoring system."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from trend_monitor.models.article import Article


class CoherenceLevel(str, Enum):
    """Cross-source agreement classification."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    NOISE = "Noise"

    @classmethod
    def from_score(cls, score: float) -> "CoherenceLevel":
        """Get the level for a coherence score.

        Args:
            score: Coherence score from 0-100.

        Returns:
            CoherenceLevel based on thresholds:
                - score >= 75 -> HIGH
                - score >= 50 -> MEDIUM
                - score >= 25 -> LOW
                - score < 25 -> NOISE
        """
        if score >= 75:
            return cls.HIGH
        elif score >= 50:
            return cls.MEDIUM
        elif score >= 25:
            return cls.LOW
        else:
            return cls.NOISE


class TrendDirection(Enum):
    """Direction band of a score change, with label and strength."""

    STRONG_UP = ("strong-up", "Strong upward trend", 3)
    MODERATE_UP = ("moderate-up", "Moderate upward trend", 2)
    WEAK_UP = ("weak-up", "Slight upward trend", 1)
    STABLE = ("stable", "Stable", 0)
    WEAK_DOWN = ("weak-down", "Slight downward trend", -1)
    MODERATE_DOWN = ("moderate-down", "Moderate downward trend", -2)
    STRONG_DOWN = ("strong-down", "Strong downward trend", -3)

    def __init__(self, key: str, label: str, strength: int):
        self.key = key
        self.label = label
        self.strength = strength


class MomentumLabel(str, Enum):
    ACCELERATING = "accelerating"
    STEADY = "steady"
    DECELERATING = "decelerating"


class RecommendationPriority(str, Enum):
    """Priority of a recommendation, ordered high to low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return {"high": 0, "medium": 1, "low": 2}[self.value]

    @property
    def glyph(self) -> str:
        return {"high": "🔴", "medium": "🟡", "low": "🟢"}[self.value]


@dataclass
class TrendFactors:
    """The six trend score factors, each 0-100.

    Attributes:
        velocity: Change of the smoothed score against the previous pass.
        relevance: Direct term matches in the trend source.
        authority: Credibility-weighted source saturation.
        recency: Average recency of counted items.
        momentum: Share of monitored regions with signal.
        sentiment: Lexicon sentiment of pooled article titles.
    """

    velocity: int = 50
    relevance: int = 0
    authority: int = 0
    recency: int = 50
    momentum: int = 50
    sentiment: int = 50

    def to_dict(self) -> dict[str, int]:
        return {
            "velocity": self.velocity,
            "relevance": self.relevance,
            "authority": self.authority,
            "recency": self.recency,
            "momentum": self.momentum,
            "sentiment": self.sentiment,
        }


@dataclass
class TrendScoreResult:
    """Output of the trend score engine for one monitor pass.

    Attributes:
        trend_score: Final composite score (0-100).
        raw_score: Provisional score with velocity held at neutral.
        smoothed_score: EMA of raw scores, stored as the next pass's history.
        previous_score: Smoothed score of the previous pass, None on the first.
        change_percent: Signed change of trend_score against the baseline.
        factors: The six factor sub-scores.
        data_sources_used: Number of sources that returned any data.
    """

    trend_score: int
    raw_score: int
    smoothed_score: int
    previous_score: Optional[int]
    change_percent: int
    factors: TrendFactors
    data_sources_used: int


@dataclass
class CoherenceResult:
    """Cross-source agreement score with its sub-factors."""

    score: int
    level: CoherenceLevel
    factors: dict[str, int] = field(default_factory=dict)


@dataclass
class ConfidenceResult:
    """Data-quality confidence with its multiplier breakdown.

    Attributes:
        confidence: Integer percent, bounded to [10, 98].
        data_point_count: Number of sources that returned any data.
        base_confidence: Sum of reliability x weight over those sources.
        multipliers: freshness, sample_size and agreement multipliers.
    """

    confidence: int
    data_point_count: int
    base_confidence: float
    multipliers: dict[str, float] = field(default_factory=dict)


@dataclass
class MomentumResult:
    """Acceleration label with the two scores it combines."""

    label: MomentumLabel
    score: int
    regional_coverage: int
    recency_trend: int


@dataclass
class Recommendation:
    """A single prioritized action."""

    text: str
    priority: RecommendationPriority

    def formatted(self) -> str:
        return f"{self.priority.glyph} {self.text}"


@dataclass
class RecommendationSet:
    """Ranked recommendations and the top one."""

    recommendations: list[Recommendation] = field(default_factory=list)
    top_recommendation: str = ""

    @property
    def formatted(self) -> list[str]:
        return [rec.formatted() for rec in self.recommendations]


@dataclass
class DeduplicationResult:
    """Deduplicated articles with before/after counts."""

    articles: list[Article]
    original_count: int
    deduplicated_count: int

    @property
    def removed_count(self) -> int:
        return self.original_count - self.deduplicated_count


@dataclass
class ScoreSnapshot:
    """Everything one scoring pass produced for a monitor.

    Attributes:
        monitor_id: The scored monitor.
        terms: The monitor's search terms.
        trend: Trend score engine output.
        coherence: Cross-source agreement.
        confidence: Data-quality confidence.
        direction: Direction band of the change percent.
        momentum: Acceleration classification.
        recommendations: Ranked actions.
        deduplication: Article counts before and after merging.
        sentiment_label: Label of the pooled title sentiment.
        top_articles: Most relevant deduplicated articles.
        summary: One-line human-readable summary.
        scored_at: Reference time of the pass.
    """

    monitor_id: str
    terms: list[str]
    trend: TrendScoreResult
    coherence: CoherenceResult
    confidence: ConfidenceResult
    direction: TrendDirection
    momentum: MomentumResult
    recommendations: RecommendationSet
    deduplication: DeduplicationResult
    sentiment_label: str
    top_articles: list[Article]
    summary: str
    scored_at: datetime

    @property
    def trend_score(self) -> int:
        return self.trend.trend_score

    @property
    def change_percent(self) -> int:
        return self.trend.change_percent
