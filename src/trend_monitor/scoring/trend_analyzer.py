# src/trend_monitor/scoring/trend_analyzer.py
"""One complete scoring pass for a monitor."""
import logging
from datetime import datetime, timezone
from typing import Optional

from trend_monitor.analyzers.sentiment_analyzer import SentimentAnalyzer
from trend_monitor.config.settings import Settings
from trend_monitor.models.article import SourceReport
from trend_monitor.models.monitor import InvalidMonitorConfiguration, Monitor
from trend_monitor.scoring.coherence_scorer import CoherenceScorer
from trend_monitor.scoring.confidence_scorer import ConfidenceScorer
from trend_monitor.scoring.deduplicator import ArticleDeduplicator
from trend_monitor.scoring.models import ScoreSnapshot
from trend_monitor.scoring.recommendation_builder import RecommendationBuilder
from trend_monitor.scoring.score_history import ScoreHistoryStore
from trend_monitor.scoring.source_credibility import SourceCredibilityManager
from trend_monitor.scoring.trend_classifier import MomentumClassifier, classify_direction
from trend_monitor.scoring.trend_scorer import TrendScoreEngine

logger = logging.getLogger(__name__)


class TrendAnalyzer:
    """Runs every scorer over one monitor's source reports.

    Order of a pass: pool and deduplicate articles, coherence, trend score
    (which updates the score history), confidence, direction and momentum,
    recommendations.
    """

    def __init__(
        self,
        engine: Optional[TrendScoreEngine] = None,
        deduplicator: Optional[ArticleDeduplicator] = None,
        sentiment: Optional[SentimentAnalyzer] = None,
        coherence: Optional[CoherenceScorer] = None,
        confidence: Optional[ConfidenceScorer] = None,
        momentum: Optional[MomentumClassifier] = None,
        recommendations: Optional[RecommendationBuilder] = None,
        max_top_articles: int = 10,
    ):
        self._engine = engine or TrendScoreEngine()
        self._deduplicator = deduplicator or ArticleDeduplicator()
        self._sentiment = sentiment or SentimentAnalyzer()
        self._coherence = coherence or CoherenceScorer()
        self._confidence = confidence or ConfidenceScorer()
        self._momentum = momentum or MomentumClassifier()
        self._recommendations = recommendations or RecommendationBuilder()
        self._max_top_articles = max_top_articles

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        history: Optional[ScoreHistoryStore] = None,
    ) -> "TrendAnalyzer":
        """Wire all scorers from the settings.

        Args:
            settings: Loaded application settings.
            history: Score history store shared across passes.

        Returns:
            A configured TrendAnalyzer.
        """
        credibility = SourceCredibilityManager.from_settings(settings.sources)
        scoring = settings.scoring
        engine = TrendScoreEngine(
            credibility=credibility,
            history=history,
            weights=scoring.factor_weights,
            ema_alpha=scoring.ema_alpha,
            neutral_baseline=scoring.neutral_baseline,
            relevance_points_per_match=scoring.relevance_points_per_match,
            regions=scoring.regions,
        )
        dedup = settings.deduplication
        return cls(
            engine=engine,
            deduplicator=ArticleDeduplicator(
                title_similarity_threshold=dedup.title_similarity_threshold,
                min_token_length=dedup.min_token_length,
                tracking_params=dedup.tracking_params,
            ),
            confidence=ConfidenceScorer(credibility),
            max_top_articles=settings.runner.max_articles_in_alert,
        )

    @property
    def engine(self) -> TrendScoreEngine:
        return self._engine

    def analyze(
        self,
        monitor: Monitor,
        reports: list[SourceReport],
        now: Optional[datetime] = None,
    ) -> ScoreSnapshot:
        """Score a monitor from its source reports.

        Args:
            monitor: The monitor being scored.
            reports: Reports of the sources that returned a payload.
            now: Reference time of the pass (defaults to current UTC time).

        Returns:
            ScoreSnapshot of the pass.

        Raises:
            InvalidMonitorConfiguration: If the monitor has no usable terms.
        """
        if not monitor.terms or not any(term.strip() for term in monitor.terms):
            raise InvalidMonitorConfiguration(f"Monitor {monitor.id} has no search terms")
        if now is None:
            now = datetime.now(timezone.utc)

        pooled = [item for report in reports for item in report.items]
        dedup = self._deduplicator.deduplicate(pooled)

        sentiment = self._sentiment.analyze_batch([article.title for article in dedup.articles])
        coherence = self._coherence.score(reports)
        trend = self._engine.score(monitor.id, reports, sentiment.score)
        confidence = self._confidence.score(reports, coherence.score)

        direction = classify_direction(trend.change_percent)
        momentum = self._momentum.classify(trend.factors.momentum, dedup.articles, now)
        recommendations = self._recommendations.build(
            trend_score=trend.trend_score,
            coherence=coherence.score,
            confidence=confidence.confidence,
            sentiment=trend.factors.sentiment,
        )

        top_articles = sorted(dedup.articles, key=lambda article: article.weight, reverse=True)
        top_articles = top_articles[: self._max_top_articles]

        summary = (
            f"{', '.join(monitor.terms)}: score {trend.trend_score} "
            f"({trend.change_percent:+d}%), {direction.label}, "
            f"coherence {coherence.level.value}, confidence {confidence.confidence}%"
        )
        logger.info(f"Scored {monitor.id}: {summary}")

        return ScoreSnapshot(
            monitor_id=monitor.id,
            terms=list(monitor.terms),
            trend=trend,
            coherence=coherence,
            confidence=confidence,
            direction=direction,
            momentum=momentum,
            recommendations=recommendations,
            deduplication=dedup,
            sentiment_label=sentiment.label.value,
            top_articles=top_articles,
            summary=summary,
            scored_at=now,
        )


def should_alert(monitor: Monitor, snapshot: ScoreSnapshot) -> bool:
    """True if the score moved at least the monitor's threshold percent."""
    return abs(snapshot.change_percent) >= monitor.threshold
