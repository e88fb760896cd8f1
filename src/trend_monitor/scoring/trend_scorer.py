# src/trend_monitor/scoring/trend_scorer.py
"""Multi-factor trend score with EMA smoothing and velocity feedback."""
import logging
from typing import Optional

from trend_monitor.config.settings import FactorWeights
from trend_monitor.models.article import SourceName, SourceReport
from trend_monitor.numeric import clamp, round_half_up
from trend_monitor.scoring.models import TrendFactors, TrendScoreResult
from trend_monitor.scoring.score_history import InMemoryScoreHistory, ScoreHistoryStore
from trend_monitor.scoring.source_credibility import SourceCredibilityManager

logger = logging.getLogger(__name__)

DEFAULT_REGIONS = ["US", "GB", "CA", "AU"]


class TrendScoreEngine:
    """Combines six factors into a 0-100 trend score.

    Factors (default weights):
    - velocity (20%): change of the smoothed score vs the previous pass
    - relevance (20%): direct term matches in the trend source, 25 each
    - authority (15%): reliability x saturation, renormalized over the
      weights of the sources that counted items
    - recency (15%): mean weighted/total ratio over sources with items
    - momentum (20%): share of regions where the trend source matched
    - sentiment (10%): lexicon sentiment of the pooled titles

    Velocity depends on the smoothed score and smoothing needs a score,
    so a pass runs twice over the factors:
    1. raw score with velocity held at the neutral 50
    2. smoothed = alpha x raw + (1 - alpha) x previous smoothed
       (raw itself on a monitor's first pass)
    3. velocity from smoothed vs previous smoothed (vs raw on first pass)
    4. final score with the real velocity

    The smoothed score is written back to the history store and becomes
    the next pass's previous score.
    """

    def __init__(
        self,
        credibility: Optional[SourceCredibilityManager] = None,
        history: Optional[ScoreHistoryStore] = None,
        weights: Optional[FactorWeights] = None,
        ema_alpha: float = 0.3,
        neutral_baseline: float = 50.0,
        relevance_points_per_match: float = 25.0,
        regions: Optional[list[str]] = None,
        trend_source: SourceName = SourceName.GOOGLE_TRENDS,
    ):
        """Initialize the trend score engine.

        Args:
            credibility: Source profiles for authority.
            history: Previous smoothed score per monitor.
            weights: Factor weights.
            ema_alpha: Weight of the new raw score in smoothing.
            neutral_baseline: Score assumed before a monitor's first pass.
            relevance_points_per_match: Relevance points per trend match.
            regions: Regional partitions checked by the trend source.
            trend_source: Source whose matches drive relevance and momentum.
        """
        self._credibility = credibility or SourceCredibilityManager()
        self._history = history if history is not None else InMemoryScoreHistory()
        self._weights = weights or FactorWeights()
        self._ema_alpha = ema_alpha
        self._neutral_baseline = neutral_baseline
        self._points_per_match = relevance_points_per_match
        self._regions = regions or list(DEFAULT_REGIONS)
        self._trend_source = trend_source

    @property
    def history(self) -> ScoreHistoryStore:
        return self._history

    def score(
        self,
        monitor_id: str,
        reports: list[SourceReport],
        sentiment_score: int,
    ) -> TrendScoreResult:
        """Run one scoring pass for a monitor and update its history.

        Args:
            monitor_id: Key of the monitor in the history store.
            reports: Reports of the available sources.
            sentiment_score: Pooled title sentiment (0-100).

        Returns:
            TrendScoreResult with raw, smoothed and final scores.
        """
        factors = TrendFactors(
            velocity=50,
            relevance=self.relevance(reports),
            authority=self.authority(reports),
            recency=self.recency(reports),
            momentum=self.momentum(reports),
            sentiment=round_half_up(clamp(sentiment_score)),
        )
        raw_score = round_half_up(clamp(self._weighted_sum(factors)))

        previous = self._history.get(monitor_id)
        smoothed = self.smooth(raw_score, previous)

        factors.velocity = self.velocity(smoothed, previous if previous is not None else raw_score)
        trend_score = round_half_up(clamp(self._weighted_sum(factors)))

        baseline = previous if previous is not None else self._neutral_baseline
        change_percent = self.change_percent(trend_score, baseline)

        self._history.set(monitor_id, smoothed)

        data_sources_used = sum(1 for report in reports if report.has_data)
        logger.debug(
            f"{monitor_id}: raw={raw_score} smoothed={smoothed} "
            f"previous={previous} score={trend_score} change={change_percent}%"
        )

        return TrendScoreResult(
            trend_score=trend_score,
            raw_score=raw_score,
            smoothed_score=smoothed,
            previous_score=previous,
            change_percent=change_percent,
            factors=factors,
            data_sources_used=data_sources_used,
        )

    def smooth(self, raw_score: int, previous: Optional[int]) -> int:
        """EMA of the raw score; the raw score itself without history."""
        if previous is None:
            return raw_score
        return round_half_up(self._ema_alpha * raw_score + (1 - self._ema_alpha) * previous)

    @staticmethod
    def velocity(smoothed: int, previous: Optional[float]) -> int:
        """50 + relative change x 50; 50 when there is no positive baseline."""
        if previous is None or previous <= 0:
            return 50
        return round_half_up(clamp(50 + (smoothed - previous) / previous * 50))

    @staticmethod
    def change_percent(score: int, baseline: float) -> int:
        if baseline <= 0:
            return 0
        return round_half_up((score - baseline) / baseline * 100)

    def relevance(self, reports: list[SourceReport]) -> int:
        trend = self._trend_report(reports)
        if trend is None:
            return 0
        return round_half_up(min(100.0, trend.total_count * self._points_per_match))

    def authority(self, reports: list[SourceReport]) -> int:
        """Credibility-weighted saturation, renormalized by present weights.

        Only sources that counted items take part, and their weights are the
        denominator, so unconfigured or empty sources do not drag it down.
        """
        weighted_sum = 0.0
        weight_total = 0.0
        for report in reports:
            if not report.has_signal:
                continue
            profile = self._credibility.get_profile(report.source)
            if profile is None:
                continue
            saturation = profile.saturation_percent(report.total_count)
            weighted_sum += profile.weight * profile.reliability * saturation
            weight_total += profile.weight

        if weight_total <= 0:
            return 0
        return round_half_up(clamp(weighted_sum / weight_total))

    def recency(self, reports: list[SourceReport]) -> int:
        ratios = [
            min(100.0, report.weighted_count / report.total_count * 100)
            for report in reports
            if report.total_count > 0
        ]
        if not ratios:
            return 50
        return round_half_up(clamp(sum(ratios) / len(ratios)))

    def momentum(self, reports: list[SourceReport]) -> int:
        trend = self._trend_report(reports)
        if trend is None or trend.region_matches is None or not self._regions:
            return 50
        active = sum(1 for region in self._regions if trend.region_matches.get(region, 0) > 0)
        return round_half_up(active / len(self._regions) * 100)

    def _trend_report(self, reports: list[SourceReport]) -> Optional[SourceReport]:
        for report in reports:
            if report.source == self._trend_source:
                return report
        return None

    def _weighted_sum(self, factors: TrendFactors) -> float:
        w = self._weights
        return (
            w.velocity * factors.velocity
            + w.relevance * factors.relevance
            + w.authority * factors.authority
            + w.recency * factors.recency
            + w.momentum * factors.momentum
            + w.sentiment * factors.sentiment
        )
