# src/trend_monitor/scoring/confidence_scorer.py
"""Confidence: how much the trend score can be trusted given its data."""
from typing import Optional

from trend_monitor.models.article import SourceReport
from trend_monitor.numeric import round_half_up
from trend_monitor.scoring.models import ConfidenceResult
from trend_monitor.scoring.source_credibility import SourceCredibilityManager


class ConfidenceScorer:
    """Data-quality-weighted confidence in a monitor's trend score.

    base = sum(reliability x weight) over sources that returned data

    Multipliers, with dp = data points and n = max_sources:
    - freshness:   0.4 + 0.6 x dp / n
    - sample_size: 0.3 + 0.7 x min(1, dp / n)
    - agreement:   0.75 + 0.40 x coherence / 100

    confidence = base x all three, bounded to [0.10, 0.98], as a percent.
    """

    MIN_CONFIDENCE = 0.10
    MAX_CONFIDENCE = 0.98

    def __init__(self, credibility: Optional[SourceCredibilityManager] = None):
        """Initialize the confidence scorer.

        Args:
            credibility: Source profiles. max_sources is taken from it.
        """
        self._credibility = credibility or SourceCredibilityManager()

    @property
    def max_sources(self) -> int:
        return self._credibility.max_sources

    def score(self, reports: list[SourceReport], coherence_score: float) -> ConfidenceResult:
        """Compute confidence for one monitor pass.

        Args:
            reports: Reports of the available sources.
            coherence_score: Coherence score (0-100) of the same pass.

        Returns:
            ConfidenceResult with the percent and its multiplier breakdown.
        """
        with_data = [report for report in reports if report.has_data]
        data_points = len(with_data)

        base = 0.0
        for report in with_data:
            profile = self._credibility.get_profile(report.source)
            if profile is not None:
                base += profile.reliability * profile.weight

        coverage = data_points / self.max_sources if self.max_sources else 0.0
        freshness = 0.4 + 0.6 * coverage
        sample_size = 0.3 + 0.7 * min(1.0, coverage)
        agreement = 0.75 + 0.40 * (max(0.0, min(100.0, coherence_score)) / 100)

        fraction = base * freshness * sample_size * agreement
        fraction = max(self.MIN_CONFIDENCE, min(self.MAX_CONFIDENCE, fraction))

        return ConfidenceResult(
            confidence=round_half_up(fraction * 100),
            data_point_count=data_points,
            base_confidence=round(base, 4),
            multipliers={
                "freshness": round(freshness, 2),
                "sample_size": round(sample_size, 2),
                "agreement": round(agreement, 2),
            },
        )
