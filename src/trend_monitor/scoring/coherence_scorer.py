# src/trend_monitor/scoring/coherence_scorer.py
"""Cross-source coherence: do the sources agree that a signal exists?"""
from trend_monitor.models.article import SourceName, SourceReport
from trend_monitor.numeric import clamp, round_half_up
from trend_monitor.scoring.models import CoherenceLevel, CoherenceResult

_SOURCE_ORDER = {source: index for index, source in enumerate(SourceName)}


class CoherenceScorer:
    """Measures agreement among the sources reporting on a monitor.

    Four weighted sub-factors, each 0-100:
    - direction_agreement (30%): share of sources with any signal
    - magnitude_consistency (25%): min/max of source item counts
      (1 source -> 50)
    - temporal_consistency (25%): mean recency weight of the most
      temporally rich source (none -> 50)
    - term_correlation (20%): mean share of terms with results per source
      (no per-term breakdown -> 50)

    No sources -> score 0, level Noise, no factors.
    """

    DEFAULT_FACTOR = 50

    def __init__(
        self,
        direction_weight: float = 0.30,
        magnitude_weight: float = 0.25,
        temporal_weight: float = 0.25,
        term_weight: float = 0.20,
    ):
        """Initialize the coherence scorer.

        Args:
            direction_weight: Weight of direction agreement.
            magnitude_weight: Weight of magnitude consistency.
            temporal_weight: Weight of temporal consistency.
            term_weight: Weight of term correlation.
        """
        self._direction_weight = direction_weight
        self._magnitude_weight = magnitude_weight
        self._temporal_weight = temporal_weight
        self._term_weight = term_weight

    def score(self, reports: list[SourceReport]) -> CoherenceResult:
        """Score cross-source agreement.

        Args:
            reports: Reports of the available sources; absent sources omitted.

        Returns:
            CoherenceResult with score, level and sub-factors.
        """
        present = [report for report in reports if report.is_present]
        if not present:
            return CoherenceResult(score=0, level=CoherenceLevel.NOISE, factors={})

        factors = {
            "direction_agreement": self.direction_agreement(present),
            "magnitude_consistency": self.magnitude_consistency(present),
            "temporal_consistency": self.temporal_consistency(present),
            "term_correlation": self.term_correlation(present),
        }
        weighted = (
            factors["direction_agreement"] * self._direction_weight
            + factors["magnitude_consistency"] * self._magnitude_weight
            + factors["temporal_consistency"] * self._temporal_weight
            + factors["term_correlation"] * self._term_weight
        )
        score = round_half_up(clamp(weighted))
        return CoherenceResult(
            score=score,
            level=CoherenceLevel.from_score(score),
            factors=factors,
        )

    def direction_agreement(self, reports: list[SourceReport]) -> int:
        with_signal = sum(1 for report in reports if report.has_signal)
        return round_half_up(with_signal / len(reports) * 100)

    def magnitude_consistency(self, reports: list[SourceReport]) -> int:
        if len(reports) == 1:
            return self.DEFAULT_FACTOR
        magnitudes = [report.total_count for report in reports]
        largest = max(magnitudes)
        if largest <= 0:
            return 0
        return round_half_up(min(magnitudes) / largest * 100)

    def temporal_consistency(self, reports: list[SourceReport]) -> int:
        """Mean recency weight of the source with the most dated items.

        Ties go to the source listed first in SourceName, so the trend
        source wins ties.
        """
        best_items = []
        best_key = None
        for report in reports:
            dated = [item for item in report.items if item.published_at is not None]
            if not dated:
                continue
            key = (-len(dated), _SOURCE_ORDER.get(report.source, len(_SOURCE_ORDER)))
            if best_key is None or key < best_key:
                best_key = key
                best_items = dated

        if not best_items:
            return self.DEFAULT_FACTOR
        mean_weight = sum(item.recency_weight for item in best_items) / len(best_items)
        return round_half_up(clamp(mean_weight * 100))

    def term_correlation(self, reports: list[SourceReport]) -> int:
        coverages = [
            report.term_coverage for report in reports if report.term_coverage is not None
        ]
        if not coverages:
            return self.DEFAULT_FACTOR
        return round_half_up(sum(coverages) / len(coverages) * 100)
