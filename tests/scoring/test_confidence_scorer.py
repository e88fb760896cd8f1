# tests/scoring/test_confidence_scorer.py
"""Tests for the confidence scorer."""
import pytest

from trend_monitor.models.article import SourceName, SourceReport, SourceResult
from trend_monitor.scoring.confidence_scorer import ConfidenceScorer
from trend_monitor.scoring.source_credibility import SourceCredibilityManager, SourceProfile


def report_with_data(source, total=5):
    return SourceReport(
        source=source,
        results=[SourceResult(term="widget", total_count=total, weighted_count=total * 0.5)],
        scanned_count=total,
    )


class TestConfidenceScorer:
    """Tests for ConfidenceScorer."""

    def test_max_sources_matches_profiles(self):
        assert ConfidenceScorer().max_sources == 8

    def test_zero_data_points_is_floor(self):
        """Test that no data gives the 10% floor."""
        result = ConfidenceScorer().score([], coherence_score=0)

        assert result.confidence == 10
        assert result.data_point_count == 0
        assert result.base_confidence == 0

    def test_single_weak_source_clamped_to_floor(self):
        result = ConfidenceScorer().score([report_with_data(SourceName.GOOGLE_NEWS)], 50)

        assert result.confidence == 10
        assert result.data_point_count == 1

    def test_four_news_sources(self):
        """Test base x freshness x sample size x agreement for four sources."""
        reports = [
            report_with_data(SourceName.GOOGLE_NEWS),
            report_with_data(SourceName.NEWSDATA),
            report_with_data(SourceName.SERPAPI),
            report_with_data(SourceName.GDELT),
        ]

        result = ConfidenceScorer().score(reports, coherence_score=50)

        # base = 0.14 * (0.80 + 0.80 + 0.90 + 0.75) = 0.455
        # 0.455 * 0.70 * 0.65 * 0.95 = 0.1967
        assert result.base_confidence == pytest.approx(0.455)
        assert result.multipliers == {"freshness": 0.7, "sample_size": 0.65, "agreement": 0.95}
        assert result.confidence == 20

    def test_all_sources_full_coherence_stays_below_ceiling(self):
        """Test that every source with coherence 100 lands near but under 98."""
        reports = [report_with_data(source) for source in SourceName]

        result = ConfidenceScorer().score(reports, coherence_score=100)

        # base 0.784 * 1.0 * 1.0 * 1.15 = 0.9016
        assert result.confidence == 90
        assert result.confidence <= 98

    def test_ceiling_is_98(self):
        credibility = SourceCredibilityManager(
            {SourceName.SERPAPI: SourceProfile(SourceName.SERPAPI, 1.0, 1.0, 10)}
        )

        result = ConfidenceScorer(credibility).score([report_with_data(SourceName.SERPAPI)], 100)

        assert result.confidence == 98

    def test_sources_without_data_do_not_count(self):
        empty = SourceReport(
            source=SourceName.REDDIT,
            results=[SourceResult(term="widget", total_count=0, weighted_count=0.0)],
            scanned_count=0,
        )

        result = ConfidenceScorer().score([empty], coherence_score=100)

        assert result.data_point_count == 0
        assert result.confidence == 10

    @pytest.mark.parametrize("coherence", [-50, 0, 37, 100, 250])
    def test_always_within_bounds(self, coherence):
        reports = [report_with_data(source) for source in SourceName]

        result = ConfidenceScorer().score(reports, coherence_score=coherence)

        assert 10 <= result.confidence <= 98
