# src/trend_monitor/notifications/alert_formatter.py
"""Formats trend alerts, analysis reports and run summaries as text."""
from typing import TYPE_CHECKING

from trend_monitor.models.monitor import Monitor
from trend_monitor.scoring.models import CoherenceLevel, ScoreSnapshot

if TYPE_CHECKING:
    from trend_monitor.orchestrator.models import RunSummary

NO_ARTICLES = "No related articles found"


def coherence_emoji(level: CoherenceLevel) -> str:
    if level == CoherenceLevel.HIGH:
        return "🎯"
    elif level == CoherenceLevel.MEDIUM:
        return "📊"
    return "⚡"


class AlertFormatter:
    """Formats scoring results into readable plain-text blocks."""

    def __init__(self, max_articles: int = 10):
        self._max_articles = max_articles

    def format_alert_content(self, snapshot: ScoreSnapshot) -> str:
        """One-line alert text."""
        return f"Trend alert: {snapshot.summary}"

    def format_articles(self, snapshot: ScoreSnapshot) -> str:
        """Top articles as "- title (publisher)" lines."""
        lines = []
        for article in snapshot.top_articles[: self._max_articles]:
            if not article.title:
                continue
            publisher = article.publisher or article.source.value
            line = f"- {article.title} ({publisher})"
            if article.url:
                line += f"\n  {article.url}"
            lines.append(line)
        return "\n".join(lines) if lines else NO_ARTICLES

    def format_factors(self, snapshot: ScoreSnapshot) -> str:
        f = snapshot.trend.factors
        return (
            f"Velocity: {f.velocity} | Momentum: {f.momentum} | Sentiment: {f.sentiment} | "
            f"Relevance: {f.relevance} | Authority: {f.authority} | Recency: {f.recency}"
        )

    def format_trend_alert(self, monitor: Monitor, snapshot: ScoreSnapshot) -> str:
        """Format the alert raised when a monitor crosses its threshold."""
        trend = snapshot.trend
        coherence = snapshot.coherence
        threshold = f"{monitor.threshold:g}"

        recommendations = "\n".join(snapshot.recommendations.formatted) or (
            snapshot.recommendations.top_recommendation
        )

        return f"""📈 TREND ALERT: {', '.join(monitor.terms)}

⚠️ Threshold exceeded: {trend.change_percent}% change (threshold: {threshold}%)

Scoring Metrics
• Trend Score: {trend.trend_score} (raw: {trend.raw_score})
• {coherence_emoji(coherence.level)} Coherence: {coherence.score} ({coherence.level.value})
• Confidence: {snapshot.confidence.confidence}%
• Change: {trend.change_percent}%

Score Factors
{self.format_factors(snapshot)}

Monitor Details
• Monitor ID: {monitor.id}
• Terms: {', '.join(monitor.terms)}
• Interval: {monitor.interval.value}
• Data Sources: {trend.data_sources_used}

Recommendations
{recommendations}

Related Articles
{self.format_articles(snapshot)}"""

    def format_report(self, monitor: Monitor, snapshot: ScoreSnapshot) -> str:
        """Format the full analysis report of one scoring pass."""
        trend = snapshot.trend
        coherence = snapshot.coherence
        confidence = snapshot.confidence
        dedup = snapshot.deduplication

        coherence_factors = " | ".join(
            f"{name.replace('_', ' ').title()}: {value}"
            for name, value in coherence.factors.items()
        ) or "No sources reported"
        multipliers = " | ".join(
            f"{name.replace('_', ' ').title()}: {value:.2f}"
            for name, value in confidence.multipliers.items()
        )
        previous = trend.previous_score if trend.previous_score is not None else "N/A"

        return f"""📊 TREND ANALYSIS: {monitor.id}
{snapshot.summary}

Scoring Metrics
• Trend Score: {trend.trend_score} (raw: {trend.raw_score}, smoothed: {trend.smoothed_score}, previous: {previous})
• Change: {trend.change_percent:+d}% ({snapshot.direction.label})
• Momentum: {snapshot.momentum.label.value}
• {coherence_emoji(coherence.level)} Coherence: {coherence.score} ({coherence.level.value})
• Confidence: {confidence.confidence}% from {confidence.data_point_count} data points
• Sentiment: {trend.factors.sentiment} ({snapshot.sentiment_label})

Score Factors
{self.format_factors(snapshot)}

Coherence Factors
{coherence_factors}

Confidence Multipliers
{multipliers}

Articles
• {dedup.original_count} collected, {dedup.deduplicated_count} after deduplication

Recommendation
{snapshot.recommendations.top_recommendation}

Top Related Articles
{self.format_articles(snapshot)}"""

    def format_run_summary(self, summary: "RunSummary") -> str:
        """Format the end-of-run summary."""
        completed = summary.completed_at.isoformat(timespec="seconds") if summary.completed_at else "N/A"
        mode = " (DRY RUN)" if summary.dry_run else ""

        return f"""SUMMARY{mode}
Total active monitors:   {summary.total_monitors}
Monitors due:            {summary.due_monitors}
Monitors checked:        {summary.checked}
Alerts created:          {summary.alerts_created}
Duplicate alerts:        {summary.duplicate_alerts}
Invalid monitors:        {summary.invalid_monitors}
Errors:                  {summary.errors}
Completed:               {completed}"""
