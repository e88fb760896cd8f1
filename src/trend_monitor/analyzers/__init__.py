"""Analyzers package for lexicon sentiment."""

from trend_monitor.analyzers.sentiment_result import SentimentResult, SentimentLabel
from trend_monitor.analyzers.sentiment_analyzer import SentimentAnalyzer

__all__ = [
    "SentimentResult",
    "SentimentLabel",
    "SentimentAnalyzer",
]
