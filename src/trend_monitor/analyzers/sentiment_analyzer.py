# src/trend_monitor/analyzers/sentiment_analyzer.py
import re
from typing import Optional

from trend_monitor.analyzers.lexicon import AFINN_WORDS
from trend_monitor.analyzers.sentiment_result import SentimentLabel, SentimentResult
from trend_monitor.numeric import clamp, round_half_up

# Everything except word chars, whitespace, apostrophes and hyphens
_PUNCTUATION = re.compile(r"[^\w\s'-]")


class SentimentAnalyzer:
    """Lexicon-based sentiment scoring of headlines and short texts."""

    NEUTRAL_SCORE = 50

    def __init__(self, lexicon: Optional[dict[str, int]] = None):
        """Initialize the sentiment analyzer.

        Args:
            lexicon: Word -> valence mapping. Defaults to the AFINN subset.
        """
        self._lexicon = lexicon if lexicon is not None else AFINN_WORDS

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Lowercase, strip punctuation (keeping ' and -), split on whitespace."""
        return _PUNCTUATION.sub(" ", text.lower()).split()

    def score_text(self, text: Optional[str]) -> int:
        """Score a single text on a 0-100 scale where 50 is neutral.

        score = 50 + (sum of matched valences / token count) * 10
        """
        if not text or not isinstance(text, str):
            return self.NEUTRAL_SCORE

        tokens = self.tokenize(text)
        if not tokens:
            return self.NEUTRAL_SCORE

        total = 0
        matched = 0
        for token in tokens:
            valence = self._lexicon.get(token)
            if valence is not None:
                total += valence
                matched += 1

        if matched == 0:
            return self.NEUTRAL_SCORE

        normalized = self.NEUTRAL_SCORE + (total / len(tokens)) * 10
        return round_half_up(clamp(normalized))

    def analyze_batch(self, texts: list[str]) -> SentimentResult:
        """Average sentiment across texts, skipping blank ones."""
        scores = [self.score_text(text) for text in texts or [] if text and text.strip()]

        if not scores:
            return SentimentResult(
                score=self.NEUTRAL_SCORE,
                label=SentimentLabel.NEUTRAL,
                analyzed_count=0,
            )

        average = round_half_up(sum(scores) / len(scores))
        return SentimentResult(
            score=average,
            label=SentimentLabel.from_score(average),
            analyzed_count=len(scores),
        )
