# src/trend_monitor/analyzers/sentiment_result.py
from enum import Enum

from pydantic import BaseModel, Field


class SentimentLabel(str, Enum):
    NEGATIVE = "Negative"
    SOMEWHAT_NEGATIVE = "Somewhat Negative"
    NEUTRAL = "Neutral"
    SOMEWHAT_POSITIVE = "Somewhat Positive"
    POSITIVE = "Positive"

    @classmethod
    def from_score(cls, score: int) -> "SentimentLabel":
        """Classify a 0-100 sentiment score.

        Breakpoints: <=30 Negative, <=45 Somewhat Negative, <=55 Neutral,
        <=70 Somewhat Positive, else Positive.
        """
        if score <= 30:
            return cls.NEGATIVE
        elif score <= 45:
            return cls.SOMEWHAT_NEGATIVE
        elif score <= 55:
            return cls.NEUTRAL
        elif score <= 70:
            return cls.SOMEWHAT_POSITIVE
        else:
            return cls.POSITIVE


class SentimentResult(BaseModel):
    """Aggregate sentiment over a batch of short texts."""

    score: int = Field(default=50, ge=0, le=100, description="50 = neutral, higher = more positive")
    label: SentimentLabel = SentimentLabel.NEUTRAL
    analyzed_count: int = Field(default=0, ge=0)
