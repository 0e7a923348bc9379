"""
Domain models for corpus entries and interpreted results.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from review_sentiment.models.enums import NounDensityBucket, SentimentLabel


class Review(BaseModel):
    """A single corpus entry (trimmed, never blank)."""
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., min_length=1, description="Review text, trimmed")


Corpus = tuple[Review, ...]


class SentimentResult(BaseModel):
    """
    Sentiment derived from one inference response.
    
    Structured classification fills ``confidence`` and ``raw_label``; free-text
    interpretation leaves them empty. ``resolved`` is False when the generated
    text matched none of the sentiment keywords (shown like NEUTRAL).
    """
    model_config = ConfigDict(frozen=True)
    
    label: SentimentLabel
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    raw_label: Optional[str] = Field(default=None, description="Label as returned by the model")
    resolved: bool = True


class NounDensityResult(BaseModel):
    """Noun-density bucket; ``resolved`` is False when LOW is only the default."""
    model_config = ConfigDict(frozen=True)
    
    bucket: NounDensityBucket
    resolved: bool = True
