"""
Pydantic data models for the review sentiment demo.

Includes:
- Enums (SentimentLabel, NounDensityBucket, AnalysisKind, UIPhase)
- Domain models (Review, SentimentResult, NounDensityResult)
- View models (ResultDisplay, ViewState)
"""

from review_sentiment.models.enums import (
    AnalysisKind,
    NounDensityBucket,
    SentimentLabel,
    UIPhase,
)
from review_sentiment.models.review_models import (
    Corpus,
    NounDensityResult,
    Review,
    SentimentResult,
)
from review_sentiment.models.view_models import ResultDisplay, ViewState

__all__ = [
    # Enums
    "AnalysisKind",
    "NounDensityBucket",
    "SentimentLabel",
    "UIPhase",
    # Domain models
    "Corpus",
    "Review",
    "SentimentResult",
    "NounDensityResult",
    # View models
    "ResultDisplay",
    "ViewState",
]
