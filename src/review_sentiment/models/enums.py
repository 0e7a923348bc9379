"""
Enumerations for the review sentiment demo.

All enums are closed vocabularies - no values outside these sets are displayed.
"""

from enum import Enum


class SentimentLabel(str, Enum):
    """
    Display category for a sentiment result.
    
    NEUTRAL also covers "uncertain": a structured prediction at or below the
    confidence threshold, or free text that matched no keyword.
    """
    
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class NounDensityBucket(str, Enum):
    """Coarse noun count bucket: High (>15), Medium (6-15), Low (<6)."""
    
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class AnalysisKind(str, Enum):
    """Which request shaping / interpretation rule an analysis uses."""
    
    CLASSIFICATION = "classification"  # Direct classification model
    SENTIMENT = "sentiment"  # Prompted completion, sentiment keywords
    NOUNS = "nouns"  # Prompted completion, noun-density keywords


class UIPhase(str, Enum):
    """Presentation state machine phases."""
    
    IDLE = "idle"
    LOADING = "loading"
    RESULT_SHOWN = "result-shown"
    ERROR_SHOWN = "error-shown"
