"""
Result interpretation: raw model responses -> fixed display vocabulary.

- interpreter: shape validation (jsonschema) and keyword heuristics
- display: ResultDisplay rendering (icons, labels, confidence text)
"""

from review_sentiment.interpretation.display import (
    format_confidence,
    render_noun_density,
    render_sentiment,
)
from review_sentiment.interpretation.interpreter import (
    CONFIDENCE_THRESHOLD,
    extract_generated_text,
    first_line,
    interpret_classification,
    interpret_free_text_sentiment,
    interpret_noun_density,
)

__all__ = [
    "CONFIDENCE_THRESHOLD",
    "extract_generated_text",
    "first_line",
    "interpret_classification",
    "interpret_free_text_sentiment",
    "interpret_noun_density",
    "format_confidence",
    "render_sentiment",
    "render_noun_density",
]
