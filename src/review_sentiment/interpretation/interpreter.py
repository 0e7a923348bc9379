"""
Interpretation of raw hosted-model responses.

Two independent rules, selected by the request shaping that was used:
- Structured classification: ``[[{"label": ..., "score": ...}, ...]]``
- Free-text completion: ``[{"generated_text": "..."}]`` scanned for keywords

Keyword checks are ordered containment tests on the first generated line;
the first keyword that matches wins, so "positive" beats "negative" when both
appear.
"""

from typing import Any

import structlog
from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from review_sentiment.exceptions import MalformedResponseError
from review_sentiment.models.enums import NounDensityBucket, SentimentLabel
from review_sentiment.models.review_models import NounDensityResult, SentimentResult


logger = structlog.get_logger(__name__)

# A prediction must be strictly above this to count as POSITIVE/NEGATIVE.
CONFIDENCE_THRESHOLD = 0.5

CLASSIFICATION_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "array",
    "minItems": 1,
    "items": [
        {
            "type": "array",
            "minItems": 1,
            "items": [
                {
                    "type": "object",
                    "required": ["label", "score"],
                    "properties": {
                        "label": {"type": "string", "minLength": 1},
                        "score": {"type": "number", "minimum": 0, "maximum": 1},
                    },
                }
            ],
        }
    ],
}

_classification_validator = Draft7Validator(CLASSIFICATION_RESPONSE_SCHEMA)

SENTIMENT_KEYWORDS = (
    ("positive", SentimentLabel.POSITIVE),
    ("negative", SentimentLabel.NEGATIVE),
    ("neutral", SentimentLabel.NEUTRAL),
)

NOUN_DENSITY_KEYWORDS = (
    ("high", NounDensityBucket.HIGH),
    ("medium", NounDensityBucket.MEDIUM),
    ("low", NounDensityBucket.LOW),
)


def interpret_classification(raw: Any) -> SentimentResult:
    """
    Interpret a structured classification response.
    
    The first element of the inner array is the top-ranked prediction.
    
    Args:
        raw: Decoded JSON body
        
    Returns:
        SentimentResult with confidence = top score
        
    Raises:
        MalformedResponseError: Nested array shape missing, or the top result
            lacks a string label / numeric score
    """
    error = best_match(_classification_validator.iter_errors(raw))
    if error is not None:
        path = list(error.absolute_path)
        # Past the outer array: the shape is right but the top result is not
        if len(path) >= 2 or (path == [0] and error.validator == "minItems"):
            message = "Invalid sentiment analysis result"
        else:
            message = "Unexpected API response format"
        logger.warning(
            "Malformed classification response",
            path=".".join(str(p) for p in path) or "root",
            error=error.message,
        )
        raise MalformedResponseError(
            message,
            details={"path": path, "schema_error": error.message},
        )
    
    top = raw[0][0]
    raw_label = top["label"]
    score = float(top["score"])
    
    if raw_label == SentimentLabel.POSITIVE.value and score > CONFIDENCE_THRESHOLD:
        label = SentimentLabel.POSITIVE
    elif raw_label == SentimentLabel.NEGATIVE.value and score > CONFIDENCE_THRESHOLD:
        label = SentimentLabel.NEGATIVE
    else:
        label = SentimentLabel.NEUTRAL
    
    return SentimentResult(label=label, confidence=score, raw_label=raw_label)


def extract_generated_text(raw: Any) -> str:
    """``raw[0]["generated_text"]`` if present, else an empty string."""
    if isinstance(raw, list) and raw and isinstance(raw[0], dict):
        text = raw[0].get("generated_text")
        if isinstance(text, str):
            return text
    logger.warning("Generation response has no generated_text", response_type=type(raw).__name__)
    return ""


def first_line(text: str) -> str:
    """First line of generated text, lowercased and trimmed."""
    return text.split("\n")[0].lower().strip()


def interpret_free_text_sentiment(text: str) -> SentimentResult:
    """
    Best-effort sentiment from generated text.
    
    No keyword match yields NEUTRAL with ``resolved=False``.
    """
    line = first_line(text)
    for keyword, label in SENTIMENT_KEYWORDS:
        if keyword in line:
            return SentimentResult(label=label)
    return SentimentResult(label=SentimentLabel.NEUTRAL, resolved=False)


def interpret_noun_density(text: str) -> NounDensityResult:
    """
    Best-effort noun-density bucket from generated text.
    
    No keyword match yields LOW with ``resolved=False``.
    """
    line = first_line(text)
    for keyword, bucket in NOUN_DENSITY_KEYWORDS:
        if keyword in line:
            return NounDensityResult(bucket=bucket)
    return NounDensityResult(bucket=NounDensityBucket.LOW, resolved=False)
