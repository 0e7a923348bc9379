"""Render interpreted results into display regions of the view-model."""

from decimal import ROUND_HALF_UP, Decimal

from review_sentiment.models.enums import NounDensityBucket, SentimentLabel
from review_sentiment.models.review_models import NounDensityResult, SentimentResult
from review_sentiment.models.view_models import ResultDisplay


SENTIMENT_STYLES = {
    SentimentLabel.POSITIVE: ("👍", "positive", "Positive"),
    SentimentLabel.NEGATIVE: ("👎", "negative", "Negative"),
    SentimentLabel.NEUTRAL: ("❓", "neutral", "Neutral/Uncertain"),
}

NOUN_DENSITY_STYLES = {
    NounDensityBucket.HIGH: ("🟢", "high", "High (>15 nouns)"),
    NounDensityBucket.MEDIUM: ("🟡", "medium", "Medium (6-15 nouns)"),
    NounDensityBucket.LOW: ("🔴", "low", "Low (<6 nouns)"),
}


def format_confidence(score: float) -> str:
    """0.92 -> '92.0% confidence'; ties round half up (0.1225 -> 12.3%)."""
    percent = Decimal(repr(score * 100)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{percent}% confidence"


def render_sentiment(result: SentimentResult) -> ResultDisplay:
    icon, css_class, title = SENTIMENT_STYLES[result.label]
    text = title
    if result.confidence is not None:
        text = f"{title} ({format_confidence(result.confidence)})"
    return ResultDisplay(
        category=result.label.value,
        icon=icon,
        css_class=css_class,
        text=text,
        resolved=result.resolved,
    )


def render_noun_density(result: NounDensityResult) -> ResultDisplay:
    icon, css_class, title = NOUN_DENSITY_STYLES[result.bucket]
    return ResultDisplay(
        category=result.bucket.value,
        icon=icon,
        css_class=css_class,
        text=title,
        resolved=result.resolved,
    )
