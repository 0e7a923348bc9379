"""Unit tests for result display rendering."""

from review_sentiment.interpretation.display import (
    format_confidence,
    render_noun_density,
    render_sentiment,
)
from review_sentiment.interpretation.interpreter import interpret_classification
from review_sentiment.models.enums import NounDensityBucket, SentimentLabel
from review_sentiment.models.review_models import NounDensityResult, SentimentResult


def test_format_confidence_one_decimal():
    assert format_confidence(0.92) == "92.0% confidence"
    assert format_confidence(0.3) == "30.0% confidence"
    assert format_confidence(0.98765) == "98.8% confidence"


def test_format_confidence_rounds_ties_up():
    assert format_confidence(0.1225) == "12.3% confidence"
    assert format_confidence(0.0625) == "6.3% confidence"
    assert format_confidence(1.0) == "100.0% confidence"


def test_positive_classification_display():
    display = render_sentiment(interpret_classification([[{"label": "POSITIVE", "score": 0.92}]]))
    
    assert display.category == "POSITIVE"
    assert display.icon == "👍"
    assert display.css_class == "positive"
    assert display.text == "Positive (92.0% confidence)"


def test_low_confidence_negative_is_shown_uncertain():
    display = render_sentiment(interpret_classification([[{"label": "NEGATIVE", "score": 0.3}]]))
    
    assert display.category == "NEUTRAL"
    assert display.icon == "❓"
    assert display.text == "Neutral/Uncertain (30.0% confidence)"


def test_negative_display():
    display = render_sentiment(SentimentResult(label=SentimentLabel.NEGATIVE, confidence=0.81))
    
    assert display.icon == "👎"
    assert display.text == "Negative (81.0% confidence)"


def test_free_text_display_has_no_confidence():
    display = render_sentiment(SentimentResult(label=SentimentLabel.POSITIVE))
    
    assert display.text == "Positive"


def test_unresolved_free_text_renders_like_neutral():
    resolved = render_sentiment(SentimentResult(label=SentimentLabel.NEUTRAL))
    unresolved = render_sentiment(SentimentResult(label=SentimentLabel.NEUTRAL, resolved=False))
    
    assert (unresolved.icon, unresolved.css_class, unresolved.text) == (
        resolved.icon,
        resolved.css_class,
        resolved.text,
    )
    assert not unresolved.resolved


def test_noun_density_icons():
    icons = {
        bucket: render_noun_density(NounDensityResult(bucket=bucket)).icon
        for bucket in NounDensityBucket
    }
    
    assert icons == {
        NounDensityBucket.HIGH: "🟢",
        NounDensityBucket.MEDIUM: "🟡",
        NounDensityBucket.LOW: "🔴",
    }
