"""Unit tests for PromptBuilder request shaping."""

from review_sentiment.models.enums import AnalysisKind


REVIEW = "The zipper broke & the seller ignored me."


def test_classification_sends_raw_text(prompt_builder):
    assert prompt_builder.build_inputs(AnalysisKind.CLASSIFICATION, REVIEW) == REVIEW


def test_sentiment_prompt(prompt_builder):
    assert prompt_builder.build_inputs(AnalysisKind.SENTIMENT, REVIEW) == (
        "Classify this review as positive, negative, or neutral: " + REVIEW
    )


def test_noun_count_prompt(prompt_builder):
    assert prompt_builder.build_inputs(AnalysisKind.NOUNS, REVIEW) == (
        "Count the nouns in this review and return only High (>15), Medium (6-15), or Low (<6). "
        + REVIEW
    )


def test_review_text_is_not_treated_as_template(prompt_builder):
    text = "Five stars {{ not a variable }}"
    
    assert prompt_builder.build_inputs(AnalysisKind.SENTIMENT, text).endswith(text)


def test_model_url_per_kind(prompt_builder, test_settings):
    assert prompt_builder.model_url_for(AnalysisKind.CLASSIFICATION) == test_settings.CLASSIFICATION_MODEL_URL
    assert prompt_builder.model_url_for(AnalysisKind.SENTIMENT) == test_settings.GENERATION_MODEL_URL
    assert prompt_builder.model_url_for(AnalysisKind.NOUNS) == test_settings.GENERATION_MODEL_URL
