"""Unit test fixtures (clients, builders and controllers wired to mocks)."""

import random

import pytest

from review_sentiment.llm.hf_client import HuggingFaceInferenceClient
from review_sentiment.llm.prompt_builder import PromptBuilder
from review_sentiment.models.review_models import Review
from review_sentiment.presentation.controller import PresentationController
from review_sentiment.presentation.session import ReviewSession


@pytest.fixture
def prompt_builder(test_settings) -> PromptBuilder:
    """PromptBuilder with the package templates and test endpoints."""
    return PromptBuilder(
        classification_model_url=test_settings.CLASSIFICATION_MODEL_URL,
        generation_model_url=test_settings.GENERATION_MODEL_URL,
    )


@pytest.fixture
def sample_corpus() -> tuple[Review, ...]:
    return (
        Review(text="Absolutely loved it."),
        Review(text="Worst purchase ever."),
        Review(text="It arrived on Tuesday."),
    )


@pytest.fixture
def make_controller(prompt_builder, sample_corpus):
    """Factory fixture: controller over ``sample_corpus`` using a mock transport.
    
    Usage:
        def test_something(make_controller, recording_transport):
            transport = recording_transport(json_body=[...])
            controller = make_controller(transport)
    """
    def _create(transport, corpus=None, seed: int = 7) -> PresentationController:
        session = ReviewSession(corpus=sample_corpus if corpus is None else corpus)
        session.view.corpus_size = len(session.corpus)
        return PresentationController(
            session=session,
            client=HuggingFaceInferenceClient(timeout=5.0, transport=transport),
            prompt_builder=prompt_builder,
            rng=random.Random(seed),
        )
    
    return _create
