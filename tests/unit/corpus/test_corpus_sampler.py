"""Unit tests for the random review sampler."""

import random

import pytest

from review_sentiment.corpus.sampler import sample
from review_sentiment.exceptions import EmptyCorpusError
from review_sentiment.models.review_models import Review


def make_corpus(size: int) -> tuple[Review, ...]:
    return tuple(Review(text=f"review {i}") for i in range(size))


def test_empty_corpus_raises():
    with pytest.raises(EmptyCorpusError) as exc_info:
        sample(())
    
    assert exc_info.value.user_message == "No reviews loaded yet. Please wait..."


def test_single_review_is_always_selected():
    corpus = make_corpus(1)
    
    assert all(sample(corpus) is corpus[0] for _ in range(20))


def test_repeated_sampling_covers_every_index():
    corpus = make_corpus(5)
    seen = {sample(corpus).text for _ in range(500)}
    
    assert seen == {review.text for review in corpus}


def test_samples_never_leave_the_corpus():
    corpus = make_corpus(7)
    rng = random.Random(1234)
    
    for _ in range(200):
        assert sample(corpus, rng) in corpus


def test_injected_rng_is_used():
    corpus = make_corpus(10)
    
    first = [sample(corpus, random.Random(42)).text for _ in range(3)]
    second = [sample(corpus, random.Random(42)).text for _ in range(3)]
    
    assert first == second
