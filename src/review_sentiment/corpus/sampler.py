"""Uniform random selection of one review from the corpus."""

import random
from typing import Optional

from review_sentiment.exceptions import EmptyCorpusError
from review_sentiment.models.review_models import Corpus, Review


def sample(corpus: Corpus, rng: Optional[random.Random] = None) -> Review:
    """
    Pick one review uniformly at random.
    
    Uses the unseeded module-level generator unless ``rng`` is given.
    
    Raises:
        EmptyCorpusError: Corpus is empty (not loaded, or load failed)
    """
    if not corpus:
        raise EmptyCorpusError("No reviews loaded yet. Please wait...")
    
    index = (rng or random).randrange(len(corpus))
    return corpus[index]
