"""
Explicit session object.

Holds everything that used to be page-global: the loaded corpus, the review
currently on screen and the view state. One instance per running app.
"""

from dataclasses import dataclass, field
from typing import Optional

from review_sentiment.models.review_models import Corpus, Review
from review_sentiment.models.view_models import ViewState


@dataclass
class ReviewSession:
    """Corpus + current review + view state for the single demo session."""
    corpus: Corpus = ()
    current_review: Optional[Review] = None
    view: ViewState = field(default_factory=ViewState)
    load_error: Optional[str] = None  # Terminal corpus load failure, if any

    @property
    def corpus_loaded(self) -> bool:
        return bool(self.corpus)
