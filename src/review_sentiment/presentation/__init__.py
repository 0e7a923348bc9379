"""
Presentation layer: explicit session object and the controller that owns
the view-model state machine.
"""

from review_sentiment.presentation.controller import PresentationController
from review_sentiment.presentation.session import ReviewSession

__all__ = ["PresentationController", "ReviewSession"]
