"""
Presentation controller: the only writer of the session's view state.

State machine::

    idle -> loading                  analysis requested
    loading -> result-shown          response interpreted
    loading -> error-shown           any fetch / parse / interpretation failure
    result-shown | error-shown -> loading   next analysis (display cleared first)

While loading, buttons are disabled and new actions are refused, so at most
one inference request is outstanding. Leaving loading always re-enables them.
"""

import random
from typing import Any, Optional

import httpx
import structlog

from review_sentiment.corpus.loader import load_corpus
from review_sentiment.corpus.sampler import sample
from review_sentiment.exceptions import ReviewDemoError
from review_sentiment.interpretation.display import render_noun_density, render_sentiment
from review_sentiment.interpretation.interpreter import (
    extract_generated_text,
    interpret_classification,
    interpret_free_text_sentiment,
    interpret_noun_density,
)
from review_sentiment.llm.hf_client import HuggingFaceInferenceClient
from review_sentiment.llm.prompt_builder import PromptBuilder
from review_sentiment.models.enums import AnalysisKind, UIPhase
from review_sentiment.models.review_models import Review
from review_sentiment.models.view_models import ResultDisplay, ViewState
from review_sentiment.monitoring.metrics import interpreted_results_total
from review_sentiment.presentation.session import ReviewSession


logger = structlog.get_logger(__name__)

NO_REVIEW_SELECTED = "Please select a review first"
ANALYSIS_FAILED_PREFIX = "Analysis failed: "


class PresentationController:
    """
    Drive the demo session from user actions.
    
    Each public action returns a snapshot of the view state after it ran.
    Errors never escape an action: they become ``view.error_message``.
    """
    
    def __init__(
        self,
        session: ReviewSession,
        client: HuggingFaceInferenceClient,
        prompt_builder: PromptBuilder,
        rng: Optional[random.Random] = None,
    ):
        self.session = session
        self.client = client
        self.prompt_builder = prompt_builder
        self.rng = rng
    
    @property
    def view(self) -> ViewState:
        """Snapshot of the current view state."""
        return self.session.view.model_copy(deep=True)
    
    # === Actions ===
    
    async def load_corpus(
        self,
        source: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> ViewState:
        """Load the corpus once at startup; failure is terminal for the session."""
        try:
            corpus = await load_corpus(source, client=http_client, timeout=timeout)
        except ReviewDemoError as e:
            logger.error("Corpus load failed", source=source, error=e.message, details=e.details)
            self.session.load_error = e.user_message
            self._show_error(e.user_message)
            return self.view
        except Exception as e:
            logger.exception("Unexpected error loading corpus", source=source)
            self.session.load_error = f"Error loading reviews: {e}"
            self._show_error(self.session.load_error)
            return self.view
        
        self.session.corpus = corpus
        self.session.load_error = None
        self.session.view.corpus_size = len(corpus)
        return self.view
    
    def select_random_review(self) -> ViewState:
        """Clear the displayed results and put a new random review on screen."""
        if self._busy("select_random_review"):
            return self.view
        
        self._clear_display()
        self.session.view.phase = UIPhase.IDLE
        try:
            self._set_current_review(sample(self.session.corpus, self.rng))
        except ReviewDemoError as e:
            self._show_error(e.user_message)
        return self.view
    
    async def analyze(self, kind: AnalysisKind, token: Optional[str] = None) -> ViewState:
        """Run one analysis on the review currently on screen."""
        if self._busy("analyze"):
            return self.view
        
        review = self.session.current_review
        if review is None:
            self._show_error(NO_REVIEW_SELECTED)
            return self.view
        
        await self._run_analysis(kind, review, token)
        return self.view
    
    async def analyze_random_review(self, token: Optional[str] = None) -> ViewState:
        """Sample and classify in one action (direct classification model)."""
        if self._busy("analyze_random_review"):
            return self.view
        
        self._clear_display()
        try:
            review = sample(self.session.corpus, self.rng)
        except ReviewDemoError as e:
            self._show_error(e.user_message)
            return self.view
        
        self._set_current_review(review)
        await self._run_analysis(
            AnalysisKind.CLASSIFICATION, review, token, error_prefix=ANALYSIS_FAILED_PREFIX
        )
        return self.view
    
    # === Pipeline ===
    
    async def _run_analysis(
        self,
        kind: AnalysisKind,
        review: Review,
        token: Optional[str],
        error_prefix: str = "",
    ) -> None:
        self._begin_loading()
        try:
            inputs = self.prompt_builder.build_inputs(kind, review.text)
            raw = await self.client.infer(self.prompt_builder.model_url_for(kind), inputs, token)
            display = self._interpret(kind, raw)
        except ReviewDemoError as e:
            logger.warning(
                "Analysis failed",
                kind=kind.value,
                error_type=type(e).__name__,
                error=e.message,
            )
            self._show_error(error_prefix + e.user_message)
        except Exception as e:
            logger.exception("Unexpected error during analysis", kind=kind.value)
            self._show_error(error_prefix + str(e))
        else:
            self._show_result(kind, display)
        finally:
            self._end_loading()
    
    def _interpret(self, kind: AnalysisKind, raw: Any) -> ResultDisplay:
        if kind == AnalysisKind.CLASSIFICATION:
            display = render_sentiment(interpret_classification(raw))
        elif kind == AnalysisKind.SENTIMENT:
            display = render_sentiment(interpret_free_text_sentiment(extract_generated_text(raw)))
        else:
            display = render_noun_density(interpret_noun_density(extract_generated_text(raw)))
        
        interpreted_results_total.labels(
            kind=kind.value,
            category=display.category if display.resolved else "UNRESOLVED",
        ).inc()
        logger.info(
            "Analysis completed",
            kind=kind.value,
            category=display.category,
            resolved=display.resolved,
        )
        return display
    
    # === View state transitions ===
    
    def _busy(self, action: str) -> bool:
        if self.session.view.phase == UIPhase.LOADING:
            logger.warning("Action ignored while a request is in flight", action=action)
            return True
        return False
    
    def _set_current_review(self, review: Review) -> None:
        self.session.current_review = review
        self.session.view.current_review = review.text
    
    def _clear_display(self) -> None:
        view = self.session.view
        view.error_message = None
        view.sentiment = None
        view.noun_density = None
    
    def _begin_loading(self) -> None:
        self._clear_display()
        view = self.session.view
        view.phase = UIPhase.LOADING
        view.buttons_disabled = True
        view.spinner_visible = True
    
    def _end_loading(self) -> None:
        view = self.session.view
        view.buttons_disabled = False
        view.spinner_visible = False
    
    def _show_result(self, kind: AnalysisKind, display: ResultDisplay) -> None:
        view = self.session.view
        if kind == AnalysisKind.NOUNS:
            view.noun_density = display
        else:
            view.sentiment = display
        view.phase = UIPhase.RESULT_SHOWN
    
    def _show_error(self, message: str) -> None:
        view = self.session.view
        view.error_message = message
        view.phase = UIPhase.ERROR_SHOWN
