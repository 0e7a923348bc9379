"""
Routes for the demo page and the JSON API it calls.

Every action endpoint returns the full ViewState after the action ran; the
page redraws itself from it.
"""

from pathlib import Path
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from review_sentiment.api.dependencies import get_controller, get_settings
from review_sentiment.api.models import AnalyzeRequest, HealthResponse
from review_sentiment.config import Settings
from review_sentiment.models.enums import AnalysisKind
from review_sentiment.models.view_models import ViewState
from review_sentiment.presentation.controller import PresentationController

logger = structlog.get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter()


def _token(payload: Optional[AnalyzeRequest]) -> Optional[str]:
    return payload.token if payload else None


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request,
    controller: PresentationController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
):
    """Demo page, pre-rendered with the current view state."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "view": controller.view,
        },
    )


@router.get("/api/state", response_model=ViewState, summary="Current view state")
async def get_state(
    controller: PresentationController = Depends(get_controller),
) -> ViewState:
    return controller.view


@router.post("/api/review/random", response_model=ViewState, summary="Sample a random review")
async def select_random_review(
    controller: PresentationController = Depends(get_controller),
) -> ViewState:
    return controller.select_random_review()


@router.post(
    "/api/analyze/random",
    response_model=ViewState,
    summary="Sample a random review and classify it",
)
async def analyze_random_review(
    payload: Optional[AnalyzeRequest] = None,
    controller: PresentationController = Depends(get_controller),
) -> ViewState:
    return await controller.analyze_random_review(_token(payload))


@router.post(
    "/api/analyze/{kind}",
    response_model=ViewState,
    summary="Analyze the current review",
    description="""
    Analyze the review currently on screen.
    
    - classification: direct sentiment classification (label + confidence)
    - sentiment: prompted completion, sentiment keyword extraction
    - nouns: prompted completion, noun-density bucket
    """,
)
async def analyze_current_review(
    kind: AnalysisKind,
    payload: Optional[AnalyzeRequest] = None,
    controller: PresentationController = Depends(get_controller),
) -> ViewState:
    return await controller.analyze(kind, _token(payload))


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(
    controller: PresentationController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    session = controller.session
    return HealthResponse(
        status="ok" if session.corpus_loaded else "degraded",
        version=settings.APP_VERSION,
        corpus_loaded=session.corpus_loaded,
        corpus_size=len(session.corpus),
        load_error=session.load_error,
    )
