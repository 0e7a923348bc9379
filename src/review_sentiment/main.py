"""
FastAPI application entry point for the Review Sentiment Demo.
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from review_sentiment.api.error_handlers import EXCEPTION_HANDLERS
from review_sentiment.api.middleware import RequestTracingMiddleware
from review_sentiment.api.routes import router
from review_sentiment.config import Settings, settings as default_settings
from review_sentiment.llm.hf_client import HuggingFaceInferenceClient
from review_sentiment.llm.prompt_builder import PromptBuilder
from review_sentiment.logging_config import configure_logging
from review_sentiment.presentation.controller import PresentationController
from review_sentiment.presentation.session import ReviewSession

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    inference_transport: Optional[httpx.AsyncBaseTransport] = None,
    corpus_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the demo application.

    Args:
        settings: Settings to use (defaults to the environment-loaded instance)
        inference_transport: httpx transport for the inference client (tests mock it)
        corpus_client: httpx client used when CORPUS_SOURCE is a URL

    Returns:
        Configured FastAPI app; the corpus is loaded in the lifespan startup
    """
    settings = settings or default_settings

    client = HuggingFaceInferenceClient(
        timeout=settings.INFERENCE_TIMEOUT,
        transport=inference_transport,
    )
    controller = PresentationController(
        session=ReviewSession(),
        client=client,
        prompt_builder=PromptBuilder(
            classification_model_url=settings.CLASSIFICATION_MODEL_URL,
            generation_model_url=settings.GENERATION_MODEL_URL,
        ),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Application startup",
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            corpus_source=settings.CORPUS_SOURCE,
        )
        await controller.load_corpus(
            settings.CORPUS_SOURCE,
            http_client=corpus_client,
            timeout=settings.INFERENCE_TIMEOUT,
        )
        logger.info("Application startup complete", corpus_size=len(controller.session.corpus))

        yield

        logger.info("Application shutdown")
        await client.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Sample a review and classify it with hosted Hugging Face models",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.controller = controller

    # Request tracing middleware (must be first for request_id in all logs)
    app.add_middleware(RequestTracingMiddleware)

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    app.include_router(router)

    if settings.PROMETHEUS_ENABLED:
        Instrumentator().instrument(app).expose(app, include_in_schema=False)

    return app


configure_logging(default_settings.LOG_LEVEL, default_settings.ENVIRONMENT)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "review_sentiment.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.DEBUG,
    )
