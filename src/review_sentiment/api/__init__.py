"""
FastAPI routes and endpoints.

- routes.py: demo page (GET /) and JSON API (/api/state, /api/review/random, /api/analyze/...)
- dependencies.py: settings and controller lookup from app.state
- models.py: API-specific request/response models
- middleware.py: request tracing
- error_handlers.py: exception handlers for structured error responses
"""

from review_sentiment.api import dependencies, error_handlers, models
from review_sentiment.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
