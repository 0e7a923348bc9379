"""
API-specific request and response models for FastAPI endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Body of the analysis endpoints."""
    
    token: Optional[str] = Field(
        default=None,
        description="Optional Hugging Face bearer token; never stored or logged",
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(description="ok, or degraded when the corpus failed to load")
    version: str
    corpus_loaded: bool
    corpus_size: int = Field(ge=0)
    load_error: Optional[str] = None
