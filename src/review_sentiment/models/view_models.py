"""
Typed view-model the page renders from.

The presentation controller is the only writer; the HTML page and the JSON
API only read it.
"""

from typing import Optional

from pydantic import BaseModel, Field

from review_sentiment.models.enums import UIPhase


class ResultDisplay(BaseModel):
    """One rendered result region (sentiment or noun density)."""
    
    category: str = Field(..., description="POSITIVE / NEGATIVE / NEUTRAL or HIGH / MEDIUM / LOW")
    icon: str
    css_class: str
    text: str
    resolved: bool = True


class ViewState(BaseModel):
    """Everything the page needs to draw itself."""
    
    phase: UIPhase = UIPhase.IDLE
    current_review: Optional[str] = None
    buttons_disabled: bool = False
    spinner_visible: bool = False
    error_message: Optional[str] = None
    sentiment: Optional[ResultDisplay] = None
    noun_density: Optional[ResultDisplay] = None
    corpus_size: int = Field(default=0, ge=0)
