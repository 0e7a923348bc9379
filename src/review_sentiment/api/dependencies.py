"""
FastAPI dependency injection for the review sentiment demo.

The controller (with the session and inference client it owns) and the
settings live on ``app.state``; they are created by the application factory.
"""

from fastapi import Request

from review_sentiment.config import Settings
from review_sentiment.presentation.controller import PresentationController


def get_settings(request: Request) -> Settings:
    """
    Get the settings the running app was built with.
    
    Args:
        request: Incoming request (carries the app)
    
    Returns:
        Settings instance
    """
    return request.app.state.settings


def get_controller(request: Request) -> PresentationController:
    """
    Get the controller for the single demo session.
    
    Args:
        request: Incoming request (carries the app)
    
    Returns:
        PresentationController stored on app.state at startup
    """
    return request.app.state.controller
