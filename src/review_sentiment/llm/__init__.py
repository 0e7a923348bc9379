"""
Hosted inference client and request shaping.

Components:
- HuggingFaceInferenceClient: async POST to a hosted model with optional bearer token
- PromptBuilder: picks endpoint and renders instruction templates (Jinja2)
"""

from review_sentiment.llm.hf_client import HuggingFaceInferenceClient, build_headers
from review_sentiment.llm.prompt_builder import PromptBuilder

__all__ = [
    "HuggingFaceInferenceClient",
    "PromptBuilder",
    "build_headers",
]
