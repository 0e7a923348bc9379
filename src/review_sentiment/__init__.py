"""
Review Sentiment Demo.

Samples a review from a tab-separated corpus and analyzes it with the
Hugging Face hosted Inference API:
- Direct sentiment classification (structured label/score output)
- Prompted sentiment classification (free-form generated text)
- Prompted noun-density estimate (High / Medium / Low)

Architecture: FastAPI page + JSON API, httpx inference client, typed view state
"""

__version__ = "0.1.0"
