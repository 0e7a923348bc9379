"""
Prompt builder for hosted inference requests.

Responsible for:
- Loading and rendering the Jinja2 instruction templates shipped with the package
- Choosing the endpoint and ``inputs`` payload for each analysis kind
"""

from typing import Optional

import structlog
from jinja2 import Environment, PackageLoader

from review_sentiment.models.enums import AnalysisKind


logger = structlog.get_logger(__name__)

TEMPLATE_NAMES = {
    AnalysisKind.SENTIMENT: "sentiment_prompt.txt",
    AnalysisKind.NOUNS: "noun_count_prompt.txt",
}


class PromptBuilder:
    """
    Build ``inputs`` strings for the inference client.
    
    Direct classification sends the raw review text to the classification
    model; prompted kinds prefix an instruction and go to the generation model.
    """
    
    def __init__(
        self,
        classification_model_url: str,
        generation_model_url: str,
        jinja_env: Optional[Environment] = None,
    ):
        """
        Initialize prompt builder.
        
        Args:
            classification_model_url: Endpoint returning label/score pairs
            generation_model_url: Endpoint returning free-form generated text
            jinja_env: Override template environment (defaults to package templates)
        """
        self.classification_model_url = classification_model_url
        self.generation_model_url = generation_model_url
        self.jinja_env = jinja_env or Environment(
            loader=PackageLoader("review_sentiment", "llm/prompts"),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )
        
        try:
            self.templates = {
                kind: self.jinja_env.get_template(name)
                for kind, name in TEMPLATE_NAMES.items()
            }
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise
        
        logger.info("PromptBuilder initialized", templates=list(TEMPLATE_NAMES.values()))
    
    def build_inputs(self, kind: AnalysisKind, review_text: str) -> str:
        """
        Build the ``inputs`` value for one request.
        
        Args:
            kind: Analysis kind
            review_text: Current review text
            
        Returns:
            Raw text for CLASSIFICATION, rendered instruction otherwise
        """
        if kind == AnalysisKind.CLASSIFICATION:
            return review_text
        return self.templates[kind].render(review_text=review_text).strip()
    
    def model_url_for(self, kind: AnalysisKind) -> str:
        """Endpoint URL for an analysis kind."""
        if kind == AnalysisKind.CLASSIFICATION:
            return self.classification_model_url
        return self.generation_model_url
