"""
Configuration settings for the Review Sentiment Demo.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).

The Hugging Face bearer token is not a setting: it is typed by
the user into the page and travels with each analysis request only.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Review Sentiment Demo"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Corpus ===
    CORPUS_SOURCE: str = "data/reviews_test.tsv"  # Filesystem path or http(s) URL
    
    # === Hosted Inference Endpoints ===
    CLASSIFICATION_MODEL_URL: str = (
        "https://api-inference.huggingface.co/models/siebert/sentiment-roberta-large-english"
    )
    GENERATION_MODEL_URL: str = (
        "https://api-inference.huggingface.co/models/tiiuae/falcon-7b-instruct"
    )
    INFERENCE_TIMEOUT: float = 60.0  # seconds, transport-level only (no retries)
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
