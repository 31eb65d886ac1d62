"""Configuration management for the application."""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Quiz Answer Search"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Search model (Kimi, OpenAI-compatible, web search enabled)
    KIMI_BASE_URL: Optional[str] = None
    KIMI_API_KEY: Optional[str] = None
    KIMI_REFRESH_TOKEN: Optional[str] = None
    KIMI_MODEL: str = "kimi-search"

    # Verification model (OpenAI-compatible, no search)
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gemini-2.0-flash-exp"

    # Retry policy for answer acquisition
    MAX_RETRIES: int = 2
    RETRY_DELAY_MS: int = 1000
    REQUEST_TIMEOUT: float = 120.0  # seconds per model call

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
