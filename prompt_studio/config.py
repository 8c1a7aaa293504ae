"""Configuration settings for prompt-studio."""
import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Prompt studio service configuration."""

    # Service Configuration
    SERVICE_NAME: str = "prompt-studio"
    SERVICE_VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ]

    # Storage
    SEED_DEFAULTS: bool = True  # Load the reference categories/templates/prompts at startup

    # Combination client (used when the composer runs outside this process)
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGGING_HOST: Optional[str] = None  # Central log collector; console only when unset
    LOGGING_PORT: int = 9999

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
