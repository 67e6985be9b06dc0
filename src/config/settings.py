"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DEV_ORIGINS = "http://localhost:3000,http://localhost:8000,http://127.0.0.1:3000,http://127.0.0.1:8000"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Password API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = ""

    # CORS
    cors_allow_origins: str = DEFAULT_DEV_ORIGINS
    cors_allow_credentials: bool = False

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    # AI provider (OpenAI-compatible chat completions)
    ai_api_url: str = "https://api.openai.com/v1/chat/completions"
    ai_api_key: str | None = None
    ai_model: str = "gpt-4o-mini"
    ai_temperature: float = 0.7
    ai_timeout_seconds: float = 30.0
    ai_max_generation_attempts: int = 5

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("ai_max_generation_attempts")
    @classmethod
    def validate_max_generation_attempts(cls, v: int) -> int:
        """Require at least one generation attempt."""
        if v < 1:
            raise ValueError(f"ai_max_generation_attempts must be at least 1, got {v}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_cors_origins(self) -> list[str]:
        """Parse the comma-separated CORS origins.

        Returns:
            List of origins with whitespace and trailing slashes stripped

        Raises:
            ValueError: If wildcard origins are combined with credentials.

        """
        origins = [o.strip().rstrip("/") for o in self.cors_allow_origins.split(",") if o.strip()]

        if self.cors_allow_credentials and "*" in origins:
            raise ValueError(
                "Cannot enable credentials with wildcard origins (*). Provide explicit allowed origins instead."
            )

        if "*" in origins and self.environment != "development":
            logger.warning(f"Wildcard CORS origin configured in {self.environment} environment")

        return origins


settings = Settings()
