"""
Application configuration.

Loads settings from environment variables and .env file.
Every tunable lives here; modules import the shared ``settings`` instance.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        description: Long description shown in the API documentation.
        version: Current API version string.
        environment: Deployment environment name ("development" exposes docs).
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy connection string for the registry database.
            Required; the application refuses to start without it.
        cors_origins: Browser origins allowed to call the API.
        rate_limit_enabled: Toggle request rate limiting.
        rate_limit_default: Default rate limit for all endpoints.

    CORS_ORIGINS must be given as a JSON list in the environment,
    e.g. ``CORS_ORIGINS='["https://app.example.org"]'``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Beneficiaries API"
    description: str = "API for managing social program beneficiaries across countries"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"

    database_url: Optional[str] = None

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    @property
    def docs_enabled(self) -> bool:
        """Whether the interactive API documentation is exposed."""
        return self.debug or self.environment.lower() == DEVELOPMENT


settings = Settings()
