from enum import StrEnum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment. Anything other than production counts as development."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    In production, set APP_ENV=production directly (Docker, k8s, etc.).

    The instance is frozen: it is built once in create_app() and handed to the
    error dispatcher, the logging policy and the response formatter.
    """

    # Controls error verbosity: production hides raw messages and tracebacks
    app_env: Environment = Environment.DEVELOPMENT

    log_level: str = "INFO"

    # Reported by GET /
    service_name: str = "Loan Application API"
    api_version: str = "v1"

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        frozen=True,
    )

    @field_validator("app_env", mode="before")
    @classmethod
    def _normalize_env(cls, value: object) -> Environment:
        if isinstance(value, str) and value.strip().lower() == Environment.PRODUCTION:
            return Environment.PRODUCTION
        return Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.app_env is Environment.PRODUCTION
