"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blog Insights backend application.
"""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict

from app.errors.config import ConfigMissingError

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
ADMIN_SECRET_HEADER = "x-hasura-admin-secret"
PRIVACY_KEYWORD = "privacy"
ROOT_MESSAGE = "hello"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Insights API"

    # Remote content-graph endpoint
    URL: str | None = None
    SECRET_KEY: SecretStr | None = None
    BLOG_API_TIMEOUT: float | None = None  # seconds, None disables

    # Server
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 3000

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"

    # Search cache
    SEARCH_CACHE_MAX_ENTRIES: int | None = Field(default=None, ge=1)
    SEARCH_CACHE_TTL: int | None = Field(default=None, ge=1)  # seconds
    SEARCH_CACHE_COALESCE: bool = False

    def missing_required(self) -> list[str]:
        """Return the names of required settings that are unset or empty."""
        missing: list[str] = []
        if not self.URL:
            missing.append("URL")
        if self.SECRET_KEY is None or not self.SECRET_KEY.get_secret_value():
            missing.append("SECRET_KEY")
        return missing

    def validate_required(self) -> None:
        """Raise ConfigMissingError if the remote endpoint is not configured."""
        if missing := self.missing_required():
            raise ConfigMissingError(missing)


settings = Settings()
