"""Configuration management using pydantic-settings.

Supports environment variables (prefixed with ``RSSWATCH_``) and .env file
loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """rsswatch configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RSSWATCH_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Polling
    default_ttl_minutes: int = Field(
        default=20,
        ge=1,
        description="Polling interval used when neither caller nor channel sets one",
    )

    # HTTP acquisition
    fetch_timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = "rsswatch/0.1"
    follow_redirects: bool = True


# Global singleton instance
settings = Settings()
