"""Configuration management for the Mollie API client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Structured logging settings."""

    level: str = Field(default="INFO", description="Logging level")
    json_output: bool = Field(default=True, description="Render logs as JSON")


class MollieSettings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Credentials (exactly one of these is required to build a client)
    api_key: str | None = Field(
        default=None,
        description="Mollie API key (test_... or live_...)"
    )
    access_token: str | None = Field(
        default=None,
        description="OAuth access token (access_...)"
    )

    # Transport
    api_endpoint: str = Field(
        default="https://api.mollie.com/v2/",
        description="Mollie API base URL"
    )
    timeout_seconds: float = Field(default=30.0, description="Request timeout")
    version_strings: list[str] = Field(
        default_factory=list,
        description="Extra product tokens appended to the User-Agent (e.g. 'Shop/1.2')"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="MOLLIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


# Global settings instance
settings = MollieSettings()
