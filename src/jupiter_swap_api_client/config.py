"""Client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

JUPITER_API_V6 = "https://quote-api.jup.ag/v6"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jupiter_api_url: str = Field(default=JUPITER_API_V6, description="Jupiter swap API base URL")
    jupiter_request_timeout: float = Field(
        default=30.0, gt=0, description="Per-request timeout in seconds"
    )
    jupiter_http2: bool = Field(default=True, description="Negotiate HTTP/2 with the API")
    debug: bool = Field(default=False, description="Enable debug logging in scripts")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
