"""Client configuration using pydantic-settings.

Values are read from environment variables (or a local ``.env`` file) so the
same code can target the free lite tier or the keyed ``api.jup.ag`` tier.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LITE_API_URL = "https://lite-api.jup.ag"
PRO_API_URL = "https://api.jup.ag"


class Settings(BaseSettings):
    """Jupiter client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Jupiter API
    # ======================
    jupiter_api_url: str = Field(
        default=LITE_API_URL, description="Base URL of the Jupiter API (without /swap/v1)"
    )
    jupiter_api_key: Optional[str] = Field(
        default=None, description=f"API key sent as x-api-key (required on {PRO_API_URL})"
    )
    jupiter_timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds for each request"
    )

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.jupiter_api_key)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "jupiter_api_url": self.jupiter_api_url,
            "jupiter_api_key": "***" if self.has_api_key else "(not set)",
            "jupiter_timeout": self.jupiter_timeout,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
