"""Client configuration.

`ClientOptions` is what a `SwapSDK` is built from. `Settings` lets the same
values come from environment variables (prefix `SWAPSDK_`) or a `.env` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://zos.computer/"
DEFAULT_TIMEOUT_MS = 10000


class ClientOptions(BaseModel):
    """Immutable connection options for one client instance."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Origin and path prefix of the API")
    timeout: float = Field(default=DEFAULT_TIMEOUT_MS, description="Per-request deadline in milliseconds")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )

    @property
    def timeout_seconds(self) -> Optional[float]:
        """Timeout for httpx. Zero or less means no timeout."""
        if self.timeout <= 0:
            return None
        return self.timeout / 1000

    def default_headers(self) -> dict[str, str]:
        """Headers for every request: JSON content type plus caller extras."""
        return {"Content-Type": "application/json", **self.headers}

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ClientOptions":
        return cls(base_url=settings.base_url, timeout=settings.timeout)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWAPSDK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Swap API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT_MS, description="Request timeout in milliseconds")
    auth_token: Optional[str] = Field(default=None, description="Token sent as x-auth-token")

    def get_safe_dict(self) -> dict:
        """Return settings dict with the token redacted."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "auth_token": "***" if self.auth_token else "(not set)",
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
