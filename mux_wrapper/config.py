"""
Library configuration using Pydantic Settings.
"""

from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Mux settings loaded from environment variables."""

    # Credentials (Settings > Access Tokens in the Mux dashboard)
    MUX_ACCESS_TOKEN_ID: str = ""
    MUX_ACCESS_TOKEN_SECRET: str = ""

    # Transport
    MUX_BASE_URL: str = "https://api.mux.com"
    MUX_TIMEOUT_SECONDS: float = 30.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()


def require_credentials() -> Tuple[str, str]:
    """Return configured Mux token id and secret or raise a configuration error."""
    token_id = (settings.MUX_ACCESS_TOKEN_ID or "").strip()
    token_secret = (settings.MUX_ACCESS_TOKEN_SECRET or "").strip()
    if not token_id or not token_secret:
        raise ConfigurationError("MUX_ACCESS_TOKEN_ID and MUX_ACCESS_TOKEN_SECRET must be configured")
    return token_id, token_secret
