from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PLACEHOLDERS = {
    "YOUR_STRAVA_CLIENT_ID",
    "YOUR_STRAVA_CLIENT_SECRET",
    "YOUR_HEVY_API_KEY",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables or ``.env``."""

    # Upper-case variables such as ``STRAVA_CLIENT_ID`` must match the
    # lower-case field names.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    strava_client_id: str
    strava_client_secret: str
    strava_redirect_uri: str = "http://localhost:8080/callback"
    strava_scope: str = "read,activity:read_all"

    hevy_api_key: str
    hevy_base_url: str = "https://api.hevyapp.com"
    hevy_auth_token: Optional[str] = None
    hevy_email_or_username: Optional[str] = None
    hevy_password: Optional[str] = None

    @field_validator("strava_client_id", "strava_client_secret", "hevy_api_key")
    @classmethod
    def _reject_placeholders(cls, value: str) -> str:
        if not value or value.strip() in _PLACEHOLDERS:
            raise ValueError("value is not configured")
        return value

    @property
    def has_hevy_credentials(self) -> bool:
        return bool(self.hevy_email_or_username and self.hevy_password)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
