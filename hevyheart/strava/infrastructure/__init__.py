"""Infrastructure adapters for the Strava integration."""

from ..application.ports import StravaAuthError
from .client import StravaClient, create_strava_client

__all__ = ["StravaAuthError", "StravaClient", "create_strava_client"]
