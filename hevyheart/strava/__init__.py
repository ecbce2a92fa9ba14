"""Strava integration package."""

from .application.ports import StravaAuthError, StravaClientPort
from .infrastructure.client import StravaClient, create_strava_client

__all__ = [
    "StravaAuthError",
    "StravaClient",
    "StravaClientPort",
    "create_strava_client",
]
