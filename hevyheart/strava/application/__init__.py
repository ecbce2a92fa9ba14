"""Application layer for Strava integration."""

from .ports import StravaAuthError, StravaClientPort

__all__ = ["StravaAuthError", "StravaClientPort"]
