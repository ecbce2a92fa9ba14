"""Ports for the Strava application layer."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ...models.strava import (
    StravaActivity,
    StravaDetailedActivity,
    StravaHeartRateStream,
    StravaTokenResponse,
)


class StravaAuthError(RuntimeError):
    """Raised when Strava authentication fails or has not happened yet."""


@runtime_checkable
class StravaClientPort(Protocol):
    """Port that exposes the Strava client behaviour used by the application."""

    def authorization_url(self) -> str:
        """Return the URL the user opens to grant access."""

    async def exchange_code(self, code: str) -> StravaTokenResponse:
        """Trade an authorization code for an access token."""

    async def list_activities(self, per_page: int = 30) -> List[StravaActivity]:
        """Return recent activities that recorded heart rate."""

    async def get_activity(self, activity_id: int) -> StravaDetailedActivity:
        """Return the detail payload for a Strava activity."""

    async def get_heart_rate_stream(
        self, activity_id: int
    ) -> Optional[StravaHeartRateStream]:
        """Return the heart-rate stream for an activity, if it has one."""


__all__ = ["StravaAuthError", "StravaClientPort"]
