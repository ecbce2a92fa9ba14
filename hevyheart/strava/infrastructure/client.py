from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

import httpx

from ...models.strava import (
    StravaActivity,
    StravaDetailedActivity,
    StravaHeartRateStream,
    StravaTokenResponse,
)
from ...settings import Settings
from ..application.ports import StravaAuthError, StravaClientPort

logger = logging.getLogger(__name__)

STRAVA_API_URL = "https://www.strava.com/api/v3"
STRAVA_AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
STRAVA_TOKEN_URL = "https://www.strava.com/oauth/token"


class StravaClient(StravaClientPort):
    """HTTP client for Strava holding the access token of one session."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings
        self._access_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self._access_token)

    def authorization_url(self) -> str:
        params = {
            "client_id": self._settings.strava_client_id,
            "response_type": "code",
            "redirect_uri": self._settings.strava_redirect_uri,
            "approval_prompt": "force",
            "scope": self._settings.strava_scope,
        }
        return f"{STRAVA_AUTHORIZE_URL}?{urlencode(params, quote_via=quote, safe='')}"

    async def exchange_code(self, code: str) -> StravaTokenResponse:
        payload = {
            "client_id": self._settings.strava_client_id,
            "client_secret": self._settings.strava_client_secret,
            "code": code,
            "grant_type": "authorization_code",
        }
        response = await self._http_client.post(STRAVA_TOKEN_URL, json=payload)
        if response.status_code != 200:
            raise StravaAuthError(
                f"Failed to exchange Strava authorization code ({response.status_code})"
            )

        data = response.json()
        if not data.get("access_token"):
            raise StravaAuthError("Strava token response missing access token")

        token = StravaTokenResponse.model_validate(data)
        self._access_token = token.access_token
        if token.athlete is not None:
            logger.info("Authenticated with Strava as athlete %s", token.athlete.id)
        return token

    async def list_activities(self, per_page: int = 30) -> List[StravaActivity]:
        payload = await self._get("/athlete/activities", params={"per_page": per_page})
        activities = [StravaActivity.model_validate(item) for item in payload]
        return [activity for activity in activities if activity.has_heartrate]

    async def get_activity(self, activity_id: int) -> StravaDetailedActivity:
        payload = await self._get(f"/activities/{activity_id}")
        return StravaDetailedActivity.model_validate(payload)

    async def get_heart_rate_stream(
        self, activity_id: int
    ) -> Optional[StravaHeartRateStream]:
        streams: Dict[str, Any] = await self._get(
            f"/activities/{activity_id}/streams",
            params={"keys": "heartrate", "key_by_type": "true"},
        )
        heartrate = streams.get("heartrate") if isinstance(streams, dict) else None
        if heartrate is None:
            logger.info("Strava activity %s has no heart-rate stream", activity_id)
            return None
        return StravaHeartRateStream.model_validate(heartrate)

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        if not self._access_token:
            raise StravaAuthError("Not authenticated with Strava")

        response = await self._http_client.get(
            f"{STRAVA_API_URL}{path}",
            headers={"Authorization": f"Bearer {self._access_token}"},
            params=params,
        )
        response.raise_for_status()
        return response.json()


def create_strava_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> StravaClientPort:
    """Create a Strava client bound to a shared HTTP client."""
    return StravaClient(http_client=http_client, settings=settings)
