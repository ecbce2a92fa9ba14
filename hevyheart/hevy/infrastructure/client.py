"""HTTP-backed implementation of the Hevy port."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import httpx

from ...models.hevy import (
    HevyAccount,
    HevyLoginResponse,
    HevyWorkout,
    HevyWorkoutDetails,
    HevyWorkoutsPage,
    HybridWorkout,
    PostWorkout,
)
from ...settings import Settings
from ..application.ports import HevyAuthError, HevyClientPort

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 10

# Keys and version headers sent by the Hevy mobile app.
LOGIN_APP_KEY = "with_great_power"
V2_APP_KEY = "klean_kanteen_insulated"
V2_APP_HEADERS: Dict[str, str] = {
    "Hevy-App-Version": "2.5.6",
    "Hevy-App-Build": "1819922",
    "Hevy-Platform": "android 36",
}


class HevyClient(HevyClientPort):
    """Talk to the public V1 API and the app's V2 endpoints."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings
        self._base_url = settings.hevy_base_url.rstrip("/")
        self._auth_token: Optional[str] = settings.hevy_auth_token or None
        self._account: Optional[HevyAccount] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self._auth_token)

    @property
    def account(self) -> Optional[HevyAccount]:
        return self._account

    async def login(self, email_or_username: str, password: str) -> HevyAccount:
        response = await self._http_client.post(
            f"{self._base_url}/login",
            headers={**self._headers(), "x-api-key": LOGIN_APP_KEY},
            json={"emailOrUsername": email_or_username, "password": password},
        )
        if response.status_code != 200:
            raise HevyAuthError(f"Hevy login failed ({response.status_code})")

        login = HevyLoginResponse.model_validate(response.json())
        if not login.auth_token:
            raise HevyAuthError("Hevy login response missing auth token")

        response = await self._http_client.get(
            f"{self._base_url}/account",
            headers={**self._headers(), "auth-token": login.auth_token},
        )
        if response.status_code != 200:
            raise HevyAuthError(
                f"Failed to fetch Hevy account ({response.status_code})"
            )

        self._auth_token = login.auth_token
        self._account = HevyAccount.model_validate(response.json())
        logger.info(
            "Authenticated with Hevy as %s (user id %s)",
            self._account.username,
            self._account.id,
        )
        return self._account

    async def list_workouts(self, page: int = 1, page_size: int = 10) -> List[HevyWorkout]:
        if page_size > MAX_PAGE_SIZE:
            raise ValueError(
                f"page_size cannot exceed {MAX_PAGE_SIZE} due to Hevy API limitations"
            )

        response = await self._http_client.get(
            f"{self._base_url}/v1/workouts",
            headers=self._headers(),
            params={"page": page, "pageSize": page_size},
        )
        response.raise_for_status()
        return HevyWorkoutsPage.model_validate(response.json()).workouts

    async def get_workout(self, workout_id: str) -> HevyWorkout:
        response = await self._http_client.get(
            f"{self._base_url}/v1/workouts/{workout_id}", headers=self._headers()
        )
        response.raise_for_status()
        return HevyWorkout.model_validate(response.json())

    async def get_workout_details(self, workout_id: str) -> HevyWorkoutDetails:
        response = await self._http_client.get(
            f"{self._base_url}/workout/{workout_id}", headers=self._v2_headers()
        )
        response.raise_for_status()
        return HevyWorkoutDetails.model_validate(response.json())

    async def get_hybrid_workout(self, workout_id: str) -> HybridWorkout:
        v1 = await self.get_workout(workout_id)
        v2 = await self.get_workout_details(workout_id)
        return HybridWorkout(v1=v1, v2=v2)

    async def create_workout(self, payload: PostWorkout) -> bool:
        response = await self._http_client.post(
            f"{self._base_url}/v2/workout",
            headers=self._v2_headers(),
            json=payload.model_dump(mode="json"),
        )
        if response.is_success:
            return True

        logger.error(
            "Hevy rejected workout upload (%s): %s",
            response.status_code,
            response.text,
        )
        return False

    async def delete_workout(self, workout_id: str) -> HevyWorkoutDetails:
        response = await self._http_client.delete(
            f"{self._base_url}/workout/{workout_id}", headers=self._v2_headers()
        )
        response.raise_for_status()
        return HevyWorkoutDetails.model_validate(response.json())

    def _headers(self) -> Dict[str, str]:
        return {
            "api-key": self._settings.hevy_api_key,
            "Accept": "application/json",
        }

    def _v2_headers(self) -> Dict[str, str]:
        if not self._auth_token:
            raise HevyAuthError(
                "Not authenticated with the Hevy V2 API; log in or configure "
                "HEVY_AUTH_TOKEN"
            )
        return {
            **self._headers(),
            **V2_APP_HEADERS,
            "X-Api-Key": V2_APP_KEY,
            "Auth-Token": self._auth_token,
        }


def create_hevy_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> HevyClientPort:
    """Create a Hevy client bound to a shared HTTP client."""
    return HevyClient(http_client=http_client, settings=settings)
