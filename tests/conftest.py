"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hevyheart.hevy.application.ports import HevyClientPort
from hevyheart.models.hevy import (
    HevyAccount,
    HevyWorkout,
    HevyWorkoutDetails,
    HybridWorkout,
    PostWorkout,
)
from hevyheart.models.strava import (
    StravaActivity,
    StravaDetailedActivity,
    StravaHeartRateStream,
    StravaTokenResponse,
)
from hevyheart.settings import Settings
from hevyheart.strava.application.ports import StravaClientPort


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "strava_client_id": "strava-client",
        "strava_client_secret": "strava-secret",
        "strava_redirect_uri": "http://localhost:8080/callback",
        "strava_scope": "read,activity:read_all",
        "hevy_api_key": "hevy-key",
        "hevy_base_url": "https://hevy.example.com",
        "hevy_auth_token": None,
        "hevy_email_or_username": None,
        "hevy_password": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


class StravaFake(StravaClientPort):
    """In-memory Strava double that records interactions."""

    def __init__(
        self,
        *,
        activity: Optional[StravaDetailedActivity] = None,
        stream: Optional[StravaHeartRateStream] = None,
        activities: Optional[List[StravaActivity]] = None,
    ) -> None:
        self.activity = activity
        self.stream = stream
        self.activities = activities or []
        self.exchanged_codes: List[str] = []
        self.exchange_error: Optional[Exception] = None

    def authorization_url(self) -> str:
        return "https://www.strava.com/oauth/authorize?client_id=strava-client"

    async def exchange_code(self, code: str) -> StravaTokenResponse:
        self.exchanged_codes.append(code)
        if self.exchange_error is not None:
            raise self.exchange_error
        return StravaTokenResponse(access_token="strava-access")

    async def list_activities(self, per_page: int = 30) -> List[StravaActivity]:
        return self.activities

    async def get_activity(self, activity_id: int) -> StravaDetailedActivity:
        assert self.activity is not None
        return self.activity

    async def get_heart_rate_stream(
        self, activity_id: int
    ) -> Optional[StravaHeartRateStream]:
        return self.stream


class HevyFake(HevyClientPort):
    """In-memory Hevy double that records uploads and deletions."""

    def __init__(
        self,
        *,
        workout: Optional[HybridWorkout] = None,
        authenticated: bool = False,
        accept_upload: bool = True,
    ) -> None:
        self.workout = workout
        self.authenticated = authenticated
        self.accept_upload = accept_upload
        self.logins: List[tuple[str, str]] = []
        self.uploaded: List[PostWorkout] = []
        self.deleted: List[str] = []

    @property
    def is_authenticated(self) -> bool:
        return self.authenticated

    async def login(self, email_or_username: str, password: str) -> HevyAccount:
        self.logins.append((email_or_username, password))
        self.authenticated = True
        return HevyAccount(id="user-1", username=email_or_username)

    async def list_workouts(self, page: int = 1, page_size: int = 10) -> List[HevyWorkout]:
        return [self.workout.v1] if self.workout else []

    async def get_workout(self, workout_id: str) -> HevyWorkout:
        assert self.workout is not None
        return self.workout.v1

    async def get_workout_details(self, workout_id: str) -> HevyWorkoutDetails:
        assert self.workout is not None
        return self.workout.v2

    async def get_hybrid_workout(self, workout_id: str) -> HybridWorkout:
        assert self.workout is not None
        return self.workout

    async def create_workout(self, payload: PostWorkout) -> bool:
        self.uploaded.append(payload)
        return self.accept_upload

    async def delete_workout(self, workout_id: str) -> HevyWorkoutDetails:
        assert self.workout is not None
        self.deleted.append(workout_id)
        return self.workout.v2
