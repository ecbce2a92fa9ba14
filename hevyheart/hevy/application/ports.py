"""Ports for interacting with Hevy."""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ...models.hevy import (
    HevyAccount,
    HevyWorkout,
    HevyWorkoutDetails,
    HybridWorkout,
    PostWorkout,
)


class HevyAuthError(RuntimeError):
    """Raised when Hevy login fails or a V2 call has no auth token."""


@runtime_checkable
class HevyClientPort(Protocol):
    """Hevy operations used by the application layer."""

    @property
    def is_authenticated(self) -> bool:
        """Whether a V2 auth token is available."""

    async def login(self, email_or_username: str, password: str) -> HevyAccount:
        """Log in with account credentials and remember the auth token."""

    async def list_workouts(self, page: int = 1, page_size: int = 10) -> List[HevyWorkout]:
        """Return one page of recent workouts."""

    async def get_workout(self, workout_id: str) -> HevyWorkout:
        """Return the V1 view of a workout."""

    async def get_workout_details(self, workout_id: str) -> HevyWorkoutDetails:
        """Return the V2 view of a workout."""

    async def get_hybrid_workout(self, workout_id: str) -> HybridWorkout:
        """Return both views of a workout."""

    async def create_workout(self, payload: PostWorkout) -> bool:
        """Upload a new workout; ``True`` when Hevy accepted it."""

    async def delete_workout(self, workout_id: str) -> HevyWorkoutDetails:
        """Delete a workout and return what was deleted."""


__all__ = ["HevyAuthError", "HevyClientPort"]
