from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.heart_rate import summarize_heart_rate, synchronize_heart_rate
from ..hevy.application.ports import HevyClientPort
from ..hevy.domain.payload import build_post_workout, to_biometrics, workout_window
from ..models.heart_rate import HeartRateSeries, HeartRateSummary, SynchronizedHeartRate
from ..models.hevy import HybridWorkout, PostWorkout
from ..models.strava import StravaDetailedActivity
from ..strava.application.ports import StravaClientPort

logger = logging.getLogger(__name__)


class HeartRateStreamMissingError(Exception):
    """Raised when the selected Strava activity has no heart-rate stream."""


@dataclass(frozen=True)
class HeartRateSyncPlan:
    """Everything needed to review and upload one synchronization."""

    activity: StravaDetailedActivity
    workout: HybridWorkout
    heart_rate: SynchronizedHeartRate
    summary: Optional[HeartRateSummary]
    payload: PostWorkout


@dataclass(frozen=True)
class UploadOutcome:
    uploaded: bool
    original_deleted: bool = False


@dataclass
class PrepareHeartRateSyncUseCase:
    """Fetch both sides and resample the activity's heart rate onto the workout."""

    strava: StravaClientPort
    hevy: HevyClientPort

    async def __call__(self, activity_id: int, workout_id: str) -> HeartRateSyncPlan:
        activity = await self.strava.get_activity(activity_id)
        stream = await self.strava.get_heart_rate_stream(activity_id)
        if stream is None:
            raise HeartRateStreamMissingError(
                f"Strava activity {activity_id} has no heart-rate stream"
            )

        workout = await self.hevy.get_hybrid_workout(workout_id)
        window = workout_window(workout)

        heart_rate = synchronize_heart_rate(
            HeartRateSeries(samples=tuple(stream.data)),
            window,
            total_calories=activity.calories,
        )
        logger.info(
            "Resampled %d Strava samples onto %d seconds of Hevy workout %s",
            len(stream.data),
            window.duration_seconds,
            workout_id,
        )

        payload = build_post_workout(workout, to_biometrics(heart_rate, window))
        return HeartRateSyncPlan(
            activity=activity,
            workout=workout,
            heart_rate=heart_rate,
            summary=summarize_heart_rate(heart_rate),
            payload=payload,
        )


@dataclass
class UploadHeartRateSyncUseCase:
    """Upload a plan as a new Hevy workout, optionally deleting the original.

    Hevy cannot attach biometrics to an existing workout, so the workout is
    re-created; the original is only deleted after the upload succeeded.
    """

    hevy: HevyClientPort

    async def __call__(
        self, plan: HeartRateSyncPlan, *, delete_original: bool = False
    ) -> UploadOutcome:
        uploaded = await self.hevy.create_workout(plan.payload)
        if not uploaded:
            return UploadOutcome(uploaded=False)

        if not delete_original:
            return UploadOutcome(uploaded=True)

        original_id = plan.workout.v1.id
        logger.info("Deleting original Hevy workout %s", original_id)
        await self.hevy.delete_workout(original_id)
        return UploadOutcome(uploaded=True, original_deleted=True)


__all__ = [
    "HeartRateStreamMissingError",
    "HeartRateSyncPlan",
    "PrepareHeartRateSyncUseCase",
    "UploadHeartRateSyncUseCase",
    "UploadOutcome",
]
