from .auth import authenticate_hevy, authorize_strava
from .sync import (
    HeartRateStreamMissingError,
    HeartRateSyncPlan,
    PrepareHeartRateSyncUseCase,
    UploadHeartRateSyncUseCase,
    UploadOutcome,
)

__all__ = [
    "authenticate_hevy",
    "authorize_strava",
    "HeartRateStreamMissingError",
    "HeartRateSyncPlan",
    "PrepareHeartRateSyncUseCase",
    "UploadHeartRateSyncUseCase",
    "UploadOutcome",
]
