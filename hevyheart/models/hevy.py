"""Hevy API payloads.

The V1 models mirror the public ``/v1/workouts`` API. The V2 models mirror
the endpoints used by the mobile app, which expose per-set completion times
and accept biometrics on upload.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class HevySet(BaseModel):
    index: int = 0
    type: str = ""
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[int] = None
    rpe: Optional[float] = None


class HevyExercise(BaseModel):
    index: int = 0
    title: str = ""
    notes: Optional[str] = None
    exercise_template_id: str = ""
    superset_id: Optional[str] = None
    sets: List[HevySet] = Field(default_factory=list)


class HevyWorkout(BaseModel):
    """Workout as returned by the V1 API."""

    id: str
    title: str = ""
    routine_id: Optional[str] = None
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    is_private: bool = False
    exercises: List[HevyExercise] = Field(default_factory=list)


class HevyWorkoutsPage(BaseModel):
    workouts: List[HevyWorkout] = Field(default_factory=list)
    page: int = 1
    page_count: int = 1


class HevyDetailedSet(BaseModel):
    id: str = ""
    index: int = 0
    indicator: str = ""
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[int] = None
    rpe: Optional[float] = None
    completed_at: Optional[str] = None


class HevyDetailedExercise(BaseModel):
    id: str = ""
    title: str = ""
    notes: Optional[str] = None
    exercise_template_id: str = ""
    superset_id: Optional[str] = None
    rest_seconds: int = 0
    volume_doubling_enabled: bool = False
    sets: List[HevyDetailedSet] = Field(default_factory=list)


class HevyWorkoutDetails(BaseModel):
    """Workout as returned by the V2 API; times are epoch seconds."""

    id: str
    name: str = ""
    description: Optional[str] = None
    routine_id: Optional[str] = None
    start_time: int = 0
    end_time: int = 0
    user_id: str = ""
    username: str = ""
    is_private: bool = False
    apple_watch: bool = False
    wearos_watch: bool = False
    is_biometrics_public: bool = False
    exercises: List[HevyDetailedExercise] = Field(default_factory=list)


class HybridWorkout(BaseModel):
    """The V1 and V2 views of the same Hevy workout."""

    v1: HevyWorkout
    v2: HevyWorkoutDetails


class HevyLoginResponse(BaseModel):
    auth_token: str = ""
    access_token: Optional[str] = None


class HevyAccount(BaseModel):
    id: str
    username: str = ""
    email: str = ""
    profile_pic: Optional[str] = None


class HeartRateSample(BaseModel):
    bpm: float
    timestamp_ms: int


class Biometrics(BaseModel):
    heart_rate_samples: List[HeartRateSample] = Field(default_factory=list)
    total_calories: float = 0.0


class PostSet(BaseModel):
    index: int
    type: str
    weight_kg: float = 0.0
    reps: Optional[int] = None
    distance_meters: float = 0.0
    duration_seconds: Optional[int] = None
    rpe: Optional[float] = None
    completed_at: str = ""


class PostExercise(BaseModel):
    exercise_template_id: str
    title: str
    notes: str = ""
    rest_timer_seconds: int = 0
    volume_doubling_enabled: bool = False
    superset_id: Optional[int] = None
    sets: List[PostSet] = Field(default_factory=list)


class PostWorkoutBody(BaseModel):
    workout_id: str
    title: str
    description: str = ""
    routine_id: Optional[str] = None
    start_time: int
    end_time: int
    apple_watch: bool = False
    wearos_watch: bool = True
    is_private: bool = False
    is_biometrics_public: bool = True
    biometrics: Biometrics
    exercises: List[PostExercise] = Field(default_factory=list)
    media: List[Any] = Field(default_factory=list)


class PostWorkout(BaseModel):
    share_to_strava: bool = False
    workout: PostWorkoutBody
