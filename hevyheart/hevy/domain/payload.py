"""Build Hevy V2 upload payloads from hybrid workouts."""

from __future__ import annotations

import uuid
from typing import List, Optional

from ...domain.heart_rate import to_epoch_ms
from ...models.heart_rate import SynchronizedHeartRate, TimeWindow
from ...models.hevy import (
    Biometrics,
    HeartRateSample,
    HevyDetailedExercise,
    HevyExercise,
    HybridWorkout,
    PostExercise,
    PostSet,
    PostWorkout,
    PostWorkoutBody,
)


def workout_window(workout: HybridWorkout) -> TimeWindow:
    """Recording window of a workout, taken from its V1 start and end."""
    return TimeWindow(start=workout.v1.start_time, end=workout.v1.end_time)


def to_biometrics(result: SynchronizedHeartRate, window: TimeWindow) -> Biometrics:
    start_ms = to_epoch_ms(window.start)
    return Biometrics(
        heart_rate_samples=[
            HeartRateSample(
                bpm=sample.value,
                timestamp_ms=start_ms + int(sample.offset.total_seconds()) * 1000,
            )
            for sample in result.samples
        ],
        total_calories=result.total_calories,
    )


def build_exercise(v2: HevyDetailedExercise, v1: HevyExercise) -> PostExercise:
    """Merge both views of an exercise.

    V1 carries the set values; V2 carries rest timers and each set's
    ``completed_at``, matched by position.
    """

    sets: List[PostSet] = []
    for position, v1_set in enumerate(v1.sets):
        v2_set = v2.sets[position] if position < len(v2.sets) else None
        sets.append(
            PostSet(
                index=v1_set.index,
                type=v1_set.type,
                weight_kg=v1_set.weight_kg or 0.0,
                reps=v1_set.reps,
                distance_meters=v1_set.distance_meters or 0.0,
                duration_seconds=v1_set.duration_seconds,
                rpe=v1_set.rpe,
                completed_at=(v2_set.completed_at or "") if v2_set else "",
            )
        )

    return PostExercise(
        exercise_template_id=v1.exercise_template_id,
        title=v1.title,
        notes=v1.notes or "",
        rest_timer_seconds=v2.rest_seconds,
        volume_doubling_enabled=v2.volume_doubling_enabled,
        superset_id=int(v1.superset_id) if v1.superset_id else None,
        sets=sets,
    )


def build_post_workout(
    workout: HybridWorkout,
    biometrics: Biometrics,
    *,
    workout_id: Optional[str] = None,
) -> PostWorkout:
    """Create the V2 body that re-uploads ``workout`` with ``biometrics``.

    Exercises without a V2 counterpart (same template id and title) are
    dropped because their rest timers and completion times are unknown.
    """

    exercises: List[PostExercise] = []
    for exercise in workout.v1.exercises:
        match = next(
            (
                candidate
                for candidate in workout.v2.exercises
                if candidate.exercise_template_id == exercise.exercise_template_id
                and candidate.title == exercise.title
            ),
            None,
        )
        if match is not None:
            exercises.append(build_exercise(match, exercise))

    return PostWorkout(
        share_to_strava=False,
        workout=PostWorkoutBody(
            workout_id=workout_id or str(uuid.uuid4()),
            title=workout.v1.title,
            description=workout.v1.description or "",
            routine_id=workout.v1.routine_id,
            start_time=to_epoch_ms(workout.v1.start_time) // 1000,
            end_time=to_epoch_ms(workout.v1.end_time) // 1000,
            biometrics=biometrics,
            exercises=exercises,
        ),
    )


__all__ = [
    "build_exercise",
    "build_post_workout",
    "to_biometrics",
    "workout_window",
]
