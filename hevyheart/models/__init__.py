from .heart_rate import (
    HeartRateSeries,
    HeartRateSummary,
    ResampledSample,
    SynchronizedHeartRate,
    TimeWindow,
)
from .hevy import (
    Biometrics,
    HeartRateSample,
    HevyAccount,
    HevyDetailedExercise,
    HevyDetailedSet,
    HevyExercise,
    HevyLoginResponse,
    HevySet,
    HevyWorkout,
    HevyWorkoutDetails,
    HevyWorkoutsPage,
    HybridWorkout,
    PostExercise,
    PostSet,
    PostWorkout,
    PostWorkoutBody,
)
from .strava import (
    StravaActivity,
    StravaAthlete,
    StravaDetailedActivity,
    StravaHeartRateStream,
    StravaTokenResponse,
)

__all__ = [
    'TimeWindow',
    'HeartRateSeries',
    'ResampledSample',
    'SynchronizedHeartRate',
    'HeartRateSummary',
    'StravaActivity',
    'StravaDetailedActivity',
    'StravaHeartRateStream',
    'StravaAthlete',
    'StravaTokenResponse',
    'HevySet',
    'HevyExercise',
    'HevyWorkout',
    'HevyWorkoutsPage',
    'HevyDetailedSet',
    'HevyDetailedExercise',
    'HevyWorkoutDetails',
    'HybridWorkout',
    'HevyLoginResponse',
    'HevyAccount',
    'HeartRateSample',
    'Biometrics',
    'PostSet',
    'PostExercise',
    'PostWorkoutBody',
    'PostWorkout',
]
