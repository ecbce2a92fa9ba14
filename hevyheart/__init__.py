"""Copy Strava heart-rate streams onto Hevy workouts."""

__version__ = "1.0.0"
