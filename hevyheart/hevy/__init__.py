"""Hevy integration modules."""

from .application import HevyAuthError, HevyClientPort
from .domain import build_post_workout, to_biometrics, workout_window
from .infrastructure import HevyClient, create_hevy_client

__all__ = [
    "HevyAuthError",
    "HevyClientPort",
    "HevyClient",
    "create_hevy_client",
    "build_post_workout",
    "to_biometrics",
    "workout_window",
]
