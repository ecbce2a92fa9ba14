from .payload import build_exercise, build_post_workout, to_biometrics, workout_window

__all__ = ["build_exercise", "build_post_workout", "to_biometrics", "workout_window"]
