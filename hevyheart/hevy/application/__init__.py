"""Application layer helpers for Hevy integration."""

from .ports import HevyAuthError, HevyClientPort

__all__ = ["HevyAuthError", "HevyClientPort"]
