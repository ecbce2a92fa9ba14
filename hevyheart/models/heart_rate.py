from __future__ import annotations

from datetime import datetime, timedelta
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .time import to_epoch_ms


class TimeWindow(BaseModel):
    """Recording window of the target workout.

    ``end`` is expected to be on or after ``start``; an inverted window is
    accepted and treated as having no duration.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @property
    def duration_ms(self) -> int:
        # Each endpoint is truncated to whole epoch milliseconds first.
        return to_epoch_ms(self.end) - to_epoch_ms(self.start)

    @property
    def duration_seconds(self) -> int:
        return max(0, self.duration_ms // 1000)


class HeartRateSeries(BaseModel):
    """Heart-rate stream of the source activity, without per-sample times."""

    model_config = ConfigDict(frozen=True)

    samples: Tuple[float, ...] = ()

    @property
    def count(self) -> int:
        return len(self.samples)


class ResampledSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: timedelta = Field(..., description="Offset from the window start")
    value: float


class SynchronizedHeartRate(BaseModel):
    """Heart-rate samples aligned to a window plus the untouched calorie total."""

    model_config = ConfigDict(frozen=True)

    samples: Tuple[ResampledSample, ...] = ()
    total_calories: float = 0.0


class HeartRateSummary(BaseModel):
    minimum: float
    average: float
    maximum: float
