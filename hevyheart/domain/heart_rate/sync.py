"""Heart-rate resampling onto a target workout window."""

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional

from ...models.heart_rate import (
    HeartRateSeries,
    HeartRateSummary,
    ResampledSample,
    SynchronizedHeartRate,
    TimeWindow,
)
from ...models.time import to_epoch_ms


def synchronize_heart_rate(
    series: HeartRateSeries,
    window: TimeWindow,
    total_calories: Optional[float] = None,
) -> SynchronizedHeartRate:
    """Produce one sample per whole second of ``window`` from ``series``.

    Each output second ``i`` takes the source sample at
    ``floor(i / duration * count)``, clamped to the last sample, so the same
    formula stretches a short series and compresses a long one. An empty
    series or a window shorter than one second yields no samples. The calorie
    total is passed through unchanged, defaulting to 0.
    """

    duration = window.duration_seconds
    count = series.count

    samples: List[ResampledSample] = []
    if count > 0:
        for i in range(duration):
            index = min(int(i / duration * count), count - 1)
            samples.append(
                ResampledSample(
                    offset=timedelta(seconds=i), value=series.samples[index]
                )
            )

    return SynchronizedHeartRate(
        samples=tuple(samples),
        total_calories=total_calories or 0.0,
    )


def summarize_heart_rate(
    result: SynchronizedHeartRate,
) -> Optional[HeartRateSummary]:
    """Min/average/max of the synchronized samples, or ``None`` when empty."""
    if not result.samples:
        return None

    values = [sample.value for sample in result.samples]
    return HeartRateSummary(
        minimum=min(values),
        average=sum(values) / len(values),
        maximum=max(values),
    )
