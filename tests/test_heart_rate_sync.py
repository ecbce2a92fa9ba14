"""Resampling a heart-rate series onto a workout window."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Sequence

import pytest

from hevyheart.domain.heart_rate import (
    summarize_heart_rate,
    synchronize_heart_rate,
    to_epoch_ms,
)
from hevyheart.models import HeartRateSeries, TimeWindow

START = datetime(2025, 10, 8, 10, 0, tzinfo=timezone.utc)


def window(seconds: float) -> TimeWindow:
    return TimeWindow(start=START, end=START + timedelta(seconds=seconds))


def series(values: Sequence[float]) -> HeartRateSeries:
    return HeartRateSeries(samples=tuple(values))


def values_of(values: Sequence[float], seconds: float) -> List[float]:
    result = synchronize_heart_rate(series(values), window(seconds))
    return [sample.value for sample in result.samples]


def test_upsampling_repeats_each_sample_in_order() -> None:
    source = [60, 70, 80, 90, 100]
    result = values_of(source, 10)

    # floor(i / 10 * 5) for i = 0..9
    assert result == [60, 60, 70, 70, 80, 80, 90, 90, 100, 100]


def test_single_sample_fills_the_whole_window() -> None:
    result = synchronize_heart_rate(series([72]), window(3))

    assert [s.value for s in result.samples] == [72, 72, 72]
    assert [s.offset for s in result.samples] == [
        timedelta(seconds=0),
        timedelta(seconds=1),
        timedelta(seconds=2),
    ]


def test_downsampling_indices_are_monotonic_and_in_bounds() -> None:
    source = list(range(100))
    result = values_of(source, 7)

    assert len(result) == 7
    assert result == sorted(result)
    assert result[0] == 0
    # floor(6 / 7 * 100) == 85
    assert result[-1] == 85
    assert all(0 <= value <= 99 for value in result)


def test_upsampling_runs_are_contiguous() -> None:
    source = [101, 102, 103]
    result = values_of(source, 11)

    runs: List[float] = []
    for value in result:
        if not runs or runs[-1] != value:
            runs.append(value)
    assert runs == source


@pytest.mark.parametrize("count", [1, 3, 10, 59, 60, 61, 500])
def test_output_length_matches_whole_seconds(count: int) -> None:
    result = synchronize_heart_rate(series([120.0] * count), window(60))

    assert len(result.samples) == 60


def test_sub_second_remainder_is_truncated() -> None:
    result = synchronize_heart_rate(series([80, 90]), window(4.999))

    assert len(result.samples) == 4


def test_empty_series_yields_no_samples() -> None:
    result = synchronize_heart_rate(series([]), window(600), total_calories=250)

    assert result.samples == ()
    assert result.total_calories == 250


def test_zero_length_window_yields_no_samples() -> None:
    result = synchronize_heart_rate(series([60, 70]), window(0))

    assert result.samples == ()


def test_inverted_window_is_treated_as_empty() -> None:
    inverted = TimeWindow(start=START, end=START - timedelta(minutes=5))

    result = synchronize_heart_rate(series([60, 70]), inverted, total_calories=10)

    assert inverted.duration_seconds == 0
    assert result.samples == ()
    assert result.total_calories == 10


def test_window_mixing_naive_and_aware_endpoints() -> None:
    mixed = TimeWindow(start=START.replace(tzinfo=None), end=START + timedelta(seconds=10))

    result = synchronize_heart_rate(series([60, 70, 80, 90, 100]), mixed)

    assert mixed.duration_seconds == 10
    assert len(result.samples) == 10


def test_window_duration_truncates_each_endpoint_to_milliseconds() -> None:
    truncated = TimeWindow(
        start=START + timedelta(microseconds=900),
        end=START + timedelta(seconds=1, microseconds=100),
    )

    result = synchronize_heart_rate(series([72]), truncated)

    assert truncated.duration_ms == 1000
    assert truncated.duration_seconds == 1
    assert [sample.value for sample in result.samples] == [72]


@pytest.mark.parametrize(
    "calories, expected",
    [(312.5, 312.5), (None, 0.0), (0, 0.0)],
)
def test_calories_pass_through(calories, expected) -> None:
    result = synchronize_heart_rate(series([60, 70]), window(5), total_calories=calories)

    assert result.total_calories == expected


def test_identical_inputs_give_identical_results() -> None:
    first = synchronize_heart_rate(series([60, 75, 90, 88]), window(13), 100)
    second = synchronize_heart_rate(series([60, 75, 90, 88]), window(13), 100)

    assert first == second


def test_summary_of_synchronized_samples() -> None:
    result = synchronize_heart_rate(series([60, 90, 120]), window(3))

    summary = summarize_heart_rate(result)

    assert summary is not None
    assert summary.minimum == 60
    assert summary.average == pytest.approx(90)
    assert summary.maximum == 120


def test_summary_of_empty_result_is_none() -> None:
    assert summarize_heart_rate(synchronize_heart_rate(series([]), window(3))) is None


def test_epoch_ms_treats_naive_datetimes_as_utc() -> None:
    aware = datetime(2025, 10, 8, 10, 0, 0, 123000, tzinfo=timezone.utc)

    assert to_epoch_ms(aware) == 1_759_917_600_123
    assert to_epoch_ms(aware.replace(tzinfo=None)) == 1_759_917_600_123
