from __future__ import annotations

import pytest

from chronoline.domain.model import Duration, ExactDate, InvalidIntervalError
from chronoline.domain.ticks import first_interval_with_duration_at_least
from chronoline.domain.time_range import TimeRange

AD = ExactDate.after_epoch
BC = ExactDate.before_epoch


def test_range_rejects_start_after_end() -> None:
    with pytest.raises(InvalidIntervalError):
        TimeRange(AD(2000, 1, 1, 0), AD(1999, 1, 1, 0))


def test_duration_and_middle() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 1, 10))

    assert time_range.duration == Duration.of(hours=10)
    assert time_range.middle == AD(100, 1, 1, 5)


def test_middle_across_the_epoch() -> None:
    time_range = TimeRange(BC(1, 1, 1, 0), AD(2, 1, 1, 0))

    assert time_range.middle == AD(1, 1, 1, 0)


def test_move_keeps_length() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 1, 10))

    moved = time_range.move(Duration.of(days=-1))

    assert moved == TimeRange(AD(99, 12, 31, 0), AD(99, 12, 31, 10))
    assert moved.duration == time_range.duration


def test_with_start_and_with_end() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 1, 10))

    assert time_range.with_start(AD(99, 1, 1, 0)).start == AD(99, 1, 1, 0)
    assert time_range.with_end(AD(101, 1, 1, 0)).end == AD(101, 1, 1, 0)
    with pytest.raises(InvalidIntervalError):
        time_range.with_end(AD(99, 1, 1, 0))


def test_scaling_down_at_finest_granularity_does_nothing() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 1, 10))

    scaled = time_range.scale_down(Duration.of(hours=1))

    assert scaled == time_range
    assert scaled.middle == time_range.middle


def test_scaling_up_hours() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 1, 10))

    scaled = time_range.scale_up(Duration.of(hours=1))

    assert scaled.start == time_range.start - Duration.of(hours=55)
    assert scaled.end == time_range.end + Duration.of(hours=55)
    assert scaled.middle == time_range.middle


def test_scaling_up_twelve_hours() -> None:
    time_range = TimeRange(AD(100, 1, 1, 0), AD(100, 1, 2, 0))

    scaled = time_range.scale_up(Duration.of(hours=11))

    assert scaled.start == time_range.start - Duration.of(hours=12)
    assert scaled.end == time_range.end + Duration.of(hours=12)
    assert scaled.middle == time_range.middle


@pytest.mark.parametrize(
    "min_tick",
    [Duration.of(hours=1), Duration.of(hours=12), Duration.of(days=1), Duration.of(years=10)],
)
def test_scale_up_then_down_restores_range(min_tick: Duration) -> None:
    time_range = TimeRange(BC(50, 1, 1, 0), AD(50, 1, 1, 0))
    current = first_interval_with_duration_at_least(min_tick).duration

    scaled_up = time_range.scale_up(min_tick)
    coarser = min_tick * (scaled_up.duration / time_range.duration)
    restored = scaled_up.scale_down(coarser)

    assert coarser > current
    assert restored.duration == time_range.duration
    assert restored.middle == time_range.middle


def test_ticks_use_current_granularity() -> None:
    time_range = TimeRange(AD(100, 2, 3, 5), AD(100, 2, 5, 17))

    ticks = time_range.ticks(Duration.of(hours=20))

    assert time_range.tick_interval(Duration.of(hours=20)).duration == Duration.of(days=1)
    assert [tick.date for tick in ticks] == [AD(100, 2, 4, 0), AD(100, 2, 5, 0)]
