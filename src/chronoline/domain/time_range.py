"""Visible window of the time axis."""

from __future__ import annotations

from dataclasses import dataclass

from chronoline.domain.model import Duration, ExactDate, InvalidIntervalError
from chronoline.domain.ticks import (
    ONE_HOUR,
    Tick,
    TickInterval,
    first_interval_with_duration_at_least,
    last_interval_with_duration_at_most,
)


@dataclass(frozen=True, slots=True)
class TimeRange:
    """Closed range between two exact dates. Every operation returns a new range."""

    start: ExactDate
    end: ExactDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidIntervalError(
                f"Range start {self.start} should not be greater than end {self.end}"
            )

    @property
    def duration(self) -> Duration:
        return self.end - self.start

    @property
    def middle(self) -> ExactDate:
        return self.start + self.duration / 2

    def move(self, duration: Duration) -> TimeRange:
        return TimeRange(self.start + duration, self.end + duration)

    def with_start(self, start: ExactDate) -> TimeRange:
        return TimeRange(start, self.end)

    def with_end(self, end: ExactDate) -> TimeRange:
        return TimeRange(self.start, end)

    def scale_up(self, min_tick_duration: Duration) -> TimeRange:
        """Zoom out by one tick granularity around the middle."""

        current = first_interval_with_duration_at_least(min_tick_duration)
        coarser = first_interval_with_duration_at_least(current.duration + ONE_HOUR)
        return self._rescale(coarser.duration / current.duration)

    def scale_down(self, min_tick_duration: Duration) -> TimeRange:
        """Zoom in by one tick granularity around the middle.

        Nothing changes when the finest granularity is already in use.
        """

        current = first_interval_with_duration_at_least(min_tick_duration)
        finer = last_interval_with_duration_at_most(current.duration - ONE_HOUR)
        return self._rescale(finer.duration / current.duration)

    def tick_interval(self, min_tick_duration: Duration) -> TickInterval:
        return first_interval_with_duration_at_least(min_tick_duration)

    def ticks(self, min_tick_duration: Duration) -> list[Tick]:
        """Ticks of the finest granularity not closer than ``min_tick_duration``."""

        return self.tick_interval(min_tick_duration).ticks_between(self.start, self.end)

    def _rescale(self, ratio: float) -> TimeRange:
        middle = self.middle
        half = self.duration * ratio / 2
        return TimeRange(middle - half, middle + half)
