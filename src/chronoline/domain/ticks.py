"""Axis ticks and the catalogue of tick intervals.

The catalogue is an endless ascending sequence of granularities: one hour,
twelve hours, one day, one month, six months and then 1, 10, 100, ... years.
Each granularity knows how to snap a date to its first boundary at or after
that date, how to step to the next boundary and how to label a boundary.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from itertools import count
from typing import Final

from chronoline.domain.model import (
    Duration,
    ExactDate,
    InvalidIntervalError,
    MissingRequiredValueError,
    TickCatalogueError,
    month_name,
)

type TickDateProvider = Callable[[ExactDate], ExactDate]
type TickLabelProvider = Callable[[ExactDate], str]

ONE_HOUR: Final[Duration] = Duration.of(hours=1)
ONE_YEAR: Final[Duration] = Duration.of(years=1)
EPOCH_START: Final[ExactDate] = ExactDate.after_epoch(1, 1, 1, 0)


@dataclass(frozen=True, slots=True)
class Tick:
    """A labelled boundary date on the time axis."""

    date: ExactDate
    label: str

    def __post_init__(self) -> None:
        if not self.label or not self.label.strip():
            raise MissingRequiredValueError("Tick label can't be blank")

    def __str__(self) -> str:
        return self.label


class TickInterval:
    """Distance between two neighbouring ticks."""

    def __init__(
        self,
        duration: Duration,
        first_tick: TickDateProvider,
        label: TickLabelProvider,
        next_tick: TickDateProvider | None = None,
    ) -> None:
        if duration <= Duration.ZERO:
            raise InvalidIntervalError("Duration of tick interval must be positive")
        self.duration = duration
        self._first_tick = first_tick
        self._label = label
        self._next_tick = next_tick or self._step

    def _step(self, date: ExactDate) -> ExactDate:
        return date + self.duration

    def ticks_between(self, start: ExactDate, end: ExactDate) -> list[Tick]:
        """Ticks from the first boundary at or after ``start`` up to ``end`` inclusive."""

        ticks: list[Tick] = []
        tick_date = self._first_tick(start)
        while tick_date <= end:
            ticks.append(Tick(tick_date, self._label(tick_date)))
            tick_date = self._next_tick(tick_date)
        return ticks

    def __repr__(self) -> str:
        return f"TickInterval({self.duration!r})"


def _hours_label(date: ExactDate) -> str:
    return f"{date.year} {date.era.label}\n{month_name(date.month)} {date.day}\n{date.hour}:00"


def _days_label(date: ExactDate) -> str:
    return f"{date.year} {date.era.label}\n{month_name(date.month)} {date.day}"


def _months_label(date: ExactDate) -> str:
    return f"{date.year} {date.era.label}\n{month_name(date.month)}"


def _years_label(date: ExactDate) -> str:
    return f"{date.year} {date.era.label}"


def _snap(date: ExactDate, start: ExactDate, step: Duration) -> ExactDate:
    while date < start:
        date += step
    return date


def _one_hour_first_tick(start: ExactDate) -> ExactDate:
    return start


def _twelve_hours_first_tick(start: ExactDate) -> ExactDate:
    return _snap(start.with_parts(hour=0), start, Duration.of(hours=12))


def _day_first_tick(start: ExactDate) -> ExactDate:
    return _snap(start.with_parts(hour=0), start, Duration.of(days=1))


def _month_first_tick(start: ExactDate) -> ExactDate:
    return _snap(start.with_parts(day=1, hour=0), start, Duration.of(months=1))


def _six_months_first_tick(start: ExactDate) -> ExactDate:
    return _snap(start.with_parts(month=1, day=1, hour=0), start, Duration.of(months=6))


def _years_first_tick(period: int) -> TickDateProvider:
    step = Duration.of(years=period)

    def first_tick(start: ExactDate) -> ExactDate:
        year = max(1, start.year // period) * period
        return _snap(ExactDate(start.era, year, 1, 1, 0), start, step)

    return first_tick


def _years_next_tick(step: Duration) -> TickDateProvider:
    def next_tick(previous: ExactDate) -> ExactDate:
        # Without a year zero, stepping from AD 1 by N years would land on N + 1.
        if step > ONE_YEAR and previous == EPOCH_START:
            return previous + step - ONE_YEAR
        return previous + step

    return next_tick


def tick_intervals() -> Iterator[TickInterval]:
    """Yield every valid tick interval, finest first. The sequence never ends."""

    yield TickInterval(Duration.of(hours=1), _one_hour_first_tick, _hours_label)
    yield TickInterval(Duration.of(hours=12), _twelve_hours_first_tick, _hours_label)
    yield TickInterval(Duration.of(days=1), _day_first_tick, _days_label)
    yield TickInterval(Duration.of(months=1), _month_first_tick, _months_label)
    yield TickInterval(Duration.of(months=6), _six_months_first_tick, _months_label)

    for power in count():
        period = 10**power
        step = Duration.of(years=period)
        yield TickInterval(step, _years_first_tick(period), _years_label, _years_next_tick(step))


def first_interval_with_duration_at_least(duration: Duration) -> TickInterval:
    for interval in tick_intervals():
        if interval.duration >= duration:
            return interval
    raise TickCatalogueError(f"No tick interval at least {duration!r} long")


def last_interval_with_duration_at_most(duration: Duration) -> TickInterval:
    """Interval right before the first one at least ``duration`` long.

    The finest interval is returned when even it is at least ``duration`` long.
    """

    last: TickInterval | None = None
    for interval in tick_intervals():
        if interval.duration >= duration:
            return last or interval
        last = interval
    raise TickCatalogueError(f"No tick interval at most {duration!r} long")


__all__ = [
    "Tick",
    "TickInterval",
    "first_interval_with_duration_at_least",
    "last_interval_with_duration_at_most",
    "tick_intervals",
]
