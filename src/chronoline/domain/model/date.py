"""Dates attached to events: either "now" or a specific partial date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from chronoline.domain.model.duration import Duration
from chronoline.domain.model.enums import Era
from chronoline.domain.model.primitives import PartialDate, compare_chronologically


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def system_clock() -> datetime:
    """The one place the wall clock is read."""

    return datetime.now(UTC)


@dataclass(frozen=True)
class Now:
    """The current moment, resolved anew on every comparison."""

    def resolve(self, clock: Clock = system_clock) -> PartialDate:
        current = clock()
        return PartialDate.after_epoch(current.year, current.month, current.day, current.hour)

    def __str__(self) -> str:
        return "now"


@dataclass(frozen=True)
class Specific:
    """A fixed, possibly partial, date."""

    value: PartialDate

    def resolve(self, clock: Clock = system_clock) -> PartialDate:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def before_epoch(
        cls,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> Specific:
        return cls(PartialDate(Era.BEFORE_EPOCH, year, month, day, hour))

    @classmethod
    def after_epoch(
        cls,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> Specific:
        return cls(PartialDate(Era.AFTER_EPOCH, year, month, day, hour))


type Date = Now | Specific


def compare_dates(a: Date, b: Date, *, clock: Clock = system_clock) -> int:
    return compare_chronologically(a.resolve(clock), b.resolve(clock))


def elapsed_between(later: Date, earlier: Date, *, clock: Clock = system_clock) -> Duration:
    """Duration from ``earlier`` to ``later`` (negative when ``later`` is earlier)."""

    return Duration.from_epoch(later.resolve(clock)) - Duration.from_epoch(earlier.resolve(clock))
