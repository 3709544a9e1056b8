"""Calendar value objects: partial and exact dates on either side of the epoch.

Both kinds of date are validated on construction and ordered by one comparison
routine, ``compare_chronologically``. Real month lengths are only consulted for
after-epoch years the proleptic Gregorian calendar of :mod:`calendar` covers.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR
from typing import TYPE_CHECKING, Final, Protocol, overload

from chronoline.domain.model.enums import Era
from chronoline.domain.model.errors import (
    InconsistentPartialDateError,
    InvalidDayError,
    InvalidHourError,
    InvalidMonthError,
    InvalidYearError,
)

if TYPE_CHECKING:
    from chronoline.domain.model.duration import Duration

MONTHS_IN_YEAR: Final[int] = 12
MAX_DAYS_IN_MONTH: Final[int] = 31
HOURS_IN_DAY: Final[int] = 24

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def has_real_calendar(era: Era, year: int) -> bool:
    """Return whether real month lengths are known for ``year`` of ``era``."""

    return era is Era.AFTER_EPOCH and year <= MAXYEAR


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of after-epoch ``year`` (proleptic Gregorian)."""

    return calendar.monthrange(year, month)[1]


class DateParts(Protocol):
    @property
    def era(self) -> Era: ...

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int | None: ...

    @property
    def day(self) -> int | None: ...

    @property
    def hour(self) -> int | None: ...


def _validate(
    era: Era,
    year: int,
    month: int | None,
    day: int | None,
    hour: int | None,
) -> None:
    if year <= 0:
        raise InvalidYearError(
            f"Only positive years are allowed (there is no year zero), got {year}"
        )
    if month is not None and not 1 <= month <= MONTHS_IN_YEAR:
        raise InvalidMonthError(f"Month should be between 1 and 12, got {month}")
    if day is not None and month is None:
        raise InconsistentPartialDateError("Day can't be set if month is not specified")
    if hour is not None and day is None:
        raise InconsistentPartialDateError("Hour can't be set if day is not specified")
    if day is not None and month is not None:
        if not 1 <= day <= MAX_DAYS_IN_MONTH:
            raise InvalidDayError(f"Day should be between 1 and 31, got {day}")
        if has_real_calendar(era, year):
            last_day = days_in_month(year, month)
            if day > last_day:
                raise InvalidDayError(
                    f"Day of month {month} of year {year} should not be greater than {last_day}"
                )
    if hour is not None and not 0 <= hour < HOURS_IN_DAY:
        raise InvalidHourError(f"Hour should be between 0 and 23, got {hour}")


def _compare_parts(x: int | None, y: int | None) -> int | None:
    # An absent component sorts before any present one.
    if x is None and y is None:
        return None
    if x is None:
        return -1
    if y is None:
        return 1
    if x < y:
        return -1
    if x > y:
        return 1
    return None


def compare_chronologically(a: DateParts, b: DateParts) -> int:
    """Return -1, 0 or 1 as ``a`` is earlier than, equal to or later than ``b``."""

    if a.era is not b.era:
        return -1 if a.era.rank < b.era.rank else 1

    years = _compare_parts(a.year, b.year)
    if years is not None:
        # Larger before-epoch years are further in the past.
        return years if a.era is Era.AFTER_EPOCH else -years

    for x, y in ((a.month, b.month), (a.day, b.day), (a.hour, b.hour)):
        result = _compare_parts(x, y)
        if result is not None:
            return result
    return 0


def _render(parts: DateParts) -> str:
    pieces = [str(parts.year)]
    if parts.month is not None:
        pieces.append(month_name(parts.month))
        if parts.day is not None:
            pieces.append(str(parts.day))
            if parts.hour is not None:
                pieces.append(f"{parts.hour}:00")
    pieces.append(parts.era.label)
    return " ".join(pieces)


class _ChronologicalOrder:
    """Relational operators for date value objects of the same kind."""

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return compare_chronologically(self, other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return compare_chronologically(self, other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return compare_chronologically(self, other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return compare_chronologically(self, other) >= 0  # type: ignore[arg-type]


@dataclass(frozen=True)
class PartialDate(_ChronologicalOrder):
    """A date known to the year, month, day or hour."""

    era: Era
    year: int
    month: int | None = None
    day: int | None = None
    hour: int | None = None

    def __post_init__(self) -> None:
        _validate(self.era, self.year, self.month, self.day, self.hour)

    def __str__(self) -> str:
        return _render(self)

    @classmethod
    def before_epoch(
        cls,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> PartialDate:
        return cls(Era.BEFORE_EPOCH, year, month, day, hour)

    @classmethod
    def after_epoch(
        cls,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> PartialDate:
        return cls(Era.AFTER_EPOCH, year, month, day, hour)


@dataclass(frozen=True)
class ExactDate(_ChronologicalOrder):
    """A date with every component known, down to the hour."""

    era: Era
    year: int
    month: int
    day: int
    hour: int

    def __post_init__(self) -> None:
        _validate(self.era, self.year, self.month, self.day, self.hour)

    def __str__(self) -> str:
        return _render(self)

    def to_partial(self) -> PartialDate:
        return PartialDate(self.era, self.year, self.month, self.day, self.hour)

    def with_parts(
        self,
        *,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> ExactDate:
        """Return a copy of this date in the same year with some parts replaced."""

        return ExactDate(
            self.era,
            self.year,
            self.month if month is None else month,
            self.day if day is None else day,
            self.hour if hour is None else hour,
        )

    def __add__(self, duration: Duration) -> ExactDate:
        from chronoline.domain.model.duration import Duration  # noqa: PLC0415

        if not isinstance(duration, Duration):
            return NotImplemented
        return (Duration.from_epoch(self) + duration).to_exact_date()

    @overload
    def __sub__(self, other: ExactDate) -> Duration: ...

    @overload
    def __sub__(self, other: Duration) -> ExactDate: ...

    def __sub__(self, other: ExactDate | Duration) -> Duration | ExactDate:
        from chronoline.domain.model.duration import Duration  # noqa: PLC0415

        if isinstance(other, ExactDate):
            return Duration.from_epoch(self) - Duration.from_epoch(other)
        if isinstance(other, Duration):
            return (Duration.from_epoch(self) - other).to_exact_date()
        return NotImplemented

    @classmethod
    def before_epoch(cls, year: int, month: int, day: int, hour: int) -> ExactDate:
        return cls(Era.BEFORE_EPOCH, year, month, day, hour)

    @classmethod
    def after_epoch(cls, year: int, month: int, day: int, hour: int) -> ExactDate:
        return cls(Era.AFTER_EPOCH, year, month, day, hour)
