"""Approximate elapsed time measured from and between dates.

A duration is a signed number of years where a month is 1/12 of a year, a day is
1/31 of a month and an hour is 1/24 of a day. Every month is 31 days long here,
independently of the real month lengths used to validate dates, so arithmetic
is lossy but consistent. The scalar is kept as an exact fraction; equality still
tolerates a tenth of an hour because scaling by floats is not exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from fractions import Fraction
from typing import TYPE_CHECKING, ClassVar, Final, overload

from chronoline.domain.model.enums import Era
from chronoline.domain.model.primitives import (
    HOURS_IN_DAY,
    MAX_DAYS_IN_MONTH,
    MONTHS_IN_YEAR,
    ExactDate,
    days_in_month,
    has_real_calendar,
)

if TYPE_CHECKING:
    from chronoline.domain.model.primitives import DateParts

HOURS_IN_MONTH: Final[int] = HOURS_IN_DAY * MAX_DAYS_IN_MONTH
HOURS_IN_YEAR: Final[int] = HOURS_IN_MONTH * MONTHS_IN_YEAR

_EPSILON: Final[Fraction] = Fraction(1, 10 * HOURS_IN_YEAR)

type Scalar = int | float | Fraction


def _fraction(value: Scalar) -> Fraction:
    return value if isinstance(value, Fraction) else Fraction(value)


def _roll_forward(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Move a day past the end of its month into the following month."""

    last_day = days_in_month(year, month)
    if day <= last_day:
        return year, month, day
    rolled = date(year, month, last_day) + timedelta(days=day - last_day)
    return rolled.year, rolled.month, rolled.day


@dataclass(frozen=True, eq=False, slots=True)
class Duration:
    """Signed elapsed time, counted in years."""

    years: Fraction

    ZERO: ClassVar[Duration]

    def __post_init__(self) -> None:
        if not isinstance(self.years, Fraction):
            object.__setattr__(self, "years", Fraction(self.years))

    @classmethod
    def of(
        cls,
        *,
        years: Scalar = 0,
        months: Scalar = 0,
        days: Scalar = 0,
        hours: Scalar = 0,
    ) -> Duration:
        return cls(
            _fraction(years)
            + _fraction(months) / MONTHS_IN_YEAR
            + _fraction(days) / (MONTHS_IN_YEAR * MAX_DAYS_IN_MONTH)
            + _fraction(hours) / HOURS_IN_YEAR
        )

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(Fraction(hours, HOURS_IN_YEAR))

    @classmethod
    def from_epoch(cls, value: DateParts) -> Duration:
        """Elapsed time from the start of year 1 after the epoch to ``value``."""

        if value.era is Era.AFTER_EPOCH:
            # There is no year zero.
            hours = HOURS_IN_YEAR * (value.year - 1)
        else:
            hours = -HOURS_IN_YEAR * value.year

        if value.month is not None:
            hours += HOURS_IN_MONTH * (value.month - 1)
            if value.day is not None:
                hours += HOURS_IN_DAY * (value.day - 1)
                if value.hour is not None:
                    hours += value.hour

        return cls.from_hours(hours)

    @property
    def hours(self) -> int:
        """Whole hour units in this duration."""

        return round(self.years * HOURS_IN_YEAR)

    def add_years(self, years: Scalar) -> Duration:
        return self + Duration.of(years=years)

    def add_months(self, months: Scalar) -> Duration:
        return self + Duration.of(months=months)

    def add_days(self, days: Scalar) -> Duration:
        return self + Duration.of(days=days)

    def add_hours(self, hours: Scalar) -> Duration:
        return self + Duration.of(hours=hours)

    def to_exact_date(self) -> ExactDate:
        """Date lying this far from the epoch."""

        remainder = self.hours
        era = Era.AFTER_EPOCH if remainder >= 0 else Era.BEFORE_EPOCH

        years, remainder = divmod(remainder, HOURS_IN_YEAR)
        months, remainder = divmod(remainder, HOURS_IN_MONTH)
        days, hours = divmod(remainder, HOURS_IN_DAY)
        month = months + 1
        day = days + 1

        if era is Era.BEFORE_EPOCH:
            return ExactDate(era, -years, month, day, hours)

        year = years + 1
        if has_real_calendar(era, year):
            year, month, day = _roll_forward(year, month, day)
        return ExactDate(era, year, month, day, hours)

    def compare(self, other: Duration) -> int:
        """Return -1, 0 or 1; differences under a tenth of an hour compare equal."""

        difference = self.years - other.years
        if abs(difference) < _EPSILON:
            return 0
        return -1 if difference < 0 else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) == 0

    # Approximate equality can't be hashed consistently.
    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.years + other.years)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.years - other.years)

    def __neg__(self) -> Duration:
        return Duration(-self.years)

    def __mul__(self, factor: Scalar) -> Duration:
        if isinstance(factor, Duration):
            return NotImplemented
        return Duration(self.years * _fraction(factor))

    __rmul__ = __mul__

    @overload
    def __truediv__(self, other: Duration) -> float: ...

    @overload
    def __truediv__(self, other: Scalar) -> Duration: ...

    def __truediv__(self, other: Duration | Scalar) -> float | Duration:
        if isinstance(other, Duration):
            return float(self.years / other.years)
        return Duration(self.years / _fraction(other))

    def __repr__(self) -> str:
        return f"Duration(hours={self.hours})"


Duration.ZERO = Duration(Fraction(0))
