"""Storage representation of event dates.

A stored date is either "now" or the whole hours elapsed since the epoch together
with the first component that was unset, so the precision of a partial date
survives the round trip.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronoline.domain.model.date import Date, Now, Specific
from chronoline.domain.model.duration import Duration
from chronoline.domain.model.enums import NullDatePart
from chronoline.domain.model.errors import CorruptRecordError
from chronoline.domain.model.primitives import PartialDate


@dataclass(frozen=True, slots=True)
class DateRecord:
    is_now: bool
    hours: int | None = None
    null_part: NullDatePart | None = None


def first_null_part(value: PartialDate) -> NullDatePart:
    if value.month is None:
        return NullDatePart.MONTH
    if value.day is None:
        return NullDatePart.DAY
    if value.hour is None:
        return NullDatePart.HOUR
    return NullDatePart.NOTHING


def to_record(value: Date) -> DateRecord:
    if isinstance(value, Now):
        return DateRecord(is_now=True)
    return DateRecord(
        is_now=False,
        hours=Duration.from_epoch(value.value).hours,
        null_part=first_null_part(value.value),
    )


def from_record(record: DateRecord) -> Date:
    if record.is_now:
        return Now()
    if record.hours is None:
        raise CorruptRecordError("Specific date record must have elapsed hours")
    if record.null_part is None:
        raise CorruptRecordError("Specific date record must name its first null part")

    exact = Duration.from_hours(record.hours).to_exact_date()
    match NullDatePart(record.null_part):
        case NullDatePart.NOTHING:
            parts = (exact.month, exact.day, exact.hour)
        case NullDatePart.HOUR:
            parts = (exact.month, exact.day, None)
        case NullDatePart.DAY:
            parts = (exact.month, None, None)
        case NullDatePart.MONTH:
            parts = (None, None, None)
    return Specific(PartialDate(exact.era, exact.year, *parts))
