"""Public domain model surface."""

from __future__ import annotations

from chronoline.domain.model.date import (
    Clock,
    Date,
    Now,
    Specific,
    compare_dates,
    elapsed_between,
    system_clock,
)
from chronoline.domain.model.duration import HOURS_IN_MONTH, HOURS_IN_YEAR, Duration
from chronoline.domain.model.enums import Era, NullDatePart
from chronoline.domain.model.errors import (
    CorruptRecordError,
    InconsistentPartialDateError,
    InvalidDateError,
    InvalidDayError,
    InvalidHourError,
    InvalidIntervalError,
    InvalidMonthError,
    InvalidYearError,
    MissingRequiredValueError,
    OverlappingEventsError,
    TickCatalogueError,
    TimelineError,
)
from chronoline.domain.model.event import Event
from chronoline.domain.model.events_set import EventsSet
from chronoline.domain.model.primitives import (
    ExactDate,
    PartialDate,
    compare_chronologically,
    days_in_month,
    month_name,
)
from chronoline.domain.model.records import DateRecord, first_null_part, from_record, to_record

__all__ = [  # noqa: RUF022
    # enums
    "Era",
    "NullDatePart",
    # primitives
    "ExactDate",
    "PartialDate",
    "compare_chronologically",
    "days_in_month",
    "month_name",
    # duration
    "Duration",
    "HOURS_IN_MONTH",
    "HOURS_IN_YEAR",
    # dates
    "Clock",
    "Date",
    "Now",
    "Specific",
    "compare_dates",
    "elapsed_between",
    "system_clock",
    # events
    "Event",
    "EventsSet",
    # storage records
    "DateRecord",
    "first_null_part",
    "from_record",
    "to_record",
    # errors
    "CorruptRecordError",
    "InconsistentPartialDateError",
    "InvalidDateError",
    "InvalidDayError",
    "InvalidHourError",
    "InvalidIntervalError",
    "InvalidMonthError",
    "InvalidYearError",
    "MissingRequiredValueError",
    "OverlappingEventsError",
    "TickCatalogueError",
    "TimelineError",
]
