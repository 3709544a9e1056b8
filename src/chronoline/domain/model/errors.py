"""Error taxonomy of the timeline domain.

Every failure here is an input or programming error raised synchronously to the
caller. Nothing is retried.
"""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for all domain failures."""


class InvalidDateError(TimelineError, ValueError):
    """A date component is out of its allowed range."""


class InvalidYearError(InvalidDateError):
    """Year is zero or negative (there is no year zero)."""


class InvalidMonthError(InvalidDateError):
    """Month is outside 1..12."""


class InvalidDayError(InvalidDateError):
    """Day is outside 1..31 or past the end of its month."""


class InvalidHourError(InvalidDateError):
    """Hour is outside 0..23."""


class InconsistentPartialDateError(TimelineError, ValueError):
    """A more specific component is set while a less specific one is not."""


class InvalidIntervalError(TimelineError, ValueError):
    """An end precedes its start, or an interval length is not positive."""


class MissingRequiredValueError(TimelineError, ValueError):
    """A mandatory value (start, description, input collection) is absent."""


class OverlappingEventsError(TimelineError, ValueError):
    """An event overlaps another event already held by a line."""


class CorruptRecordError(TimelineError, ValueError):
    """A stored date record cannot be turned back into a date."""


class TickCatalogueError(TimelineError, RuntimeError):
    """The tick-interval catalogue yielded no match; it is infinite, so this is a bug."""
