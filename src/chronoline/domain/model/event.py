"""Described time intervals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoline.domain.model.date import Clock, compare_dates, elapsed_between, system_clock
from chronoline.domain.model.duration import Duration
from chronoline.domain.model.errors import InvalidIntervalError, MissingRequiredValueError

if TYPE_CHECKING:
    from chronoline.domain.model.date import Date


class Event[TDescription]:
    """Something that happened at a date, or between two dates.

    An event without an end is an instant at its start. ``place`` is an opaque
    reference into the place hierarchy and is never inspected here. ``id`` is
    assigned by storage.
    """

    def __init__(
        self,
        description: TDescription,
        start: Date,
        end: Date | None = None,
        *,
        place: object | None = None,
        id: int | None = None,  # noqa: A002
        clock: Clock = system_clock,
    ) -> None:
        self.clock = clock
        self.description = description
        self.place = place
        self.id = id
        self._start: Date
        self._end: Date | None
        self.set_interval(start, end)

    @property
    def description(self) -> TDescription:
        return self._description

    @description.setter
    def description(self, value: TDescription) -> None:
        if value is None:
            raise MissingRequiredValueError("Event description can't be None")
        self._description = value

    @property
    def start(self) -> Date:
        return self._start

    @property
    def end(self) -> Date | None:
        return self._end

    @property
    def duration(self) -> Duration:
        return self.duration_with(self.clock)

    def duration_with(self, clock: Clock) -> Duration:
        """Length of the event with "now" read from ``clock``."""

        if self._end is None:
            return Duration.ZERO
        return elapsed_between(self._end, self._start, clock=clock)

    def set_interval(self, start: Date, end: Date | None = None) -> None:
        """Replace both bounds at once, keeping end no earlier than start."""

        if start is None:
            raise MissingRequiredValueError("Event start can't be None")
        if end is not None and compare_dates(end, start, clock=self.clock) < 0:
            raise InvalidIntervalError(f"Event end {end} should be no less than start {start}")
        self._start = start
        self._end = end

    def overlaps_with(self, other: Event[TDescription]) -> bool:
        """Half-open overlap: an event ending where another starts does not overlap it.

        Both events read "now" from this event's clock.
        """

        if other is None:
            raise MissingRequiredValueError("Can't check overlapping with None")

        if self._end is None and other.end is None:
            return elapsed_between(self._start, other.start, clock=self.clock) == Duration.ZERO

        gap = elapsed_between(other.start, self._start, clock=self.clock)
        return (
            compare_dates(self._start, other.start, clock=self.clock) <= 0
            and gap < self.duration_with(self.clock)
        ) or (
            compare_dates(other.start, self._start, clock=self.clock) <= 0
            and -gap < other.duration_with(self.clock)
        )

    def __repr__(self) -> str:
        end = "" if self._end is None else f" - {self._end}"
        return f"Event({self._description!r}, {self._start}{end})"
