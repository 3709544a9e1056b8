"""Distribution of events over display lines of non-overlapping events.

Point events are events no longer than a threshold; they share one line and are
thinned out when they start closer to each other than the threshold. Interval
events are longer; they are packed greedily onto as many lines as needed and are
never dropped. The packing is the classic greedy heuristic and does not promise
the minimum number of lines.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from logging import getLogger
from typing import TYPE_CHECKING, overload

from chronoline.domain.model import (
    Duration,
    Event,
    MissingRequiredValueError,
    OverlappingEventsError,
    compare_dates,
    elapsed_between,
    system_clock,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chronoline.domain.model import Clock

log = getLogger(__name__)


class NonOverlappingEvents[TDescription](MutableSequence[Event[TDescription]]):
    """List of events which refuses an event overlapping one it already holds."""

    def __init__(self, events: Iterable[Event[TDescription]] = ()) -> None:
        self._items: list[Event[TDescription]] = []
        for event in events:
            self.append(event)

    def _check(self, item: Event[TDescription], skip: int | None = None) -> None:
        if item is None:
            raise MissingRequiredValueError("Events line can't hold None")
        for index, held in enumerate(self._items):
            if index != skip and held.overlaps_with(item):
                raise OverlappingEventsError(f"{item!r} overlaps {held!r} in the same line")

    @overload
    def __getitem__(self, index: int) -> Event[TDescription]: ...

    @overload
    def __getitem__(self, index: slice) -> list[Event[TDescription]]: ...

    def __getitem__(self, index: int | slice) -> Event[TDescription] | list[Event[TDescription]]:
        return self._items[index]

    def __setitem__(self, index: int, item: Event[TDescription]) -> None:  # type: ignore[override]
        self._check(item, skip=range(len(self._items))[index])
        self._items[index] = item

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Event[TDescription]]:
        return iter(self._items)

    def insert(self, index: int, value: Event[TDescription]) -> None:
        self._check(value)
        self._items.insert(index, value)

    def __repr__(self) -> str:
        return f"NonOverlappingEvents({self._items!r})"


@dataclass(eq=False)
class EventsLine[TDescription]:
    is_point_events: bool
    events: NonOverlappingEvents[TDescription] = field(default_factory=NonOverlappingEvents)


@dataclass(eq=False)
class EventsDistribution[TDescription]:
    lines: list[EventsLine[TDescription]] = field(default_factory=list)


class EventsDistributor:
    """Lays events out on lines for display."""

    def __init__(self, point_event_max_duration: Duration, *, clock: Clock = system_clock) -> None:
        self.point_event_max_duration = point_event_max_duration
        self.clock = clock

    def distribute[T](self, events: Iterable[Event[T]]) -> EventsDistribution[T]:
        if events is None:
            raise MissingRequiredValueError("Events to distribute can't be None")
        pending = list(events)

        by_start = cmp_to_key(
            lambda a, b: compare_dates(a.start, b.start, clock=self.clock)
        )
        threshold = self.point_event_max_duration
        points = sorted(
            (e for e in pending if e.duration_with(self.clock) <= threshold), key=by_start
        )
        intervals = sorted(
            (e for e in pending if e.duration_with(self.clock) > threshold), key=by_start
        )

        distribution = EventsDistribution[T]()
        self._add_point_events(distribution, points)
        self._add_interval_events(distribution, intervals)
        log.debug(
            "Distributed %s events: %s point, %s interval, %s lines",
            len(pending),
            len(points),
            len(intervals),
            len(distribution.lines),
        )
        return distribution

    def _add_point_events[T](
        self,
        distribution: EventsDistribution[T],
        points: list[Event[T]],
    ) -> None:
        if not points:
            return

        line = EventsLine[T](is_point_events=True)
        remaining = points
        while remaining:
            kept = remaining[0]
            line.events.append(kept)
            index = 1
            while index < len(remaining) and self._too_close(remaining[index], kept):
                index += 1
            remaining = remaining[index:]

        dropped = len(points) - len(line.events)
        if dropped:
            log.debug(
                "Dropped %s point events closer than %r", dropped, self.point_event_max_duration
            )
        distribution.lines.append(line)

    def _too_close[T](self, event: Event[T], kept: Event[T]) -> bool:
        gap = elapsed_between(event.start, kept.start, clock=self.clock)
        return gap <= self.point_event_max_duration

    def _add_interval_events[T](
        self,
        distribution: EventsDistribution[T],
        intervals: list[Event[T]],
    ) -> None:
        remaining = intervals
        while remaining:
            line, remaining = self._fill_line(remaining)
            distribution.lines.append(line)

    def _fill_line[T](
        self,
        intervals: list[Event[T]],
    ) -> tuple[EventsLine[T], list[Event[T]]]:
        line = EventsLine[T](is_point_events=False)
        rest: list[Event[T]] = []

        last_placed = intervals[0]
        line.events.append(last_placed)
        for current in intervals[1:]:
            if last_placed.overlaps_with(current):
                rest.append(current)
            else:
                last_placed = current
                line.events.append(current)

        return line, rest
