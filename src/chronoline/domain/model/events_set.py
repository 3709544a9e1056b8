"""Named collections of events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoline.domain.model.errors import MissingRequiredValueError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from chronoline.domain.model.event import Event


class EventsSet[TDescription]:
    """A named set of events, each held at most once.

    Events carry no value equality, so membership is by identity. The set keeps
    events in the order they were first added. ``id`` is assigned by storage.
    """

    def __init__(
        self,
        name: str,
        *events: Event[TDescription],
        id: int | None = None,  # noqa: A002
    ) -> None:
        if name is None or not name.strip():
            raise MissingRequiredValueError("Events set name can't be blank")
        self._name = name
        self.id = id
        self._events: dict[Event[TDescription], None] = {}
        self.add(*events)

    @property
    def name(self) -> str:
        return self._name

    @property
    def events(self) -> tuple[Event[TDescription], ...]:
        return tuple(self._events)

    def add(self, *events: Event[TDescription]) -> None:
        for event in events:
            if event is None:
                raise MissingRequiredValueError("Events set can't hold None")
            self._events.setdefault(event)

    def remove(self, *events: Event[TDescription]) -> None:
        """Drop ``events``; those not in the set are ignored."""

        for event in events:
            self._events.pop(event, None)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __iter__(self) -> Iterator[Event[TDescription]]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventsSet({self._name!r}, {len(self._events)} events)"
