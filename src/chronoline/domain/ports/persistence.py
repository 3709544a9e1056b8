"""Ports for storing and loading events and events sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chronoline.domain.model import Event, EventsSet


@runtime_checkable
class EventRepository(Protocol):
    """Events with text descriptions, keyed by the id assigned on first ``add``."""

    def add(self, event: Event[str]) -> None: ...

    def get(self, event_id: int) -> Event[str] | None: ...

    def list_all(self) -> list[Event[str]]: ...

    def remove(self, event_id: int) -> bool: ...


@runtime_checkable
class EventsSetRepository(Protocol):
    """Named events sets; adding a set stores its events too."""

    def add(self, events_set: EventsSet[str]) -> None: ...

    def get(self, set_id: int) -> EventsSet[str] | None: ...

    def list_all(self, name_part: str | None = None) -> list[EventsSet[str]]: ...

    def remove(self, set_id: int) -> bool: ...
