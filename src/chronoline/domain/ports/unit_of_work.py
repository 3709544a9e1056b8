"""Transaction boundary around the event repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from chronoline.domain.ports.persistence import EventRepository, EventsSetRepository


@dataclass(frozen=True, slots=True)
class EventRepositories:
    events: EventRepository
    events_sets: EventsSetRepository


@runtime_checkable
class EventUnitOfWork(Protocol):
    """Nothing done through ``repositories`` is kept without ``commit``."""

    @property
    def repositories(self) -> EventRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool | None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
