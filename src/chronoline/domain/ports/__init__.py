"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import EventRepository, EventsSetRepository
from .unit_of_work import EventRepositories, EventUnitOfWork

__all__ = [
    "EventRepositories",
    "EventRepository",
    "EventUnitOfWork",
    "EventsSetRepository",
]
