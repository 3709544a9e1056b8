"""SQLAlchemy adapter package for chronoline."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    event_in_set_table,
    event_table,
    events_set_table,
    metadata,
)
from .repositories import SqlAlchemyEventRepository, SqlAlchemyEventsSetRepository
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyEventRepository",
    "SqlAlchemyEventsSetRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "event_in_set_table",
    "event_table",
    "events_set_table",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
