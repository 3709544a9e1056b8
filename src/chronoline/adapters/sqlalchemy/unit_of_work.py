"""SQLAlchemy-backed unit of work for stored events.

The adapter owns one engine per process. ``startup`` binds it (creating the
schema), units of work open short-lived sessions from it, ``shutdown`` disposes it.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from chronoline.adapters.sqlalchemy.mappings import create_all_tables
from chronoline.adapters.sqlalchemy.repositories import (
    SqlAlchemyEventRepository,
    SqlAlchemyEventsSetRepository,
)
from chronoline.config.storage import get_database_config
from chronoline.domain.ports.unit_of_work import EventRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

    from chronoline.domain.model import Clock

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the adapter is used before ``startup`` or started twice."""


class _Binding:
    """Engine the adapter is bound to and the session factory derived from it."""

    def __init__(self) -> None:
        self.engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine | None) -> None:
        self.engine = engine
        self._sessions = None

    def sessions(self) -> sessionmaker[Session]:
        if self.engine is None:
            raise StartupError(
                "No database engine bound; call "
                "chronoline.adapters.sqlalchemy.unit_of_work.startup() first"
            )
        if self._sessions is None:
            self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._sessions


_STATE = _Binding()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine``, or to a new engine for the configured database.

    Missing tables are created. Binding again requires ``force=True``.
    """

    if _STATE.engine is not None and not force:
        raise StartupError("Database engine already bound; pass force=True to rebind")

    bound = engine or create_engine(database_uri or get_database_config().uri, future=True)
    create_all_tables(bound)
    _STATE.bind(bound)
    log.info("SQLAlchemy adapter started on %s", bound.url)


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the bound engine, if any, and unbind it."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
        log.info("SQLAlchemy adapter shut down")
    _STATE.bind(None)


class SqlAlchemyUnitOfWork:
    """One session and its repositories; rolled back when the block raises.

    Events read through the repositories resolve "now" with ``clock`` when given.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self.session_factory = _STATE.sessions()
        self._clock = clock
        self._session: Session | None = None
        self._repositories: EventRepositories | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self.session_factory()
        self._repositories = EventRepositories(
            events=SqlAlchemyEventRepository(self._session, clock=self._clock),
            events_sets=SqlAlchemyEventsSetRepository(self._session, clock=self._clock),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> EventRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session


if TYPE_CHECKING:
    from chronoline.domain.ports.unit_of_work import EventUnitOfWork

    _uow_check: EventUnitOfWork = SqlAlchemyUnitOfWork()
