"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, insert, select, update

from chronoline.adapters.sqlalchemy.mappings import (
    event_in_set_table,
    event_table,
    events_set_table,
)
from chronoline.domain.model import (
    CorruptRecordError,
    DateRecord,
    Event,
    EventsSet,
    from_record,
    to_record,
)

if TYPE_CHECKING:
    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from chronoline.domain.model import Clock, Date


def _bound_columns(prefix: str, value: Date | None) -> dict[str, object]:
    if value is None:
        return {f"{prefix}_is_now": None, f"{prefix}_hours": None, f"{prefix}_null_part": None}
    record = to_record(value)
    return {
        f"{prefix}_is_now": record.is_now,
        f"{prefix}_hours": record.hours,
        f"{prefix}_null_part": record.null_part,
    }


def _bound_from_row(row: Row[Any], prefix: str) -> Date | None:
    mapping = row._mapping  # noqa: SLF001
    is_now = mapping[f"{prefix}_is_now"]
    if is_now is None:
        return None
    return from_record(
        DateRecord(
            is_now=bool(is_now),
            hours=mapping[f"{prefix}_hours"],
            null_part=mapping[f"{prefix}_null_part"],
        )
    )


class SqlAlchemyEventRepository:
    """Stores events with text descriptions; places are kept by their string id."""

    def __init__(self, session: Session, *, clock: Clock | None = None) -> None:
        self.session = session
        self._clock = clock

    def add(self, event: Event[str]) -> None:
        values = self._values(event)
        if event.id is None:
            result = self.session.execute(insert(event_table).values(**values))
            event.id = cast(int, result.inserted_primary_key[0])
            return
        stmt = update(event_table).where(event_table.c.id == event.id).values(**values)
        if self.session.execute(stmt).rowcount == 0:
            self.session.execute(insert(event_table).values(id=event.id, **values))

    def get(self, event_id: int) -> Event[str] | None:
        row = self.session.execute(
            select(event_table).where(event_table.c.id == event_id)
        ).one_or_none()
        return None if row is None else self._to_event(row)

    def list_all(self) -> list[Event[str]]:
        rows = self.session.execute(select(event_table).order_by(event_table.c.id)).all()
        return [self._to_event(row) for row in rows]

    def remove(self, event_id: int) -> bool:
        self.session.execute(
            delete(event_in_set_table).where(event_in_set_table.c.event_id == event_id)
        )
        result = self.session.execute(delete(event_table).where(event_table.c.id == event_id))
        return result.rowcount > 0

    @staticmethod
    def _values(event: Event[str]) -> dict[str, object]:
        return {
            "description": event.description,
            "place": None if event.place is None else str(event.place),
            **_bound_columns("start", event.start),
            **_bound_columns("end", event.end),
        }

    def _to_event(self, row: Row[Any]) -> Event[str]:
        start = _bound_from_row(row, "start")
        if start is None:
            raise CorruptRecordError(f"Stored event {row.id} has no start")
        kwargs: dict[str, Any] = {"place": row.place, "id": row.id}
        if self._clock is not None:
            kwargs["clock"] = self._clock
        return Event(row.description, start, _bound_from_row(row, "end"), **kwargs)


class SqlAlchemyEventsSetRepository:
    """Stores named events sets; saving a set also saves every event in it."""

    def __init__(self, session: Session, *, clock: Clock | None = None) -> None:
        self.session = session
        self._events = SqlAlchemyEventRepository(session, clock=clock)

    def add(self, events_set: EventsSet[str]) -> None:
        for event in events_set:
            self._events.add(event)

        if events_set.id is None:
            result = self.session.execute(insert(events_set_table).values(name=events_set.name))
            events_set.id = cast(int, result.inserted_primary_key[0])
        else:
            stmt = (
                update(events_set_table)
                .where(events_set_table.c.id == events_set.id)
                .values(name=events_set.name)
            )
            if self.session.execute(stmt).rowcount == 0:
                self.session.execute(
                    insert(events_set_table).values(id=events_set.id, name=events_set.name)
                )

        self.session.execute(
            delete(event_in_set_table).where(event_in_set_table.c.set_id == events_set.id)
        )
        memberships = [{"set_id": events_set.id, "event_id": event.id} for event in events_set]
        if memberships:
            self.session.execute(insert(event_in_set_table), memberships)

    def get(self, set_id: int) -> EventsSet[str] | None:
        row = self.session.execute(
            select(events_set_table).where(events_set_table.c.id == set_id)
        ).one_or_none()
        return None if row is None else self._to_events_set(row)

    def list_all(self, name_part: str | None = None) -> list[EventsSet[str]]:
        """Every stored set, or only those whose name contains ``name_part``."""

        stmt = select(events_set_table).order_by(events_set_table.c.id)
        if name_part and name_part.strip():
            stmt = stmt.where(events_set_table.c.name.contains(name_part, autoescape=True))
        return [self._to_events_set(row) for row in self.session.execute(stmt).all()]

    def remove(self, set_id: int) -> bool:
        self.session.execute(
            delete(event_in_set_table).where(event_in_set_table.c.set_id == set_id)
        )
        result = self.session.execute(
            delete(events_set_table).where(events_set_table.c.id == set_id)
        )
        return result.rowcount > 0

    def _to_events_set(self, row: Row[Any]) -> EventsSet[str]:
        event_ids = self.session.scalars(
            select(event_in_set_table.c.event_id)
            .where(event_in_set_table.c.set_id == row.id)
            .order_by(event_in_set_table.c.event_id)
        ).all()
        members = [self._events.get(event_id) for event_id in event_ids]
        return EventsSet(
            row.name, *(event for event in members if event is not None), id=row.id
        )


if TYPE_CHECKING:
    from chronoline.domain.ports.persistence import EventRepository, EventsSetRepository

    _session_stub = cast("Session", object())
    _repo_check: EventRepository = SqlAlchemyEventRepository(_session_stub)
    _sets_check: EventsSetRepository = SqlAlchemyEventsSetRepository(_session_stub)
