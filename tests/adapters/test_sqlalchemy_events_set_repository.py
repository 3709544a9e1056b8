"""Exercise the SQLAlchemy events set repository against in-memory SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session  # noqa: TC002

from chronoline.adapters.sqlalchemy import (
    SqlAlchemyEventRepository,
    SqlAlchemyEventsSetRepository,
    event_in_set_table,
    events_set_table,
)
from chronoline.domain.model import Event, EventsSet, Now
from chronoline.domain.ports import EventsSetRepository
from tests.helpers.events import ad, bc, make_event


@pytest.fixture
def events() -> list[Event[str]]:
    return [
        make_event("A", bc(10), ad(12)),
        make_event("B", bc(20, 5)),
        make_event("C", ad(2020, 1, 1), Now()),
        make_event("D", Now()),
    ]


def test_repository_satisfies_port(sqlite_session: Session) -> None:
    assert isinstance(SqlAlchemyEventsSetRepository(sqlite_session), EventsSetRepository)


def test_add_new_set_stores_events_and_membership(
    sqlite_session: Session,
    events: list[Event[str]],
) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    events_set = EventsSet("Set", events[1], events[3])

    repository.add(events_set)

    assert events_set.id is not None
    assert events[1].id is not None
    assert events[3].id is not None
    assert events[0].id is None
    assert sqlite_session.execute(select(events_set_table.c.name)).scalar_one() == "Set"
    member_ids = sqlite_session.scalars(
        select(event_in_set_table.c.event_id).where(
            event_in_set_table.c.set_id == events_set.id
        )
    ).all()
    assert sorted(member_ids) == sorted([events[1].id, events[3].id])


def test_get_single_set(sqlite_session: Session, events: list[Event[str]]) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    first = EventsSet("Set1", events[1], events[3])
    second = EventsSet("Set2", events[0], events[3])
    repository.add(first)
    repository.add(second)
    assert first.id is not None

    stored = repository.get(first.id)

    assert stored is not None
    assert stored.name == "Set1"
    assert stored.id == first.id
    assert sorted(event.description for event in stored) == ["B", "D"]


def test_get_missing_returns_none(sqlite_session: Session) -> None:
    assert SqlAlchemyEventsSetRepository(sqlite_session).get(999) is None


def test_list_all_sets(sqlite_session: Session, events: list[Event[str]]) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    repository.add(EventsSet("Set1", events[1], events[3]))
    repository.add(EventsSet("Set2", events[0], events[3]))

    assert [events_set.name for events_set in repository.list_all()] == ["Set1", "Set2"]
    assert [events_set.name for events_set in repository.list_all("2")] == ["Set2"]
    assert len(repository.list_all("  ")) == 2
    assert repository.list_all("%") == []


def test_add_existing_set_replaces_name_and_members(
    sqlite_session: Session,
    events: list[Event[str]],
) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    events_set = EventsSet("Draft", events[0], events[1])
    repository.add(events_set)
    assert events_set.id is not None

    renamed = EventsSet("Final", events[1], events[2], id=events_set.id)
    repository.add(renamed)

    stored = repository.get(events_set.id)
    assert stored is not None
    assert stored.name == "Final"
    assert sorted(event.description for event in stored) == ["B", "C"]
    assert len(repository.list_all()) == 1


def test_remove_set_keeps_events(sqlite_session: Session, events: list[Event[str]]) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    events_set = EventsSet("Set", events[1], events[3])
    repository.add(events_set)
    assert events_set.id is not None

    assert repository.remove(events_set.id) is True
    assert repository.remove(events_set.id) is False

    assert repository.list_all() == []
    assert sqlite_session.execute(select(event_in_set_table)).all() == []
    assert len(SqlAlchemyEventRepository(sqlite_session).list_all()) == 2


def test_removing_event_drops_it_from_sets(
    sqlite_session: Session,
    events: list[Event[str]],
) -> None:
    repository = SqlAlchemyEventsSetRepository(sqlite_session)
    events_set = EventsSet("Set", events[1], events[3])
    repository.add(events_set)
    assert events_set.id is not None
    assert events[1].id is not None

    SqlAlchemyEventRepository(sqlite_session).remove(events[1].id)

    stored = repository.get(events_set.id)
    assert stored is not None
    assert [event.description for event in stored] == ["D"]


def test_table_rejects_blank_name(sqlite_session: Session) -> None:
    with pytest.raises(IntegrityError):
        sqlite_session.execute(insert(events_set_table).values(name="  "))
