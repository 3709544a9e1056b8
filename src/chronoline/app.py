"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from chronoline.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from chronoline.config.display import get_display_config
from chronoline.domain.distribution import EventsDistribution, EventsDistributor
from chronoline.domain.model import system_clock
from chronoline.domain.ports.unit_of_work import EventUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chronoline.config.display import DisplayConfig
    from chronoline.domain.model import Clock, Event
    from chronoline.domain.ticks import Tick
    from chronoline.domain.time_range import TimeRange

UnitOfWorkFactory = Callable[[], EventUnitOfWork]


log = getLogger(__name__)


def _default_unit_of_work(clock: Clock | None = None) -> EventUnitOfWork:
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork(clock=clock)


def store_events(
    events: Iterable[Event[str]],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int:
    """Persist ``events`` in one transaction and return how many were stored.

    Events without an id receive the one assigned by the store.
    """

    effective_uow = unit_of_work_factory or _default_unit_of_work
    stored = 0
    with effective_uow() as uow:
        for event in events:
            uow.repositories.events.add(event)
            stored += 1
        uow.commit()

    log.info("Stored %s events", stored)
    return stored


def distribute_stored_events(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    display: DisplayConfig | None = None,
    clock: Clock = system_clock,
) -> EventsDistribution[str]:
    """Lay out every stored event on display lines.

    Stored events that end "now" are read with ``clock``, so sorting, thinning
    and packing agree on a single present moment.
    """

    effective_uow = unit_of_work_factory or partial(_default_unit_of_work, clock)
    effective_display = display or get_display_config()
    with effective_uow() as uow:
        events = uow.repositories.events.list_all()

    log.info(
        "Distributing %s stored events: point_event_max_hours=%s",
        len(events),
        effective_display.point_event_max_hours,
    )
    distributor = EventsDistributor(effective_display.point_event_max_duration, clock=clock)
    distribution = distributor.distribute(events)
    log.info("Finished distribution: lines=%s", len(distribution.lines))
    return distribution


def axis_ticks(time_range: TimeRange, *, display: DisplayConfig | None = None) -> list[Tick]:
    """Ticks for ``time_range`` no closer together than the configured minimum."""

    effective_display = display or get_display_config()
    ticks = time_range.ticks(effective_display.min_tick_duration)
    log.debug(
        "Built %s ticks for %s - %s: min_tick_hours=%s",
        len(ticks),
        time_range.start,
        time_range.end,
        effective_display.min_tick_hours,
    )
    return ticks
