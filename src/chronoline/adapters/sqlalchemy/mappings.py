"""SQLAlchemy table metadata for stored events and events sets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)

from chronoline.domain.model import NullDatePart

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# A bound is either "now" or hours since the epoch plus the first unset date part.
# The end bound columns are all NULL for events without an end.
event_table = Table(
    "event",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", String, nullable=False),
    Column("place", String, nullable=True),
    Column("start_is_now", Boolean, nullable=False),
    Column("start_hours", BigInteger, nullable=True),
    Column("start_null_part", Enum(NullDatePart, native_enum=False), nullable=True),
    Column("end_is_now", Boolean, nullable=True),
    Column("end_hours", BigInteger, nullable=True),
    Column("end_null_part", Enum(NullDatePart, native_enum=False), nullable=True),
    CheckConstraint(
        "start_is_now OR (start_hours IS NOT NULL AND start_null_part IS NOT NULL)",
        name="start_bound",
    ),
)

events_set_table = Table(
    "events_set",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    CheckConstraint("length(trim(name)) > 0", name="name_not_blank"),
)

event_in_set_table = Table(
    "event_in_set",
    metadata,
    Column(
        "set_id", Integer, ForeignKey("events_set.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("event_id", Integer, ForeignKey("event.id", ondelete="CASCADE"), primary_key=True),
)


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the event metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
