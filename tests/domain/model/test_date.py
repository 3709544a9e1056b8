from __future__ import annotations

from datetime import UTC, datetime

from chronoline.domain.model import (
    Duration,
    Now,
    PartialDate,
    Specific,
    compare_dates,
    elapsed_between,
    system_clock,
)
from tests.helpers.events import ad, bc, make_clock


def test_now_resolves_to_clock_hour() -> None:
    clock = make_clock(datetime(2024, 5, 17, 13, 45, tzinfo=UTC))

    assert Now().resolve(clock) == PartialDate.after_epoch(2024, 5, 17, 13)


def test_now_instances_are_equal() -> None:
    assert Now() == Now()
    assert str(Now()) == "now"


def test_specific_resolves_to_wrapped_date() -> None:
    date = Specific.before_epoch(57, 3, 22, 5)

    assert date.resolve() == PartialDate.before_epoch(57, 3, 22, 5)
    assert str(date) == "57 March 22 5:00 BC"


def test_specific_dates_compare_by_value() -> None:
    assert ad(2020, 1) == Specific(PartialDate.after_epoch(2020, 1))
    assert ad(2020) != bc(2020)


def test_compare_dates_resolves_now_with_clock() -> None:
    clock = make_clock(datetime(2024, 5, 17, 13, tzinfo=UTC))

    assert compare_dates(ad(2024, 5, 17, 12), Now(), clock=clock) == -1
    assert compare_dates(Now(), ad(2024, 5, 17, 13), clock=clock) == 0
    assert compare_dates(Now(), ad(2025), clock=clock) == -1


def test_elapsed_between_dates() -> None:
    assert elapsed_between(ad(2022), ad(2020)) == Duration.of(years=2)
    assert elapsed_between(ad(2020), ad(2022)) == Duration.of(years=-2)
    assert elapsed_between(ad(1), bc(1)) == Duration.of(years=1)


def test_elapsed_between_now_and_date() -> None:
    clock = make_clock(datetime(2024, 1, 2, 0, tzinfo=UTC))

    assert elapsed_between(Now(), ad(2024, 1, 1, 0), clock=clock) == Duration.of(days=1)


def test_system_clock_is_timezone_aware() -> None:
    assert system_clock().tzinfo is UTC
