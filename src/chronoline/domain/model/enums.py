"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Era(StrEnum):
    """Side of the epoch a date lies on. There is no year zero between them."""

    BEFORE_EPOCH = "before_epoch"
    AFTER_EPOCH = "after_epoch"

    @property
    def label(self) -> str:
        return "BC" if self is Era.BEFORE_EPOCH else "AD"

    @property
    def rank(self) -> int:
        return 0 if self is Era.BEFORE_EPOCH else 1


class NullDatePart(StrEnum):
    """First unset component of a stored partial date."""

    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    NOTHING = "nothing"
