"""Display defaults for laying out events and axis ticks."""

from __future__ import annotations

from dataclasses import dataclass

from chronoline.domain.model import HOURS_IN_YEAR, Duration

from .env import positive_int_env_var

DEFAULT_POINT_EVENT_MAX_HOURS = HOURS_IN_YEAR
DEFAULT_MIN_TICK_HOURS = 1


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    point_event_max_hours: int = DEFAULT_POINT_EVENT_MAX_HOURS
    min_tick_hours: int = DEFAULT_MIN_TICK_HOURS

    @property
    def point_event_max_duration(self) -> Duration:
        return Duration.from_hours(self.point_event_max_hours)

    @property
    def min_tick_duration(self) -> Duration:
        return Duration.from_hours(self.min_tick_hours)


def get_display_config() -> DisplayConfig:
    return DisplayConfig(
        point_event_max_hours=positive_int_env_var(
            "CHRONOLINE_POINT_EVENT_MAX_HOURS", DEFAULT_POINT_EVENT_MAX_HOURS
        ),
        min_tick_hours=positive_int_env_var("CHRONOLINE_MIN_TICK_HOURS", DEFAULT_MIN_TICK_HOURS),
    )
