"""Root logger setup for programs embedding chronoline."""

from __future__ import annotations

import logging
from typing import Final

from .errors import ConfigurationError

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"


def _level_number(level: int | str) -> int:
    if isinstance(level, int):
        return level
    try:
        return logging.getLevelNamesMapping()[level.strip().upper()]
    except KeyError as exc:
        raise ConfigurationError(f"Unknown log level {level!r}") from exc


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Send records at ``level`` and above to stderr in a terse format.

    ``level`` is a number or a level name such as ``"debug"``. Handlers installed
    earlier are kept unless ``force`` is set.
    """

    logging.basicConfig(
        level=_level_number(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=force,
    )
