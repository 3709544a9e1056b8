"""Location of the event database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "chronoline"
DEFAULT_DB_FILENAME: Final[str] = "chronoline.db"
DATA_DIR_ENV_VAR: Final[str] = "CHRONOLINE_DATA_DIR"
DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"


def _platform_data_home() -> Path:
    if os.name == "nt":
        local = os.getenv("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"
    xdg = os.getenv("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Directory holding the SQLite database, already expanded and resolved."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @classmethod
    def from_env(cls) -> StorageConfig:
        explicit = os.getenv(DATA_DIR_ENV_VAR)
        base = Path(explicit) if explicit else _platform_data_home() / APP_DIR_NAME
        return cls(data_dir=base.expanduser().resolve())

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.database_filename

    def sqlite_uri(self, *, create_dir: bool = True) -> str:
        if create_dir:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{self.database_path}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_storage_config() -> StorageConfig:
    return StorageConfig.from_env()


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` when set, otherwise the SQLite file in the data directory."""

    override = os.getenv(DATABASE_URI_ENV_VAR)
    if override:
        return DatabaseConfig(uri=override)
    return DatabaseConfig(uri=(storage or get_storage_config()).sqlite_uri())
