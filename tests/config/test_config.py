from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003

import pytest

from chronoline.config import (
    ConfigurationError,
    DisplayConfig,
    configure_logging,
    get_database_config,
    get_display_config,
    get_storage_config,
    positive_int_env_var,
)
from chronoline.config import storage
from chronoline.domain.model import Duration


def test_storage_prefers_explicit_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("CHRONOLINE_DATA_DIR", str(custom))

    config = get_storage_config()

    assert config.data_dir == custom.resolve()
    assert config.database_path == custom.resolve() / storage.DEFAULT_DB_FILENAME


def test_storage_defaults_to_xdg_data_home(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.delenv("CHRONOLINE_DATA_DIR", raising=False)
    monkeypatch.setattr(storage.os, "name", "posix")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    config = get_storage_config()

    assert config.data_dir == (tmp_path / storage.APP_DIR_NAME).resolve()


def test_database_uri_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    assert get_database_config().uri == "sqlite:///override.db"


def test_database_uri_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("CHRONOLINE_DATA_DIR", str(tmp_path / "data-dir"))

    uri = get_database_config().uri

    expected_path = (tmp_path / "data-dir" / storage.DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_display_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHRONOLINE_POINT_EVENT_MAX_HOURS", raising=False)
    monkeypatch.delenv("CHRONOLINE_MIN_TICK_HOURS", raising=False)

    config = get_display_config()

    assert config == DisplayConfig()
    assert config.point_event_max_duration == Duration.of(years=1)
    assert config.min_tick_duration == Duration.of(hours=1)


def test_display_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHRONOLINE_POINT_EVENT_MAX_HOURS", "744")
    monkeypatch.setenv("CHRONOLINE_MIN_TICK_HOURS", " 12 ")

    config = get_display_config()

    assert config.point_event_max_duration == Duration.of(months=1)
    assert config.min_tick_duration == Duration.of(hours=12)


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_positive_int_env_var_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
) -> None:
    monkeypatch.setenv("EXAMPLE_HOURS", raw)

    with pytest.raises(ConfigurationError, match="EXAMPLE_HOURS"):
        positive_int_env_var("EXAMPLE_HOURS", 1)


def test_positive_int_env_var_treats_blank_as_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_HOURS", "   ")

    assert positive_int_env_var("EXAMPLE_HOURS", 5) == 5


def test_configure_logging_wraps_basic_config(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level=logging.DEBUG, force=True)

    assert len(calls) == 1
    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["force"] is True
    assert "%(name)s" in str(calls[0]["format"])


def test_configure_logging_accepts_level_names(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level="warning")

    assert calls[0]["level"] == logging.WARNING
    assert calls[0]["force"] is False


def test_configure_logging_rejects_unknown_level_name() -> None:
    with pytest.raises(ConfigurationError, match="loud"):
        configure_logging(level="loud")
