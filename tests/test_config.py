# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from taskpad.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKPAD_APP_NAME",
        "TASKPAD_LOG_LEVEL",
        "TASKPAD_DATA_DIR",
        "TASKPAD_STORAGE_BACKEND",
        "TASKPAD_STORAGE_PATH",
        "TASKPAD_STORAGE_KEY",
        "TASKPAD_SORT_NEWEST_FIRST",
        "TASKPAD_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "taskpad"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/taskpad")
    assert s.storage_backend == "json"
    assert s.storage_path == Path(".local/taskpad/storage.json")
    assert s.storage_key == "tasks"
    assert s.sort_newest_first is True
    assert s.console_enabled is True


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKPAD_STORAGE_BACKEND", "SQLite")
    monkeypatch.setenv("TASKPAD_STORAGE_KEY", "todo")
    monkeypatch.setenv("TASKPAD_SORT_NEWEST_FIRST", "off")
    monkeypatch.setenv("TASKPAD_LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.storage_backend == "sqlite"
    assert s.storage_path == tmp_path / "storage.sqlite3"
    assert s.storage_key == "todo"
    assert s.sort_newest_first is False
    assert s.log_level == "DEBUG"


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKPAD_STORAGE_BACKEND", "redis")
    monkeypatch.setenv("TASKPAD_CONSOLE_ENABLED", "maybe")
    monkeypatch.setenv("TASKPAD_STORAGE_KEY", "   ")

    s = Settings.from_env()

    assert s.storage_backend == "json"
    assert s.console_enabled is True
    assert s.storage_key == "tasks"


def test_explicit_storage_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_STORAGE_PATH", str(tmp_path / "mine.json"))
    assert Settings.from_env().storage_path == tmp_path / "mine.json"


def test_get_settings_reads_dotenv_from_working_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TASKPAD_STORAGE_KEY=fromdotenv\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        assert get_settings().storage_key == "fromdotenv"
    finally:
        os.environ.pop("TASKPAD_STORAGE_KEY", None)
        get_settings.cache_clear()


def test_real_env_wins_over_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TASKPAD_STORAGE_KEY=fromdotenv\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASKPAD_STORAGE_KEY", "fromenv")
    get_settings.cache_clear()
    try:
        assert get_settings().storage_key == "fromenv"
    finally:
        get_settings.cache_clear()
