# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every value has a default; a bad value falls back to it instead of failing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKPAD"

STORAGE_BACKENDS = ("json", "sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "yes", "y", "on"}:
        return True
    if val in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str

    # ---- View defaults ----
    sort_newest_first: bool

    # ---- Connectors ----
    console_enabled: bool

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "json")
        default_file = "storage.sqlite3" if storage_backend == "sqlite" else "storage.json"
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / default_file)
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        sort_newest_first = _env_bool(_k("SORT_NEWEST_FIRST"), True)
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            sort_newest_first=sort_newest_first,
            console_enabled=console_enabled,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Look for .env from the working directory, not from this installed module.
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
