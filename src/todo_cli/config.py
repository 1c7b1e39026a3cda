# src/todo_cli/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per process.
- Defaults reproduce the classic behavior: tasks live in ./todos.json.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DB_PATH = Path("todos.json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo_cli")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_dir = _env_path(_k("LOG_DIR"), None)
        db_path = _env_path(_k("DB_PATH"), DEFAULT_DB_PATH) or DEFAULT_DB_PATH

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            db_path=db_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        # .env never overrides variables already set in the real environment.
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
