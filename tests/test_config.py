# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.config import DEFAULT_DB_PATH, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_APP_NAME", "TODO_LOG_LEVEL", "TODO_LOG_DIR", "TODO_DB_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.db_path == DEFAULT_DB_PATH == Path("todos.json")
    assert s.log_level == "WARNING"
    assert s.log_dir is None
    assert s.app_name == "todo_cli"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DB_PATH", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_DIR", str(tmp_path / "logs"))

    s = Settings.from_env()
    assert s.db_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path / "logs"


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_DB_PATH", "   ")
    monkeypatch.setenv("TODO_APP_NAME", "")

    s = Settings.from_env()
    assert s.db_path == DEFAULT_DB_PATH
    assert s.app_name == "todo_cli"
