# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI bootstrap.

    A SimpleNamespace keeps tests independent of the real environment / .env.
    """
    return SimpleNamespace(
        app_name="todo_cli-test",
        log_level="WARNING",
        log_dir=None,
        db_path=tmp_path / "todos.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.db_path)


@pytest.fixture()
def state(store: TaskStore) -> AppState:
    return AppState(task_store=store)
