# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Everything a command handler may touch; settings are consumed in bootstrap.
    task_store: TaskStore
