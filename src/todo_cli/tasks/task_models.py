# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    There is no id: a task is referred to by its 1-based position
    in the stored list, recomputed on every command.
    """

    description: str
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        # On-disk key is "task" for compatibility with existing todos.json files.
        return {"task": self.description, "completed": self.completed}

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """Build a Task from a decoded JSON object. Raises ValueError on a malformed record."""
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")
        description = raw.get("task")
        completed = raw.get("completed")
        if not isinstance(description, str):
            raise ValueError("field 'task' must be a string")
        if not isinstance(completed, bool):
            raise ValueError("field 'completed' must be a boolean")
        return cls(description=description, completed=completed)
