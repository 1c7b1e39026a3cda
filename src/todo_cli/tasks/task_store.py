# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Base class for storage-layer failures."""


class TaskStoreCorruptedError(TaskStoreError):
    """The storage file exists but does not hold a valid task list."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}. The file might be corrupted: {reason}")


class TaskStore:
    """
    JSON file task store.

    The whole list is read on load() and rewritten on save():
    - missing file -> empty list
    - unparsable file -> TaskStoreCorruptedError (the file is never touched)
    - any other OSError propagates to the caller

    No locking: concurrent writers race and the last one wins.
    """

    def __init__(self, path: str | Path = "todos.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("TaskStore: %s does not exist yet, starting empty", self._path)
            return []

        try:
            raw = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("TaskStore: unreadable content in %s: %s", self._path, e)
            raise TaskStoreCorruptedError(self._path, str(e)) from e

        if not isinstance(raw, list):
            logger.debug("TaskStore: %s does not contain a JSON array", self._path)
            raise TaskStoreCorruptedError(self._path, "top-level value is not an array")

        tasks: list[Task] = []
        for i, item in enumerate(raw, start=1):
            try:
                tasks.append(Task.from_record(item))
            except ValueError as e:
                logger.debug("TaskStore: bad record #%d in %s: %s", i, self._path, e)
                raise TaskStoreCorruptedError(self._path, f"record #{i}: {e}") from e

        logger.debug("TaskStore: loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        records = [t.to_record() for t in tasks]
        try:
            payload = json.dumps(records, ensure_ascii=False, indent=2).encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskStoreError(f"Task text cannot be stored as UTF-8: {e}") from e

        self._path.parent.mkdir(parents=True, exist_ok=True)

        # Write next to the target, then swap in one step.
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(payload)
            os.replace(tmp, self._path)
        except OSError:
            if tmp.exists():
                tmp.unlink()
            raise

        logger.debug("TaskStore: saved %d tasks to %s", len(records), self._path)
