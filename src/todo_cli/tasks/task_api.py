# src/todo_cli/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class CompletionStatus(StrEnum):
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class CompletionResult:
    status: CompletionStatus
    number: int
    task: Task | None = None


def add_task(store: TaskStore, description: str) -> Task:
    """Append a new incomplete task and persist the whole list."""
    tasks = store.load()
    task = Task(description=description, completed=False)
    tasks.append(task)
    store.save(tasks)
    logger.info("Added task #%d: %s", len(tasks), description)
    return task


def complete_task(store: TaskStore, number: int) -> CompletionResult:
    """
    Mark the task at 1-based position `number` as complete.

    Saves only when the flag actually changes.
    """
    if number < 1:
        raise ValueError("task number must be 1 or greater")

    tasks = store.load()
    if number > len(tasks):
        return CompletionResult(CompletionStatus.NOT_FOUND, number)

    task = tasks[number - 1]
    if task.completed:
        return CompletionResult(CompletionStatus.ALREADY_COMPLETED, number, task)

    task.completed = True
    store.save(tasks)
    logger.info("Completed task #%d: %s", number, task.description)
    return CompletionResult(CompletionStatus.COMPLETED, number, task)
