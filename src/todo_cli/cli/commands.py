# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_api import CompletionStatus, add_task, complete_task

CommandHandler = Callable[[AppState, list[str]], str]

PROG = "todo_cli"

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str


class CommandRegistry:
    """
    Command-word dispatcher: `todo_cli <command> [args...]`.

    Command words match exactly (case-sensitive). Handlers receive the
    remaining arguments and return the text to print.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str, usage: str | None = None) -> None:
        self._commands[name] = _Command(handler=handler, usage=usage or name, help_text=help_text)

    def handle(self, state: AppState, args: list[str]) -> str:
        """
        Dispatch `args` (program name already stripped).

        No command word means help. Unknown words get an error line plus help.
        Storage errors from handlers are not caught here.
        """
        if not args:
            return self.build_help()

        name, rest = args[0], args[1:]
        command = self._commands.get(name)
        if command is None:
            logger.debug("Unknown command %r", name)
            return f"Error: Unknown command '{name}'\n{self.build_help()}"

        logger.debug("Dispatching %s with %d argument(s)", name, len(rest))
        return command.handler(state, rest)

    def build_help(self) -> str:
        lines = [
            "",
            "To-Do List Manager",
            f"Usage: {PROG} <COMMAND> [ARGUMENTS]",
            "",
            "Commands:",
        ]
        for command in self._commands.values():
            lines.append(f"  {command.usage.ljust(15)}- {command.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, args: list[str]) -> str:
    """add <text...>: the whole remainder, space-joined, becomes one task."""
    if not args:
        return (
            "Error: Missing task description for 'add' command.\n"
            f'Example: {PROG} add "Buy milk"'
        )

    task = add_task(state.task_store, " ".join(args))
    return f"Adding task: {task.description}"


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.load()
    if not tasks:
        return "No tasks yet! Add one with the 'add' command."

    lines = ["--- To-Do List ---"]
    for i, task in enumerate(tasks, start=1):
        status = "[x]" if task.completed else "[ ]"
        lines.append(f"{status} {i}. {task.description}")
    lines.append("------------------")
    return "\n".join(lines)


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    done <number>

    Only the first argument is looked at. Bad input is reported, never raised.
    """
    if not args:
        return f"Error: Missing task number for 'done' command.\nExample: {PROG} done 2"

    raw = args[0]
    if not _NUMBER_RE.fullmatch(raw):
        return f"Error: '{raw}' is not a valid number."

    try:
        number = int(raw)
    except ValueError:
        # More digits than int() will convert.
        return f"Error: '{raw}' is not a valid number."
    if number < 1:
        return "Error: Task number must be 1 or greater."

    result = complete_task(state.task_store, number)
    if result.status is CompletionStatus.COMPLETED and result.task is not None:
        return f"Completed task {number}: {result.task.description}"
    if result.status is CompletionStatus.ALREADY_COMPLETED:
        return f"Task {number} was already completed."
    return f"Error: No task found with number {number}."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


registry.register("add", cmd_add, help_text="Adds a new task to the list.", usage='add "<task>"')
registry.register("list", cmd_list, help_text="Lists all tasks.")
registry.register("done", cmd_done, help_text="Marks a task as complete.", usage="done <number>")
registry.register("help", cmd_help, help_text="Shows this help message.")
