# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and exits.

Exit status:
- 0: the command ran (user input mistakes included)
- 1: the task file could not be read or written (diagnostic on stderr)
- 2: the task file is corrupted
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStoreCorruptedError, TaskStoreError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CORRUPTED = 2


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.debug("Starting %s argv=%r", getattr(settings, "app_name", "todo_cli"), argv)

    state = create_initial_state(settings=settings)

    try:
        output = command_registry.handle(state, argv)
    except TaskStoreCorruptedError as e:
        logger.debug("Task file is corrupted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CORRUPTED
    except (TaskStoreError, OSError) as e:
        logger.debug("Task file could not be read or written: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print(output)
    return EXIT_OK


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
