# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns Settings into an AppState
with a concrete TaskStore.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.db_path)
    logger.debug("Using task file %s", store.path)
    return AppState(task_store=store)
