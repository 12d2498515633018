# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- builds the file-backed TaskStore and hydrates the session TaskList from it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore, TaskStoreError

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def load_tasks(store: TaskRepo) -> TaskList:
    """Load the saved list; an unreadable store falls back to an empty list."""
    try:
        return store.load()
    except TaskStoreError:
        logger.exception("Failed to load tasks; starting with an empty list.")
        return TaskList()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    return AppState(
        settings=settings,
        tasks=load_tasks(store),
        task_store=store,
    )
