# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The executor depends on this Protocol instead of the concrete file store,
so tests can swap in an in-memory or failing store.
"""

from typing import Iterable, Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable load/save of the whole task list."""

    def load(self) -> TaskList: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
