# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so connectors and commands can read them.
    settings: object

    tasks: TaskList
    task_store: TaskRepo
