# src/taskpad/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered, in-memory task collection for one session.

    Positions are 0-based here; the user-facing numbering is position + 1.
    Negative positions are rejected instead of wrapping around from the end.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index out of range: {index}")
        return index

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def size(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def remove_at(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def mark_done_at(self, index: int) -> Task:
        task = self._tasks[self._check(index)]
        task.mark_done()
        return task

    def iterate(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __iter__(self) -> Iterator[Task]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
