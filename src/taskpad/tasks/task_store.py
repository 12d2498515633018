# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_list import TaskList
from .task_models import (
    FIELD_SEPARATOR,
    Deadline,
    Event,
    Task,
    TaskType,
    ToDo,
    parse_deadline_date,
)

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """The store file could not be read or written."""


def can_store_text(text: str) -> bool:
    """True if `text` fits inside one UTF-8 store line."""
    if "\n" in text or "\r" in text:
        return False
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def can_store_timing(at: str) -> bool:
    """
    True if an event timing survives encode/decode.

    The timing is the last field and is split off at the last separator, so the
    separator may not reappear anywhere in " | <at>" after its first position.
    """
    return can_store_text(at) and (FIELD_SEPARATOR + at).find(FIELD_SEPARATOR, 1) < 0


def encode_task(task: Task) -> str:
    """One store line for a task (no trailing newline)."""
    return task.render()


def decode_task(line: str) -> Task:
    """
    Inverse of encode_task.

    Layout: "<T|D|E> | <0|1> | <description>[ | <by|at>]".
    The variant field is split off from the right, so descriptions may contain the separator.
    Raises ValueError on malformed input.
    """
    raw = line.rstrip("\r\n")
    parts = raw.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        raise ValueError(f"expected at least 3 fields, got {len(parts)}")

    tag, flag, rest = parts
    try:
        task_type = TaskType(tag.strip())
    except ValueError as e:
        raise ValueError(f"unknown task type {tag!r}") from e

    flag = flag.strip()
    if flag not in ("0", "1"):
        raise ValueError(f"bad done flag {flag!r}")
    done = flag == "1"

    if task_type is TaskType.TODO:
        return ToDo(rest, done=done)

    description, sep, detail = rest.rpartition(FIELD_SEPARATOR)
    if not sep:
        raise ValueError(f"missing {'date' if task_type is TaskType.DEADLINE else 'timing'} field")

    if task_type is TaskType.DEADLINE:
        return Deadline(description, parse_deadline_date(detail), done=done)
    if task_type is TaskType.EVENT:
        return Event(description, detail, done=done)

    raise ValueError(f"unhandled task type {task_type!r}")


class TaskStore:
    """
    Flat text-file task store.

    One task per line, same text as the task rendering.

    Write policy:
    - every save rewrites the whole file from the in-memory list
    - the new content goes to "<name>.tmp" first and is moved over the target with os.replace,
      so a failed write leaves the previous file intact
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def _tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".tmp")

    def load(self) -> TaskList:
        """
        Read the store file into a TaskList.

        - missing file -> empty list
        - blank lines are ignored
        - malformed lines are skipped with a warning
        """
        tasks = TaskList()
        if not self._path.exists():
            logger.info("No task file at %s; starting with an empty list.", self._path)
            return tasks

        skipped = 0
        try:
            # Binary mode: each line is decoded on its own, so one bad byte only costs that line.
            with self._path.open("rb") as fh:
                for lineno, raw in enumerate(fh, start=1):
                    if not raw.strip():
                        continue
                    try:
                        # UnicodeDecodeError is a ValueError.
                        tasks.append(decode_task(raw.decode("utf-8")))
                    except ValueError as e:
                        skipped += 1
                        logger.warning(
                            "Skipping malformed line %d in %s: %s", lineno, self._path, e
                        )
        except OSError as e:
            raise TaskStoreError(f"failed to read tasks from {self._path}") from e

        logger.info("Loaded %d tasks from %s (skipped=%d)", tasks.size(), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the store file so it mirrors `tasks` exactly (same order)."""
        tmp = self._tmp_path()
        count = 0
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as fh:
                for task in tasks:
                    fh.write(encode_task(task) + "\n")
                    count += 1
            os.replace(tmp, self._path)
        except (OSError, UnicodeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(f"failed to save tasks to {self._path}") from e

        logger.debug("Saved %d tasks to %s", count, self._path)
