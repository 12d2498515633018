# src/taskpad/core/executor.py

"""
Applies one Instruction to the session's TaskList and builds the reply text.

Persistence rule: the store is rewritten after every change to the list
(add / done / delete) and once more on "bye". Listing, rejected input and
out-of-range indices never touch the store.
"""

from __future__ import annotations

import logging

from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, ToDo, parse_deadline_date
from ..tasks.task_store import TaskStoreError, can_store_text, can_store_timing
from . import instructions as ins
from .parser import parse
from .ports import TaskRepo

logger = logging.getLogger(__name__)

LIST_BANNER = "Here are the tasks in your list:"
FAREWELL = "Bye. Hope to see you again soon!"
ADDED = "Got it. I've added this task:"
MARKED_DONE = "Nice! I've marked this task as done:"
REMOVED = "Noted. I've removed this task:"

NOT_FOUND = "Sorry item was not recently added and hence can't be changed! :("
UNKNOWN_COMMAND = "OOPS!!! I'm sorry, but I don't know what that means :-("
BAD_INDEX = "OOPS!!! I'm sorry, but I don't understand which task you mean :-("
BAD_DEADLINE_DATE = "OOPS!!! Please give the deadline date as MMM DD YYYY, e.g. /by Jun 01 2024."
SAVE_FAILED = "(Warning: could not save tasks to disk.)"
UNSTORABLE_TEXT = "OOPS!!! I can't save that task: it contains characters the task file cannot hold."
UNSTORABLE_TIMING = "OOPS!!! An event time cannot contain ' | '."

EMPTY_TODO = "OOPS!!! The description of a todo cannot be empty."
EMPTY_DEADLINE = "OOPS!!! The description of a deadline cannot be empty."
EMPTY_EVENT = "OOPS!!! The description of an event cannot be empty."


def _count_line(tasks: TaskList) -> str:
    n = tasks.size()
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


def _persist(tasks: TaskList, store: TaskRepo) -> str | None:
    """Save the list; on failure log it and return a warning line for the reply."""
    try:
        store.save(tasks)
    except (TaskStoreError, OSError, UnicodeError):
        logger.exception("Failed to save tasks; keeping the change in memory only.")
        return SAVE_FAILED
    return None


def _reply_after_change(text: str, tasks: TaskList, store: TaskRepo) -> str:
    warning = _persist(tasks, store)
    return text if warning is None else f"{text}\n{warning}"


def _add(task: Task, tasks: TaskList, store: TaskRepo) -> str:
    tasks.append(task)
    logger.debug("Added %s task #%d", task.type.name, tasks.size())
    text = f"{ADDED}\n  {task.render()}\n{_count_line(tasks)}"
    return _reply_after_change(text, tasks, store)


def render_list(tasks: TaskList) -> str:
    lines = [LIST_BANNER]
    for pos, task in enumerate(tasks.iterate(), start=1):
        lines.append(f"{pos}. {task.render()}")
    return "\n".join(lines)


def execute(instruction: ins.Instruction, tasks: TaskList, store: TaskRepo) -> str:
    """Run one instruction against `tasks`; return the user-facing reply."""
    if isinstance(instruction, ins.List):
        return render_list(tasks)

    if isinstance(instruction, ins.Bye):
        return _reply_after_change(FAREWELL, tasks, store)

    if isinstance(instruction, ins.AddToDo):
        if not instruction.description.strip():
            return EMPTY_TODO
        if not can_store_text(instruction.description):
            return UNSTORABLE_TEXT
        return _add(ToDo(instruction.description), tasks, store)

    if isinstance(instruction, ins.AddDeadline):
        if not instruction.description.strip():
            return EMPTY_DEADLINE
        if not can_store_text(instruction.description):
            return UNSTORABLE_TEXT
        try:
            by = parse_deadline_date(instruction.by)
        except ValueError:
            logger.info("Rejected deadline date %r", instruction.by)
            return BAD_DEADLINE_DATE
        return _add(Deadline(instruction.description, by), tasks, store)

    if isinstance(instruction, ins.AddEvent):
        if not instruction.description.strip():
            return EMPTY_EVENT
        if not (can_store_text(instruction.description) and can_store_text(instruction.at)):
            return UNSTORABLE_TEXT
        if not can_store_timing(instruction.at):
            return UNSTORABLE_TIMING
        return _add(Event(instruction.description, instruction.at), tasks, store)

    if isinstance(instruction, ins.MarkDone):
        if instruction.index is None:
            return BAD_INDEX
        try:
            task = tasks.mark_done_at(instruction.index)
        except IndexError:
            logger.info("done: no task at position %d (size=%d)", instruction.index + 1, tasks.size())
            return NOT_FOUND
        text = f"{MARKED_DONE}\n  [{task.status_icon}] {task.description}"
        return _reply_after_change(text, tasks, store)

    if isinstance(instruction, ins.Delete):
        if instruction.index is None:
            return BAD_INDEX
        try:
            removed = tasks.remove_at(instruction.index)
        except IndexError:
            logger.info("delete: no task at position %d (size=%d)", instruction.index + 1, tasks.size())
            return NOT_FOUND
        text = f"{REMOVED}\n  {removed.render()}\n{_count_line(tasks)}"
        return _reply_after_change(text, tasks, store)

    if isinstance(instruction, ins.Invalid):
        logger.debug("Unrecognised command: %r", instruction.original_text)
        return UNKNOWN_COMMAND

    raise TypeError(f"unhandled instruction: {instruction!r}")


def handle_line(line: str, tasks: TaskList, store: TaskRepo) -> str:
    """Parse and execute one raw command line."""
    return execute(parse(line), tasks, store)
