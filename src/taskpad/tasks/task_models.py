# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

# Rendering / store line layout: "<tag> | <0|1> | <description>[ | <by|at>]"
FIELD_SEPARATOR = " | "

# Human input formats accepted for deadline dates, tried in order.
DEADLINE_INPUT_FORMATS = ("%b %d %Y", "%B %d %Y")


class TaskType(StrEnum):
    """
    Task variant tag.

    The value is the one-letter tag written in the rendering and in the store file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_deadline_date(raw: str) -> date:
    """
    Normalize a deadline date to a calendar date.

    Accepts:
    - "MMM DD YYYY" as typed by the user ("Jun 01 2024", "Jun 1 2024", "June 1 2024")
    - canonical ISO "YYYY-MM-DD" (the form the store writes back)

    Raises ValueError for anything else.
    """
    s = (raw or "").strip()
    if not s:
        raise ValueError("deadline date is empty")

    for fmt in DEADLINE_INPUT_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue

    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise ValueError(f"unrecognised deadline date: {s!r}") from e


def _clean_description(description: str) -> str:
    s = (description or "").strip()
    if not s:
        raise ValueError("description is required")
    return s


class _Completable:
    """Completion state and rendering shared by every task variant."""

    __slots__ = ()

    type: TaskType
    description: str
    done: bool

    def mark_done(self) -> None:
        # Idempotent: marking a finished task again is not an error.
        self.done = True

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def detail(self) -> str | None:
        """Variant-specific trailing field (deadline date / event timing), if any."""
        return None

    def render(self) -> str:
        parts = [self.type.value, "1" if self.done else "0", self.description]
        extra = self.detail()
        if extra is not None:
            parts.append(extra)
        return FIELD_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class ToDo(_Completable):
    description: str
    done: bool = False

    type = TaskType.TODO

    def __post_init__(self) -> None:
        self.description = _clean_description(self.description)


@dataclass(slots=True)
class Deadline(_Completable):
    description: str
    by: date
    done: bool = False

    type = TaskType.DEADLINE

    def __post_init__(self) -> None:
        self.description = _clean_description(self.description)
        if isinstance(self.by, datetime):
            self.by = self.by.date()
        elif not isinstance(self.by, date):
            self.by = parse_deadline_date(str(self.by))

    def detail(self) -> str | None:
        return self.by.isoformat()


@dataclass(slots=True)
class Event(_Completable):
    description: str
    at: str
    done: bool = False

    type = TaskType.EVENT

    def __post_init__(self) -> None:
        self.description = _clean_description(self.description)

    def detail(self) -> str | None:
        return self.at


Task = ToDo | Deadline | Event
