# src/taskpad/core/instructions.py

"""
Parsed form of one command line.

Every variant is immutable and consumed once by the executor.
Indices are 0-based; None marks a malformed (non-digit) index.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class List:
    pass


@dataclass(slots=True, frozen=True)
class Bye:
    pass


@dataclass(slots=True, frozen=True)
class AddToDo:
    description: str


@dataclass(slots=True, frozen=True)
class AddDeadline:
    description: str
    by: str


@dataclass(slots=True, frozen=True)
class AddEvent:
    description: str
    at: str


@dataclass(slots=True, frozen=True)
class MarkDone:
    index: int | None


@dataclass(slots=True, frozen=True)
class Delete:
    index: int | None


@dataclass(slots=True, frozen=True)
class Invalid:
    original_text: str


Instruction = List | Bye | AddToDo | AddDeadline | AddEvent | MarkDone | Delete | Invalid
