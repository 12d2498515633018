# src/taskpad/core/parser.py

"""
Command line -> Instruction.

Keyword-first and substring-based, not a strict grammar:
- "list" / "bye" must match exactly
- other keywords only need to appear somewhere in the line, checked in the fixed order
  todo, deadline, event, done, delete; the first match wins
- the text after a keyword is taken from position len(keyword), wherever the keyword occurred
- done/delete read only the last character as the task number (so positions 1-9)
"""

from __future__ import annotations

import string

from . import instructions as ins

KW_LIST = "list"
KW_BYE = "bye"
KW_TODO = "todo"
KW_DEADLINE = "deadline"
KW_EVENT = "event"
KW_DONE = "done"
KW_DELETE = "delete"

# Splits description from the time field ("... /by Jun 01 2024", "... /at Mon 2pm").
TIME_MARKER = "/"
# Characters skipped after the marker: the "by " / "at " keyword.
TIME_KEYWORD_WIDTH = 3


def _remainder(line: str, keyword: str) -> str:
    return line[len(keyword):]


def _split_time(remainder: str) -> tuple[str, str]:
    """
    Split "<description> /xx <time>" at the first marker.

    Returns (trimmed description, verbatim time). Without a marker the time is empty.
    """
    pos = remainder.find(TIME_MARKER)
    if pos < 0:
        return remainder.strip(), ""
    description = remainder[:pos].strip()
    time_text = remainder[pos + len(TIME_MARKER) + TIME_KEYWORD_WIDTH:]
    return description, time_text


def _trailing_index(line: str) -> int | None:
    """0-based index from the last character, or None if it is not a digit."""
    if not line or line[-1] not in string.digits:
        return None
    return int(line[-1]) - 1


def parse(line: str) -> ins.Instruction:
    """Parse one command line. Never raises; unknown input gives Invalid."""
    if line == KW_LIST:
        return ins.List()
    if line == KW_BYE:
        return ins.Bye()

    if KW_TODO in line:
        return ins.AddToDo(_remainder(line, KW_TODO))

    if KW_DEADLINE in line:
        description, by = _split_time(_remainder(line, KW_DEADLINE))
        return ins.AddDeadline(description, by)

    if KW_EVENT in line:
        description, at = _split_time(_remainder(line, KW_EVENT))
        return ins.AddEvent(description, at)

    if KW_DONE in line:
        return ins.MarkDone(_trailing_index(line))
    if KW_DELETE in line:
        return ins.Delete(_trailing_index(line))

    return ins.Invalid(line)
