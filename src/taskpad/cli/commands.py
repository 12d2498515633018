# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

COMMAND_SYNTAX = (
    "Task commands:\n"
    "  todo <description>\n"
    "  deadline <description> /by <MMM DD YYYY>\n"
    "  event <description> /at <when>\n"
    "  list\n"
    "  done <n>      (n = 1..9)\n"
    "  delete <n>    (n = 1..9)\n"
    "  bye"
)


class CommandRegistry:
    """Console meta-command registry (/help, /status, ...); task commands go to the parser."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a meta-command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Meta-command /%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return f"{COMMAND_SYNTAX}\n\n{registry.build_help()}"


def cmd_status(state: AppState, args: list[str]) -> str:
    done = sum(1 for t in state.tasks if t.done)
    store_path = getattr(state.task_store, "path", None)
    return (
        "Status:\n"
        f"  Tasks: {state.tasks.size()} ({done} done)\n"
        f"  Store: {store_path if store_path is not None else '(in memory)'}"
    )


registry.register("help", cmd_help, help_text="Show task and console commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count and store location.")
