# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.tasks.task_models import ToDo


def test_command_registry_routes_handlers_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("ping", handler, "ping", aliases=["p"])

    assert reg.handle(state, "/ping a b") == "ok"
    assert reg.handle(state, "/P") == "ok"
    assert called == [["a", "b"], []]


def test_command_registry_unknown_empty_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "todo read book") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_task_syntax_and_meta_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    assert "deadline <description> /by <MMM DD YYYY>" in text
    assert "/status" in text


def test_status_reports_counts_and_store_path(state) -> None:
    state.tasks.append(ToDo("a"))
    state.tasks.append(ToDo("b", done=True))

    text = registry.handle(state, "/status") or ""

    assert "Tasks: 2 (1 done)" in text
    assert str(state.task_store.path) in text
