# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core import instructions as ins
from ..core.executor import execute
from ..core.parser import parse
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    """
    Read command lines from stdin and print one reply per line.

    Stops after the reply to "bye", on EOF or on Ctrl+C.
    """
    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    print(f"Hello! I'm {app_name}. What can I do for you? (/help for commands)")

    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break
        except UnicodeDecodeError:
            logger.warning("Console input could not be decoded; line ignored.", exc_info=True)
            print("Sorry, I could not read that line (unsupported characters).")
            continue

        if not line:
            continue

        # Meta-commands (/help, /status)
        try:
            cmd_response = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            print(cmd_response)
            continue

        instruction = parse(line)
        print(execute(instruction, state.tasks, state.task_store))

        if isinstance(instruction, ins.Bye):
            logger.info("Bye received.")
            break

    logger.info("Console connector finished.")
