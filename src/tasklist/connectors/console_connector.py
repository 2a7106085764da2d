# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import ACTION_PROMPT, MUTATING_ACTIONS, parse_action
from ..cli.commands import registry as command_registry
from ..cli.prompts import ask
from ..core.ports import Console
from ..core.state import AppState
from ..tasks.errors import TaskListError

logger = logging.getLogger(__name__)


class StdConsole:
    """Console port backed by input() and a text stream (stdout by default)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def read_line(self) -> str:
        return input()

    def write_line(self, text: str = "") -> None:
        print(text, file=self._out or sys.stdout, flush=True)


def run_console_loop(state: AppState, console: Console) -> None:
    """
    Read one action per cycle and dispatch it until `end`, EOF or Ctrl+C.

    Errors raised by a handler are reported and the loop goes on; the
    task list itself is only changed by handlers that complete. Autosave
    checkpoints run under the same guard as the handlers.
    """
    logger.info("Console loop started (%d tasks).", len(state.tasks))

    while state.running:
        try:
            action = ask(console, ACTION_PROMPT, parse_action)
            handler = command_registry.handler_for(action)
            handler(state, console)
            if state.autosave and action in MUTATING_ACTIONS:
                state.store.save(state.tasks)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write_line()
            break
        except TaskListError as e:
            logger.debug("Action aborted: %s", e)
            console.write_line(str(e))
        except Exception:
            logger.exception("Action handler crashed.")
            console.write_line("Internal error while handling an action.")

    logger.info("Console loop finished.")
