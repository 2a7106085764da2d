# src/tasklist/cli/main.py

"""
CLI entrypoint.

`run()` takes its collaborators as arguments (clock, store, console) so a
whole session can be driven from tests; `main()` wires the real ones from
settings and configures logging.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import StdConsole, run_console_loop
from ..core.ports import Clock, Console, TaskRepo
from ..logging_setup import setup_logging
from ..tasks.errors import TaskStoreError
from .bootstrap import build_adapters, create_initial_state, save_tasks

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1


def run(
    clock: Clock,
    store: TaskRepo,
    console: Console,
    *,
    color: bool = True,
    autosave: bool = False,
) -> int:
    try:
        state = create_initial_state(clock=clock, store=store, color=color, autosave=autosave)
    except TaskStoreError as e:
        # Refuse to start: the final save would overwrite the unreadable file.
        console.write_line(str(e))
        return EXIT_STORAGE_ERROR

    run_console_loop(state, console)

    if not save_tasks(state):
        console.write_line("The tasks could not be saved")
        return EXIT_STORAGE_ERROR
    return EXIT_OK


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)", settings.app_name, settings.tasks_path)

    clock, store = build_adapters(settings)
    code = run(clock, store, StdConsole(), color=settings.color, autosave=settings.autosave)

    logger.info("Bye (exit code %d).", code)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
