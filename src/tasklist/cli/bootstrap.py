# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- turns settings into concrete adapters (clock, JSON store),
- loads the task list into AppState,
- writes it back at shutdown.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.clock import SystemClock
from ..core.ports import Clock, TaskRepo
from ..core.state import AppState
from ..tasks.errors import TaskStoreError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_adapters(settings: Settings | None = None) -> tuple[SystemClock, TaskStore]:
    if settings is None:
        settings = get_settings()
    return SystemClock(settings.timezone), TaskStore(settings.tasks_path)


def create_initial_state(
    *,
    clock: Clock,
    store: TaskRepo,
    color: bool = True,
    autosave: bool = False,
) -> AppState:
    """
    Load the persisted tasks and wrap them in a fresh AppState.

    Raises TaskStoreError when the file exists but cannot be used.
    """
    tasks = TaskList(store.load())
    return AppState(tasks=tasks, store=store, clock=clock, color=color, autosave=autosave)


def save_tasks(state: AppState) -> bool:
    """Final save. Runs even for an empty list; returns False on failure."""
    try:
        state.store.save(state.tasks)
    except TaskStoreError:
        logger.error("Tasks were not saved.")
        return False
    return True
