# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import Clock, TaskRepo


@dataclass
class AppState:
    """Everything one interactive session works on; owned by the command loop."""

    tasks: TaskList
    store: TaskRepo
    clock: Clock

    color: bool = True
    autosave: bool = False
    running: bool = True
