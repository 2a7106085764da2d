# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The command loop depends on Protocols instead of concrete implementations,
so the clock, the terminal and the storage file can be swapped for fakes in
tests.
"""

import datetime as dt
from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class Clock(Protocol):
    """Source of "today" for due-state classification."""
    def today(self) -> dt.date: ...


class Console(Protocol):
    """
    Line-based terminal port.

    read_line() raises EOFError when input is exhausted (same as input()).
    """
    def read_line(self) -> str: ...
    def write_line(self, text: str = "") -> None: ...


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
