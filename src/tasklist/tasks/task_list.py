# src/tasklist/tasks/task_list.py

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any

from .errors import EmptyCollection, IndexOutOfRange
from .render import render_table
from .task_models import Field, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, in-memory task collection.

    Positions are 1-based: position = list index + 1, so deleting a task
    shifts every later task down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        logger.debug("Task added at position %d", len(self._tasks))
        return len(self._tasks)

    def _index(self, position: int) -> int:
        if not 1 <= position <= len(self._tasks):
            raise IndexOutOfRange()
        return position - 1

    def get(self, position: int) -> Task:
        return self._tasks[self._index(position)]

    def edit(self, position: int, field: Field, value: Any) -> Task:
        """Replace exactly one field of the task at `position`."""
        idx = self._index(position)
        updated = replace(self._tasks[idx], **{field.attr: value})
        self._tasks[idx] = updated
        logger.debug("Task %d: %s changed", position, field.attr)
        return updated

    def delete(self, position: int) -> Task:
        removed = self._tasks.pop(self._index(position))
        logger.debug("Task %d deleted (%d left)", position, len(self._tasks))
        return removed

    def table(self, today: dt.date, *, color: bool = True) -> list[str]:
        if not self._tasks:
            raise EmptyCollection()
        return render_table(self._tasks, today, color=color)
