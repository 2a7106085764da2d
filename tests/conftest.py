# tests/conftest.py

from __future__ import annotations

import datetime as dt
from collections.abc import Callable

import pytest

from tasklist.tasks.task_models import Priority, Task

from .fakes import FixedClock

TODAY = dt.date(2024, 1, 15)


@pytest.fixture()
def today() -> dt.date:
    return TODAY


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """Factory with sensible defaults; override any field by keyword."""

    def _make(
        description: str | tuple[str, ...] = "Buy milk",
        *,
        date: dt.date = TODAY,
        time: dt.time = dt.time(9, 0),
        priority: Priority = Priority.NORMAL,
    ) -> Task:
        if isinstance(description, str):
            description = (description,)
        return Task(date=date, time=time, priority=priority, description=description)

    return _make
