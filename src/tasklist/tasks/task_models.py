# src/tasklist/tasks/task_models.py

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum, StrEnum


class ColorCode(Enum):
    """ANSI background colors used for the one-cell swatches in the table."""

    RED = 101  # light red
    GREEN = 102  # light green
    YELLOW = 103
    BLUE = 104  # light blue

    def swatch(self) -> str:
        return f"\033[{self.value}m \033[0m"


class Priority(StrEnum):
    """
    Task priority, stored and typed as its single-letter code.

    C = critical, H = high, N = normal, L = low.
    """

    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def color(self) -> ColorCode:
        return _PRIORITY_COLORS[self]


class DueState(StrEnum):
    IN_TIME = "I"
    TODAY = "T"
    OVERDUE = "O"

    @property
    def color(self) -> ColorCode:
        return _DUE_COLORS[self]


_PRIORITY_COLORS = {
    Priority.CRITICAL: ColorCode.RED,
    Priority.HIGH: ColorCode.YELLOW,
    Priority.NORMAL: ColorCode.GREEN,
    Priority.LOW: ColorCode.BLUE,
}

_DUE_COLORS = {
    DueState.IN_TIME: ColorCode.GREEN,
    DueState.TODAY: ColorCode.YELLOW,
    DueState.OVERDUE: ColorCode.RED,
}


class Field(StrEnum):
    """Editable task fields; the value is the token the user types."""

    PRIORITY = "priority"
    DATE = "date"
    TIME = "time"
    DESCRIPTION = "task"

    @property
    def attr(self) -> str:
        return "description" if self is Field.DESCRIPTION else self.name.lower()


def classify_due(due: dt.date, today: dt.date) -> DueState:
    days = (due - today).days
    if days > 0:
        return DueState.IN_TIME
    if days == 0:
        return DueState.TODAY
    return DueState.OVERDUE


@dataclass(slots=True, frozen=True)
class Task:
    """
    A single task record.

    Immutable; the constructor enforces the record invariants, and changes go
    through `dataclasses.replace` so they are checked again. Values coming
    from the validators in `validators.py` always satisfy them.
    """

    date: dt.date
    time: dt.time
    priority: Priority
    description: tuple[str, ...]

    def __post_init__(self) -> None:
        # datetime is a subclass of date; only plain dates are accepted.
        if not isinstance(self.date, dt.date) or isinstance(self.date, dt.datetime):
            raise ValueError(f"date must be a datetime.date, got {self.date!r}")
        if not isinstance(self.time, dt.time):
            raise ValueError(f"time must be a datetime.time, got {self.time!r}")
        object.__setattr__(self, "time", self.time.replace(second=0, microsecond=0, tzinfo=None))
        object.__setattr__(self, "priority", Priority(self.priority))
        object.__setattr__(self, "description", tuple(self.description))
        if not self.description:
            raise ValueError("description must have at least one line")
        if any(not line.strip() for line in self.description):
            raise ValueError("description lines must not be blank")

    def due_state(self, today: dt.date) -> DueState:
        return classify_due(self.date, today)
