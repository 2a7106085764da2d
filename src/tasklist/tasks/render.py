# src/tasklist/tasks/render.py

from __future__ import annotations

"""
Fixed-width table rendering.

Layout (one task, description wrapped over two rows):

    | 1  | 2024-01-15 | 09:00 | P | D |first 44 characters of the description...|
    |    |            |       |   |   |rest of it, padded with spaces            |
    +----+------------+-------+---+---+--------------------------------------------+

P and D are one-cell color swatches (priority and due state). Each original
description line is wrapped on its own; chunks never cross line boundaries.
"""

import datetime as dt
from collections.abc import Iterable

from .task_models import ColorCode, Task
from .validators import format_date, format_time

COLUMN_WIDTH = 44

HORIZONTAL_RULE = "+----+------------+-------+---+---+--------------------------------------------+"
HEADER_TEXT = "| N  |    Date    | Time  | P | D |                   Task                     |"
EMPTY_CELLS = "|    |            |       |   |   |"
HEADER = (HORIZONTAL_RULE, HEADER_TEXT, HORIZONTAL_RULE)


def chunk_line(line: str, width: int = COLUMN_WIDTH) -> list[str]:
    """
    Split `line` into ceil(len/width) slices padded to `width`.

    An empty line still yields one (blank) chunk; an exact multiple of
    `width` yields no trailing empty chunk.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    return [line[i : i + width].ljust(width) for i in range(0, max(len(line), 1), width)]


def _cell(code: ColorCode, letter: str, color: bool) -> str:
    return code.swatch() if color else letter


def render_task(task: Task, position: int, today: dt.date, *, color: bool = True) -> list[str]:
    chunks = [chunk for line in task.description for chunk in chunk_line(line)]
    due = task.due_state(today)

    first = (
        f"| {str(position):<3}"
        f"| {format_date(task.date)} "
        f"| {format_time(task.time)} "
        f"| {_cell(task.priority.color, task.priority.value, color)} "
        f"| {_cell(due.color, due.value, color)} "
        f"|{chunks[0]}|"
    )
    rows = [first]
    rows.extend(f"{EMPTY_CELLS}{chunk}|" for chunk in chunks[1:])
    rows.append(HORIZONTAL_RULE)
    return rows


def render_table(tasks: Iterable[Task], today: dt.date, *, color: bool = True) -> list[str]:
    """Header, every task in order (positions from 1), then a trailing blank line."""
    lines = list(HEADER)
    for position, task in enumerate(tasks, start=1):
        lines.extend(render_task(task, position, today, color=color))
    lines.append("")
    return lines
