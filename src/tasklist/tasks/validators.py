# src/tasklist/tasks/validators.py

from __future__ import annotations

"""
Field validators.

Pure parse functions: given raw text they return a typed value or raise a
specific InputError. They never loop or prompt; re-asking the user is the
job of `tasklist.cli.prompts`.
"""

import datetime as dt
import re
from collections.abc import Iterable

from .errors import (
    BlankDescription,
    IndexOutOfRange,
    InvalidDate,
    InvalidField,
    InvalidPriority,
    InvalidTime,
)
from .task_models import Field, Priority

DATE_REGEX = re.compile(r"(\d{1,4})-(\d{1,2})-(\d{1,2})", re.ASCII)
TIME_REGEX = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)
POSITION_REGEX = re.compile(r"[+-]?\d+", re.ASCII)


def parse_date(text: str) -> dt.date:
    m = DATE_REGEX.fullmatch(text.strip())
    if not m:
        raise InvalidDate()
    year, month, day = (int(g) for g in m.groups())
    try:
        return dt.date(year, month, day)
    except ValueError as e:
        raise InvalidDate() from e


def format_date(value: dt.date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_time(text: str) -> dt.time:
    m = TIME_REGEX.fullmatch(text.strip())
    if not m:
        raise InvalidTime()
    hour, minute = int(m.group(1)), int(m.group(2))
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise InvalidTime()
    return dt.time(hour, minute)


def format_time(value: dt.time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def parse_priority(text: str) -> Priority:
    try:
        return Priority(text.strip().upper())
    except ValueError as e:
        raise InvalidPriority() from e


def parse_description(lines: Iterable[str]) -> tuple[str, ...]:
    """
    Collect trimmed lines up to the first blank one.

    Anything after the blank terminator is ignored. Raises BlankDescription
    when no line precedes the terminator.
    """
    out: list[str] = []
    for line in lines:
        line = line.strip()
        if not line:
            break
        out.append(line)
    if not out:
        raise BlankDescription()
    return tuple(out)


def parse_field(text: str) -> Field:
    try:
        return Field(text.strip().lower())
    except ValueError as e:
        raise InvalidField() from e


def parse_position(text: str, size: int) -> int:
    """Parse a 1-based task number and check it against the collection size."""
    m = POSITION_REGEX.fullmatch(text.strip())
    if not m:
        raise IndexOutOfRange()
    position = int(m.group(0))
    if not 1 <= position <= size:
        raise IndexOutOfRange()
    return position
