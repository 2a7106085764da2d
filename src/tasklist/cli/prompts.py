# src/tasklist/cli/prompts.py

from __future__ import annotations

"""
Interactive prompts.

Each reader prints its prompt, reads input through the Console port and hands
it to a pure validator. On an InputError the message is printed and the same
prompt is asked again; nothing else is retried here.
"""

import datetime as dt
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.ports import Console
from ..tasks.errors import BlankDescription, InputError
from ..tasks.task_models import Field, Priority
from ..tasks.validators import (
    parse_date,
    parse_description,
    parse_field,
    parse_position,
    parse_priority,
    parse_time,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRIORITY_PROMPT = "Input the task priority (" + ", ".join(p.value for p in Priority) + "):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
DESCRIPTION_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (" + ", ".join(f.value for f in Field) + "):"


def ask(console: Console, prompt: str, parse: Callable[[str], T]) -> T:
    while True:
        console.write_line(prompt)
        raw = console.read_line()
        try:
            return parse(raw)
        except InputError as e:
            logger.debug("Rejected input %r: %s", raw, e)
            console.write_line(str(e))


def read_priority(console: Console) -> Priority:
    return ask(console, PRIORITY_PROMPT, parse_priority)


def read_date(console: Console) -> dt.date:
    return ask(console, DATE_PROMPT, parse_date)


def read_time(console: Console) -> dt.time:
    return ask(console, TIME_PROMPT, parse_time)


def read_description(console: Console) -> tuple[str, ...]:
    while True:
        console.write_line(DESCRIPTION_PROMPT)
        lines: list[str] = []
        while True:
            line = console.read_line()
            if not line.strip():
                break
            lines.append(line)
        try:
            return parse_description(lines)
        except BlankDescription as e:
            console.write_line(str(e))


def read_field(console: Console) -> Field:
    return ask(console, FIELD_PROMPT, parse_field)


def read_position(console: Console, size: int) -> int:
    return ask(console, f"Input the task number (1-{size}):", lambda raw: parse_position(raw, size))


FIELD_READERS: dict[Field, Callable[[Console], Any]] = {
    Field.PRIORITY: read_priority,
    Field.DATE: read_date,
    Field.TIME: read_time,
    Field.DESCRIPTION: read_description,
}
