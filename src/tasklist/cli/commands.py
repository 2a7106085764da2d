# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.ports import Console
from ..core.state import AppState
from ..tasks.errors import InvalidAction
from ..tasks.task_models import Task
from .prompts import FIELD_READERS, read_date, read_description, read_field, read_position, read_priority, read_time

ActionHandler = Callable[[AppState, Console], None]

logger = logging.getLogger(__name__)


class Action(StrEnum):
    ADD = "add"
    PRINT = "print"
    EDIT = "edit"
    DELETE = "delete"
    END = "end"


ACTION_PROMPT = "Input an action (" + ", ".join(a.value for a in Action) + "):"

# Actions that change the task list (autosave checkpoints after these).
MUTATING_ACTIONS = frozenset({Action.ADD, Action.EDIT, Action.DELETE})


def parse_action(text: str) -> Action:
    try:
        return Action(text.strip().lower())
    except ValueError as e:
        raise InvalidAction() from e


class CommandRegistry:
    """Explicit dispatch table: Action -> handler."""

    def __init__(self) -> None:
        self._handlers: dict[Action, ActionHandler] = {}

    def register(self, action: Action, handler: ActionHandler) -> None:
        self._handlers[action] = handler

    def handler_for(self, action: Action) -> ActionHandler:
        try:
            return self._handlers[action]
        except KeyError:
            raise InvalidAction() from None


registry = CommandRegistry()


def _print_table(state: AppState, console: Console) -> None:
    # EmptyCollection propagates and aborts the calling action.
    table = state.tasks.table(state.clock.today(), color=state.color)
    console.write_line("\n".join(table))


def cmd_add(state: AppState, console: Console) -> None:
    task = Task(
        priority=read_priority(console),
        date=read_date(console),
        time=read_time(console),
        description=read_description(console),
    )
    position = state.tasks.add(task)
    logger.info("Added task #%d (priority=%s due=%s)", position, task.priority.value, task.date)


def cmd_print(state: AppState, console: Console) -> None:
    _print_table(state, console)


def cmd_edit(state: AppState, console: Console) -> None:
    _print_table(state, console)
    position = read_position(console, len(state.tasks))
    field = read_field(console)
    value = FIELD_READERS[field](console)
    state.tasks.edit(position, field, value)
    logger.info("Edited task #%d field=%s", position, field.value)
    console.write_line("The task is changed")


def cmd_delete(state: AppState, console: Console) -> None:
    _print_table(state, console)
    position = read_position(console, len(state.tasks))
    state.tasks.delete(position)
    logger.info("Deleted task #%d", position)
    console.write_line("The task is deleted")


def cmd_end(state: AppState, console: Console) -> None:
    state.running = False
    console.write_line("Tasklist exiting!")


registry.register(Action.ADD, cmd_add)
registry.register(Action.PRINT, cmd_print)
registry.register(Action.EDIT, cmd_edit)
registry.register(Action.DELETE, cmd_delete)
registry.register(Action.END, cmd_end)
