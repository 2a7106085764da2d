# tests/test_commands.py

from __future__ import annotations

import pytest

from tasklist.cli.commands import (
    ACTION_PROMPT,
    MUTATING_ACTIONS,
    Action,
    CommandRegistry,
    parse_action,
    registry,
)
from tasklist.cli.prompts import FIELD_PROMPT, PRIORITY_PROMPT, ask, read_description, read_position
from tasklist.tasks.errors import InvalidAction
from tasklist.tasks.task_models import Field
from tasklist.tasks.validators import parse_priority

from .fakes import ScriptedConsole


def test_prompts_list_the_tokens() -> None:
    assert ACTION_PROMPT == "Input an action (add, print, edit, delete, end):"
    assert PRIORITY_PROMPT == "Input the task priority (C, H, N, L):"
    assert FIELD_PROMPT == "Input a field to edit (priority, date, time, task):"


@pytest.mark.parametrize("raw", ["add", "ADD", " Print ", "eDiT", "delete", "END"])
def test_parse_action_is_case_insensitive(raw: str) -> None:
    assert parse_action(raw) is Action(raw.strip().lower())


@pytest.mark.parametrize("raw", ["", "list", "quit", "a"])
def test_parse_action_rejects_unknown_tokens(raw: str) -> None:
    with pytest.raises(InvalidAction) as exc:
        parse_action(raw)
    assert str(exc.value) == "The input action is invalid"


def test_every_action_has_a_handler() -> None:
    for action in Action:
        assert callable(registry.handler_for(action))


def test_unregistered_action_is_reported() -> None:
    reg = CommandRegistry()
    called = []
    reg.register(Action.PRINT, lambda state, console: called.append("print"))

    reg.handler_for(Action.PRINT)(None, None)  # type: ignore[arg-type]
    assert called == ["print"]
    with pytest.raises(InvalidAction):
        reg.handler_for(Action.ADD)


def test_only_add_edit_delete_mutate() -> None:
    assert MUTATING_ACTIONS == {Action.ADD, Action.EDIT, Action.DELETE}


def test_ask_reprompts_until_valid() -> None:
    console = ScriptedConsole(["x", "critical", "h"])
    result = ask(console, PRIORITY_PROMPT, parse_priority)

    assert result.value == "H"
    assert console.output == [
        PRIORITY_PROMPT,
        "The input priority is invalid",
        PRIORITY_PROMPT,
        "The input priority is invalid",
        PRIORITY_PROMPT,
    ]


def test_read_description_reprompts_on_blank() -> None:
    console = ScriptedConsole(["", "  line one ", "line two", ""])
    assert read_description(console) == ("line one", "line two")
    assert console.output.count("The task is blank") == 1
    assert console.remaining == 0


def test_read_position_uses_size_in_prompt() -> None:
    console = ScriptedConsole(["5", "2"])
    assert read_position(console, 3) == 2
    assert console.output == [
        "Input the task number (1-3):",
        "Invalid task number",
        "Input the task number (1-3):",
    ]


def test_field_tokens_match_enum() -> None:
    assert [f.value for f in Field] == ["priority", "date", "time", "task"]
