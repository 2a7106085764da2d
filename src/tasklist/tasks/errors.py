# src/tasklist/tasks/errors.py

from __future__ import annotations

"""
Error kinds raised by the task core.

Every error carries a user-facing default message, so callers can print
`str(exc)` directly.

- InputError subclasses are recoverable: the prompt that produced the bad
  input is simply asked again.
- EmptyCollection aborts the current action.
- TaskStoreError is raised by the JSON persistence adapter.
"""


class TaskListError(Exception):
    default_message = "Task list error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InputError(TaskListError):
    default_message = "Invalid input"


class InvalidDate(InputError):
    default_message = "The input date is invalid"


class InvalidTime(InputError):
    default_message = "The input time is invalid"


class InvalidPriority(InputError):
    default_message = "The input priority is invalid"


class BlankDescription(InputError):
    default_message = "The task is blank"


class InvalidField(InputError):
    default_message = "Invalid field"


class InvalidAction(InputError):
    default_message = "The input action is invalid"


class IndexOutOfRange(InputError):
    default_message = "Invalid task number"


class EmptyCollection(TaskListError):
    default_message = "No tasks have been input"


class TaskStoreError(TaskListError):
    default_message = "Task file could not be read or written"
