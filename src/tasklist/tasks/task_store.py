# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import InputError, TaskStoreError
from .task_models import Task
from .validators import format_date, format_time, parse_date, parse_description, parse_priority, parse_time

logger = logging.getLogger(__name__)


def task_to_dict(task: Task) -> dict[str, Any]:
    # Due state is derived from the clock and never persisted.
    return {
        "date": format_date(task.date),
        "time": format_time(task.time),
        "priority": task.priority.value,
        "description": list(task.description),
    }


def task_from_dict(raw: Any) -> Task:
    """
    Rebuild a Task from one JSON entry, re-validating every field.

    Raises InputError (or ValueError for wrong shapes) on bad entries.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
    desc = raw.get("description")
    if not isinstance(desc, list) or not all(isinstance(line, str) for line in desc):
        raise ValueError("description must be a list of strings")
    # A blank line would terminate parse_description early.
    lines = [line for line in desc if line.strip()]
    return Task(
        date=parse_date(str(raw.get("date", ""))),
        time=parse_time(str(raw.get("time", ""))),
        priority=parse_priority(str(raw.get("priority", ""))),
        description=parse_description(lines),
    )


class TaskStore:
    """
    JSON file task store.

    The file holds a single array of task objects. It is read in full by
    load() and rewritten in full by save(); no handle stays open in between.
    """

    def __init__(self, path: str | Path = "tasklist.json") -> None:
        self._path = Path(path)

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.exception("Failed to read task file %s", self._path)
            raise TaskStoreError(f"Cannot read task file {self._path}: {e}") from e

        if not isinstance(data, list):
            raise TaskStoreError(f"Task file {self._path} must contain a JSON array")

        tasks: list[Task] = []
        for i, raw in enumerate(data):
            try:
                tasks.append(task_from_dict(raw))
            except (InputError, ValueError) as e:
                logger.warning("Skipping invalid task entry #%d in %s: %s", i, self._path, e)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = [task_to_dict(t) for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.exception("Failed to save tasks to %s", self._path)
            raise TaskStoreError(f"Cannot write task file {self._path}: {e}") from e
        logger.info("Saved %d tasks to %s", len(payload), self._path)
