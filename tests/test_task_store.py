# tests/test_task_store.py

from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path

import pytest

from tasklist.tasks.errors import TaskStoreError
from tasklist.tasks.task_models import Priority
from tasklist.tasks.task_store import TaskStore, task_from_dict, task_to_dict


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope.json")
    assert store.load() == []


def test_save_then_load_keeps_tasks_and_order(tmp_path: Path, make_task) -> None:
    path = tmp_path / "tasklist.json"
    store = TaskStore(path)
    tasks = [
        make_task(("Write report", "with charts"), priority=Priority.HIGH, time=dt.time(9, 5)),
        make_task("Pay rent", date=dt.date(2024, 2, 1), priority=Priority.CRITICAL),
    ]

    store.save(tasks)

    assert TaskStore(path).load() == tasks


def test_saved_layout_has_no_due_state(tmp_path: Path, make_task) -> None:
    path = tmp_path / "tasklist.json"
    TaskStore(path).save([make_task(("a", "b"), time=dt.time(7, 3), priority=Priority.LOW)])

    data = json.loads(path.read_text("utf-8"))

    assert data == [
        {"date": "2024-01-15", "time": "07:03", "priority": "L", "description": ["a", "b"]},
    ]


def test_save_creates_parent_dirs_and_leaves_no_tmp(tmp_path: Path, make_task) -> None:
    path = tmp_path / "nested" / "dir" / "tasklist.json"
    TaskStore(path).save([make_task()])
    assert path.exists()
    assert [p.name for p in path.parent.iterdir()] == ["tasklist.json"]


def test_save_empty_list_writes_empty_array(tmp_path: Path) -> None:
    path = tmp_path / "tasklist.json"
    TaskStore(path).save([])
    assert json.loads(path.read_text("utf-8")) == []


def test_invalid_entries_are_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasklist.json"
    good = {"date": "2024-1-5", "time": "9:5", "priority": "n", "description": ["ok"]}
    path.write_text(
        json.dumps(
            [
                good,
                {"date": "2024-02-30", "time": "10:00", "priority": "N", "description": ["bad date"]},
                {"date": "2024-01-01", "time": "10:00", "priority": "Z", "description": ["bad priority"]},
                {"date": "2024-01-01", "time": "10:00", "priority": "N", "description": []},
                {"date": "2024-01-01", "time": "10:00", "priority": "N"},
                "not an object",
            ]
        ),
        "utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="tasklist.tasks.task_store"):
        tasks = TaskStore(path).load()

    assert len(tasks) == 1
    assert task_to_dict(tasks[0]) == {"date": "2024-01-05", "time": "09:05", "priority": "N", "description": ["ok"]}
    assert sum("Skipping invalid task entry" in r.getMessage() for r in caplog.records) == 5


def test_blank_persisted_lines_are_dropped() -> None:
    task = task_from_dict({"date": "2024-01-01", "time": "10:00", "priority": "N", "description": ["a", " ", "b"]})
    assert task.description == ("a", "b")


@pytest.mark.parametrize("content", ["{not json", '{"date": "2024-01-01"}', "\xff\xfe"])
def test_unusable_file_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasklist.json"
    path.write_bytes(content.encode("latin-1"))
    with pytest.raises(TaskStoreError):
        TaskStore(path).load()


def test_save_failure_is_wrapped(tmp_path: Path, make_task) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", "utf-8")
    store = TaskStore(blocker / "tasklist.json")
    with pytest.raises(TaskStoreError):
        store.save([make_task()])


def test_failed_replace_removes_tmp_file(tmp_path: Path, make_task) -> None:
    path = tmp_path / "tasklist.json"
    path.mkdir()  # a directory cannot be replaced by a file

    with pytest.raises(TaskStoreError):
        TaskStore(path).save([make_task()])

    assert not (tmp_path / "tasklist.json.tmp").exists()
