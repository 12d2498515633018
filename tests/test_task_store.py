# tests/test_task_store.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from taskpad.tasks.task_list import TaskList
from taskpad.tasks.task_models import Deadline, Event, ToDo
from taskpad.tasks.task_store import (
    TaskStore,
    TaskStoreError,
    can_store_timing,
    decode_task,
    encode_task,
)


def _sample() -> TaskList:
    return TaskList(
        [
            ToDo("read book"),
            Deadline("submit report", date(2024, 6, 1), done=True),
            Event("project meeting", "Mon 2-4pm"),
            ToDo("compare a | b"),
            Event("party", ""),
        ]
    )


def test_load_missing_file_gives_empty_list(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "tasks.txt")
    assert store.load().size() == 0


def test_save_writes_one_rendered_line_per_task(store: TaskStore) -> None:
    store.save(_sample())

    lines = store.path.read_text("utf-8").splitlines()
    assert lines == [
        "T | 0 | read book",
        "D | 1 | submit report | 2024-06-01",
        "E | 0 | project meeting | Mon 2-4pm",
        "T | 0 | compare a | b",
        "E | 0 | party | ",
    ]


def test_save_then_load_round_trips(store: TaskStore) -> None:
    original = _sample()
    store.save(original)

    assert store.load() == original


def test_save_is_a_full_rewrite(store: TaskStore) -> None:
    store.save(_sample())
    store.save(TaskList([ToDo("only one")]))

    assert store.path.read_text("utf-8") == "T | 0 | only one\n"
    assert not store.path.with_name(store.path.name + ".tmp").exists()


def test_load_skips_malformed_lines_with_warning(
    store: TaskStore, caplog: pytest.LogCaptureFixture
) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(
        "T | 0 | keep me\n"
        "this is not a task\n"
        "\n"
        "D | 0 | bad date | someday\n"
        "E | 1 | keep event | Fri\n",
        "utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="taskpad.tasks.task_store"):
        loaded = store.load()

    assert [t.description for t in loaded] == ["keep me", "keep event"]
    assert loaded.get(1).done is True
    skipped = [r for r in caplog.records if "Skipping malformed line" in r.getMessage()]
    assert len(skipped) == 2


def test_save_failure_raises_store_error_and_cleans_tmp(tmp_path: Path) -> None:
    target = tmp_path / "store_dir"
    target.mkdir()
    store = TaskStore(target)

    with pytest.raises(TaskStoreError):
        store.save(TaskList([ToDo("a")]))

    assert not (tmp_path / "store_dir.tmp").exists()


def test_load_failure_raises_store_error(tmp_path: Path) -> None:
    target = tmp_path / "store_dir"
    target.mkdir()

    with pytest.raises(TaskStoreError):
        TaskStore(target).load()


@pytest.mark.parametrize(
    "line",
    [
        "garbage",
        "X | 0 | foo",
        "T | 2 | foo",
        "T | 0 |   ",
        "D | 0 | missing date",
        "D | 0 | foo | not a date",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(ValueError):
        decode_task(line)


def test_decode_inverts_encode() -> None:
    for task in _sample():
        assert decode_task(encode_task(task) + "\n") == task


@pytest.mark.parametrize(
    "at, ok",
    [
        ("Mon 2pm", True),
        ("", True),
        ("Mon |", True),
        ("10/11 9am", True),
        ("Mon | Wed", False),
        ("| Wed", False),
        ("Mon\r", False),
        ("bad \udcff", False),
    ],
)
def test_can_store_timing(at: str, ok: bool) -> None:
    assert can_store_timing(at) is ok


def test_storable_timings_round_trip(store: TaskStore) -> None:
    original = TaskList(
        [
            Event("standup", "Mon |"),
            Event("a | b", "Fri 9am"),
            Event("a |", "Sat"),
        ]
    )
    for task in original:
        assert can_store_timing(task.at)

    store.save(original)

    assert store.load() == original


def test_undecodable_line_is_skipped_and_the_rest_kept(
    store: TaskStore, caplog: pytest.LogCaptureFixture
) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_bytes(b"T | 0 | keep a\nT | 0 | bad \xff\nT | 0 | keep b\n")

    with caplog.at_level(logging.WARNING, logger="taskpad.tasks.task_store"):
        loaded = store.load()

    assert [t.description for t in loaded] == ["keep a", "keep b"]
    assert any("line 2" in r.getMessage() for r in caplog.records)


def test_unencodable_text_fails_save_without_touching_file(store: TaskStore) -> None:
    store.save(TaskList([ToDo("keep me")]))

    with pytest.raises(TaskStoreError):
        store.save(TaskList([ToDo("keep me"), ToDo("bad \udcff")]))

    assert store.path.read_text("utf-8") == "T | 0 | keep me\n"
    assert not store.path.with_name(store.path.name + ".tmp").exists()
