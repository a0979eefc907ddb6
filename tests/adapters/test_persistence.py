"""Tests for PlannerPersistence load/save."""

from __future__ import annotations

import json

import pytest

from studyplan_cli.adapters.file_store import FileKeyValueStore, MemoryKeyValueStore
from studyplan_cli.adapters.persistence import NOTES_KEY, TASKS_KEY, PlannerPersistence

from conftest import make_note, make_task


def test_load_empty_store_returns_empty_collections():
    assert PlannerPersistence(MemoryKeyValueStore()).load() == ([], [])


def test_save_then_load_round_trip():
    store = MemoryKeyValueStore()
    persistence = PlannerPersistence(store)
    tasks = [make_task("t1", due_date="2024-01-10", tags=["math"]), make_task("t2", "Chem Lab")]
    notes = [make_note("n1", "t1")]

    persistence.save(tasks, notes)

    assert persistence.load() == (tasks, notes)


def test_save_writes_camel_case_json_arrays():
    store = MemoryKeyValueStore()
    PlannerPersistence(store).save([make_task("t1")], [make_note("n1", "t1")])

    tasks = json.loads(store.get(TASKS_KEY))
    notes = json.loads(store.get(NOTES_KEY))
    assert tasks[0]["id"] == "t1"
    assert "dueDate" in tasks[0]
    assert notes[0]["taskId"] == "t1"


def test_save_with_file_store(tmp_path):
    persistence = PlannerPersistence(FileKeyValueStore(tmp_path))
    persistence.save([make_task("t1")], [])

    assert (tmp_path / "tasks.json").exists()
    assert (tmp_path / "notes.json").read_text(encoding="utf-8") == "[]"
    assert [t.id for t in persistence.load()[0]] == ["t1"]


@pytest.mark.parametrize(
    "raw_tasks",
    [
        "{not json",
        '{"tasks": []}',
        '[{"id": "t1"}]',
    ],
    ids=["invalid-json", "not-an-array", "invalid-entity"],
)
def test_corrupt_data_fails_open_to_empty(raw_tasks):
    store = MemoryKeyValueStore({TASKS_KEY: raw_tasks, NOTES_KEY: "[]"})
    assert PlannerPersistence(store).load() == ([], [])


def test_corrupt_notes_empties_both_collections():
    store = MemoryKeyValueStore()
    PlannerPersistence(store).save([make_task("t1")], [])
    store.set(NOTES_KEY, "garbage")

    assert PlannerPersistence(store).load() == ([], [])


def test_corrupt_data_is_logged(tmp_path):
    store = MemoryKeyValueStore({TASKS_KEY: "{oops"})
    PlannerPersistence(store).load()

    log_text = (tmp_path / "logs" / "studyplan.log").read_text(encoding="utf-8")
    assert "corrupt" in log_text


def test_undecodable_file_fails_open_to_empty(tmp_path):
    (tmp_path / "tasks.json").write_bytes(b"[\xff\xfe]")
    (tmp_path / "notes.json").write_text("[]", encoding="utf-8")

    assert PlannerPersistence(FileKeyValueStore(tmp_path)).load() == ([], [])

    log_text = (tmp_path / "logs" / "studyplan.log").read_text(encoding="utf-8")
    assert "not UTF-8" in log_text
