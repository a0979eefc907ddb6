"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from unittest.mock import patch

import pytest

from studyplan_cli.adapters.file_store import MemoryKeyValueStore
from studyplan_cli.adapters.persistence import PlannerPersistence
from studyplan_cli.models import Note, Task
from studyplan_cli.services.app_context import AppContext, get_app_context
from studyplan_cli.services.planner_state import PlannerState
from studyplan_cli.utils.logger import reset_logger


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config, data and log directories at *tmp_path*.

    Also resets the cached config manager, app context and logger so each
    test starts from a clean slate.
    """
    import studyplan_cli.config as config_mod

    monkeypatch.delenv(config_mod.DATA_DIR_ENV, raising=False)

    config_mod._config_manager = None
    reset_logger()
    get_app_context.cache_clear()

    with (
        patch("studyplan_cli.config.user_config_dir", return_value=str(tmp_path / "config")),
        patch("studyplan_cli.config.user_data_dir", return_value=str(tmp_path / "data")),
        patch("studyplan_cli.config.user_log_dir", return_value=str(tmp_path / "logs")),
    ):
        yield tmp_path

    config_mod._config_manager = None
    reset_logger()
    get_app_context.cache_clear()


# ---------------------------------------------------------------------------
# Planner state
# ---------------------------------------------------------------------------


@pytest.fixture()
def store():
    return MemoryKeyValueStore()


@pytest.fixture()
def state(store):
    return PlannerState.load(PlannerPersistence(store))


@pytest.fixture()
def ctx(store):
    return AppContext.from_store(store)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

_STAMP = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def make_task(id_: str = "task-1", title: str = "Algebra HW", **fields) -> Task:
    """Build a Task directly, bypassing the service."""
    due = fields.pop("due_date", None)
    if isinstance(due, str):
        due = date.fromisoformat(due)
    return Task(
        id=id_,
        title=title,
        due_date=due,
        created_at=fields.pop("created_at", _STAMP),
        updated_at=fields.pop("updated_at", _STAMP),
        **fields,
    )


def make_note(id_: str = "note-1", task_id: str = "task-1", title: str = "Chapter 3", **fields) -> Note:
    """Build a Note directly, bypassing the service."""
    return Note(
        id=id_,
        task_id=task_id,
        title=title,
        created_at=fields.pop("created_at", _STAMP),
        updated_at=fields.pop("updated_at", _STAMP),
        **fields,
    )
