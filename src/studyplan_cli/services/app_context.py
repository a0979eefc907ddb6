"""Application root: builds the planner state and services once per process."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from studyplan_cli.adapters.file_store import FileKeyValueStore
from studyplan_cli.adapters.persistence import PlannerPersistence
from studyplan_cli.config import get_config_manager
from studyplan_cli.repositories.repository import KeyValueStore
from studyplan_cli.services.data_service import DataService
from studyplan_cli.services.note_service import NoteService
from studyplan_cli.services.planner_state import PlannerState
from studyplan_cli.services.task_service import TaskService


@dataclass
class AppContext:
    """Planner state plus the services that operate on it."""

    state: PlannerState
    tasks: TaskService
    notes: NoteService
    data: DataService

    @classmethod
    def from_store(cls, store: KeyValueStore) -> AppContext:
        """Load state from a store and wire up the services."""
        state = PlannerState.load(PlannerPersistence(store))
        return cls(
            state=state,
            tasks=TaskService(state),
            notes=NoteService(state),
            data=DataService(state),
        )

    @classmethod
    def from_directory(cls, directory: str | Path) -> AppContext:
        return cls.from_store(FileKeyValueStore(directory))


@lru_cache(maxsize=1)
def get_app_context() -> AppContext:
    """Get the cached AppContext for the configured data directory."""
    return AppContext.from_directory(get_config_manager().data_dir)
