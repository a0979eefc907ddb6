"""Load and save the task and note collections through a KeyValueStore."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from studyplan_cli.models import Note, Task
from studyplan_cli.repositories.repository import KeyValueStore
from studyplan_cli.utils.logger import get_logger

TASKS_KEY = "tasks"
NOTES_KEY = "notes"

_tasks_adapter = TypeAdapter(list[Task])
_notes_adapter = TypeAdapter(list[Note])


class PlannerPersistence:
    """Whole-collection persistence for the planner.

    Every save rewrites both collections. Loading is fail-open: if either
    stored collection is unreadable the planner starts empty instead of
    raising.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> tuple[list[Task], list[Note]]:
        """Read both collections.

        Returns:
            ``(tasks, notes)``; both empty when nothing was saved yet or when
            the stored data is corrupt
        """
        try:
            raw_tasks = self.store.get(TASKS_KEY)
            raw_notes = self.store.get(NOTES_KEY)
            tasks = _tasks_adapter.validate_json(raw_tasks) if raw_tasks else []
            notes = _notes_adapter.validate_json(raw_notes) if raw_notes else []
        except UnicodeDecodeError as e:
            get_logger().warning("stored planner data is not UTF-8, starting empty: %s", e)
            return [], []
        except ValidationError as e:
            get_logger().warning(
                "stored planner data is corrupt, starting empty: %s",
                e.errors(include_url=False)[:3],
            )
            return [], []

        get_logger().debug("loaded %d tasks and %d notes", len(tasks), len(notes))
        return tasks, notes

    def save(self, tasks: list[Task], notes: list[Note]) -> None:
        """Serialize and write both collections."""
        tasks_json = _tasks_adapter.dump_json(tasks, by_alias=True).decode("utf-8")
        notes_json = _notes_adapter.dump_json(notes, by_alias=True).decode("utf-8")

        self.store.set(TASKS_KEY, tasks_json)
        self.store.set(NOTES_KEY, notes_json)
        get_logger().debug("saved %d tasks and %d notes", len(tasks), len(notes))
