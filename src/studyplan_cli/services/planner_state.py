"""In-memory planner state shared by the task, note and data services."""

from __future__ import annotations

from studyplan_cli.adapters.persistence import PlannerPersistence
from studyplan_cli.models import Note, Task


class PlannerState:
    """Owns the task and note collections and writes them through.

    Services receive the same PlannerState instance and mutate its lists,
    then call :meth:`persist`. Nothing outside the services should modify
    ``tasks`` or ``notes`` directly.
    """

    def __init__(
        self,
        persistence: PlannerPersistence,
        tasks: list[Task] | None = None,
        notes: list[Note] | None = None,
    ):
        self.persistence = persistence
        self.tasks: list[Task] = list(tasks or [])
        self.notes: list[Note] = list(notes or [])

    @classmethod
    def load(cls, persistence: PlannerPersistence) -> PlannerState:
        """Create a state populated from durable storage."""
        tasks, notes = persistence.load()
        return cls(persistence, tasks, notes)

    def persist(self) -> None:
        """Write both collections to durable storage."""
        self.persistence.save(self.tasks, self.notes)

    def replace(self, tasks: list[Task], notes: list[Note]) -> None:
        """Swap in new collections wholesale and persist."""
        self.tasks = list(tasks)
        self.notes = list(notes)
        self.persist()
