"""Note service - Business logic for notes attached to tasks."""

from __future__ import annotations

from collections import Counter
from datetime import UTC, datetime

from studyplan_cli.models import Note, NoteCreate
from studyplan_cli.services.planner_state import PlannerState
from studyplan_cli.utils.id_utils import new_id
from studyplan_cli.utils.logger import get_logger
from studyplan_cli.utils.task_helpers import resolve_id


class NoteService:
    """Service for note business logic.

    The owning task is not checked when a note is created; notes are
    removed together with their task by ``TaskService.delete_task``.
    """

    def __init__(self, state: PlannerState):
        self.state = state

    def create_note(self, fields: NoteCreate | dict) -> Note:
        """Create a note.

        Args:
            fields: NoteCreate or a dict of its fields (``task_id`` required)

        Returns:
            Created Note object
        """
        data = fields if isinstance(fields, NoteCreate) else NoteCreate.model_validate(fields)
        now = datetime.now(UTC)
        note = Note(id=new_id(), **data.model_dump(), created_at=now, updated_at=now)
        self.state.notes.append(note)
        self.state.persist()
        get_logger().info("note created: %s (task %s)", note.id, note.task_id)
        return note

    def delete_note(self, note_id: str) -> None:
        """Delete a note. Unknown ids are ignored."""
        self.state.notes = [n for n in self.state.notes if n.id != note_id]
        self.state.persist()
        get_logger().info("note deleted: %s", note_id)

    def get_note(self, note_id: str) -> Note | None:
        for note in self.state.notes:
            if note.id == note_id:
                return note
        return None

    def resolve_note_id(self, id_or_prefix: str) -> str | None:
        return resolve_id((n.id for n in self.state.notes), id_or_prefix)

    def get_task_notes(self, task_id: str) -> list[Note]:
        """Return the notes of a task in insertion order."""
        return [n for n in self.state.notes if n.task_id == task_id]

    def count_by_task(self) -> dict[str, int]:
        """Number of notes per task id."""
        return dict(Counter(n.task_id for n in self.state.notes))
