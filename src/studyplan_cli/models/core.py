"""Study planner data models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from studyplan_cli.utils.task_helpers import normalize_tags

Priority = Literal["low", "medium", "high"]
Status = Literal["todo", "in-progress", "completed"]

PRIORITIES: tuple[str, ...] = ("low", "medium", "high")
STATUSES: tuple[str, ...] = ("todo", "in-progress", "completed")

# Sentinel accepted by status/priority filters
FILTER_ALL = "all"

SNAPSHOT_VERSION = "1.0"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("title cannot be empty")
    return value


def _blank_to_none(value):
    # Date inputs left empty arrive as ""
    if isinstance(value, str) and not value.strip():
        return None
    return value


Title = Annotated[str, AfterValidator(_require_text)]
DueDate = Annotated[date | None, BeforeValidator(_blank_to_none)]
Tags = Annotated[list[str], BeforeValidator(normalize_tags)]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys.

    Python code uses snake_case attribute names; the persisted and exported
    documents use the camelCase names (``dueDate``, ``taskId`` ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class Task(CamelModel):
    """Task model representing a unit of study work.

    Attributes:
        id: Unique identifier, assigned at creation and never reused
        title: Short task title (non-empty)
        description: Optional longer description
        subject: Optional subject/course name
        priority: Priority level ("low", "medium", "high")
        status: Progress status ("todo", "in-progress", "completed")
        due_date: Optional calendar due date
        tags: Ordered tag list, duplicates allowed
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: str
    title: Title
    description: str = ""
    subject: str = ""
    priority: Priority = "medium"
    status: Status = "todo"
    due_date: DueDate = None
    tags: Tags = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class TaskCreate(CamelModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required)
        description: Optional detailed description
        subject: Optional subject/course name
        priority: Priority level, defaults to "medium"
        status: Initial status, defaults to "todo"
        due_date: Optional due date (ISO date string or date)
        tags: Comma-separated string or list of tags
    """

    title: Title
    description: str = ""
    subject: str = ""
    priority: Priority = "medium"
    status: Status = "todo"
    due_date: DueDate = None
    tags: Tags = Field(default_factory=list)


class TaskUpdate(CamelModel):
    """Model for updating an existing task.

    All fields are optional - only fields explicitly provided are merged
    over the stored task. Passing ``due_date=None`` clears the due date.
    """

    title: Title | None = None
    description: str | None = None
    subject: str | None = None
    priority: Priority | None = None
    status: Status | None = None
    due_date: DueDate = None
    tags: Tags | None = None

    def changes(self) -> dict:
        """Return only the fields the caller supplied."""
        return self.model_dump(exclude_unset=True)


class Note(CamelModel):
    """Free-form note attached to a task.

    Attributes:
        id: Unique identifier
        task_id: Id of the owning task (not enforced as a foreign key)
        title: Note title
        content: Note body
        tags: Ordered tag list
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: str
    task_id: str
    title: str
    content: str = ""
    tags: Tags = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class NoteCreate(CamelModel):
    """Model for creating a new note."""

    task_id: str
    title: str
    content: str = ""
    tags: Tags = Field(default_factory=list)


class TaskFilters(BaseModel):
    """Filters for the task list view.

    Attributes:
        search_term: Case-insensitive text matched against title,
            description, subject and tags (empty matches everything)
        status_filter: A status value or "all"
        priority_filter: A priority value or "all"
    """

    search_term: str = ""
    status_filter: Literal["all", "todo", "in-progress", "completed"] = FILTER_ALL
    priority_filter: Literal["all", "low", "medium", "high"] = FILTER_ALL


class TaskStats(CamelModel):
    """Aggregate counters shown in the stats panel."""

    total: int = 0
    completed: int = 0
    in_progress: int = 0
    overdue: int = 0


class Snapshot(CamelModel):
    """Full backup document of both collections."""

    tasks: list[Task] = Field(default_factory=list)
    notes: list[Note] = Field(default_factory=list)
    export_date: datetime
    version: str = SNAPSHOT_VERSION
