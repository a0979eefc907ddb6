"""Study planner domain models.

This package contains Pydantic models that represent the core domain entities
of the study planner. They are used throughout the application for data
validation, serialization, and type safety.
"""

from .core import (
    FILTER_ALL,
    PRIORITIES,
    SNAPSHOT_VERSION,
    STATUSES,
    Note,
    NoteCreate,
    Priority,
    Snapshot,
    Status,
    Task,
    TaskCreate,
    TaskFilters,
    TaskStats,
    TaskUpdate,
)
from .exceptions import InvalidFormatError, ParseFailureError, SnapshotImportError

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    "TaskStats",
    "Priority",
    "Status",
    "PRIORITIES",
    "STATUSES",
    "FILTER_ALL",
    # Note models
    "Note",
    "NoteCreate",
    # Backup models
    "Snapshot",
    "SNAPSHOT_VERSION",
    "SnapshotImportError",
    "ParseFailureError",
    "InvalidFormatError",
]
