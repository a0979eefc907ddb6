"""Storage adapters."""

from .file_store import FileKeyValueStore, MemoryKeyValueStore
from .persistence import NOTES_KEY, TASKS_KEY, PlannerPersistence

__all__ = [
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "PlannerPersistence",
    "TASKS_KEY",
    "NOTES_KEY",
]
