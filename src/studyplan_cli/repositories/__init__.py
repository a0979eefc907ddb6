"""Storage interfaces for the study planner.

Implementations (Adapters) are in:
- studyplan_cli.adapters.file_store (JSON files, in-memory)
"""

from .repository import KeyValueStore

__all__ = ["KeyValueStore"]
