"""Service layer for the study planner.

Services hold the business rules and operate on a shared PlannerState.
"""

from .app_context import AppContext, get_app_context
from .data_service import DataService
from .note_service import NoteService
from .planner_state import PlannerState
from .query_service import compute_stats, filter_tasks, is_overdue, sort_tasks
from .task_service import TaskService

__all__ = [
    "AppContext",
    "get_app_context",
    "PlannerState",
    "TaskService",
    "NoteService",
    "DataService",
    "filter_tasks",
    "sort_tasks",
    "compute_stats",
    "is_overdue",
]
