"""Task service - Business logic for task operations.

This service layer sits between commands and the planner state, providing
a clean API for task-related business logic.
"""

from __future__ import annotations

from datetime import UTC, datetime

from studyplan_cli.models import Task, TaskCreate, TaskFilters, TaskUpdate
from studyplan_cli.services.planner_state import PlannerState
from studyplan_cli.services.query_service import filter_tasks
from studyplan_cli.utils.id_utils import new_id
from studyplan_cli.utils.logger import get_logger
from studyplan_cli.utils.task_helpers import resolve_id


class TaskService:
    """Service for task business logic.

    Every mutation persists both collections before returning.
    """

    def __init__(self, state: PlannerState):
        """Initialize the task service.

        Args:
            state: Shared planner state holding the collections
        """
        self.state = state

    def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks matching the filters, sorted for display.

        Args:
            filters: Search/status/priority filters (defaults match everything)

        Returns:
            Filtered and sorted list of Task objects
        """
        return filter_tasks(self.state.tasks, filters or TaskFilters())

    def get_task(self, task_id: str) -> Task | None:
        """Get a specific task by ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Task object, or None if no task has this id
        """
        for task in self.state.tasks:
            if task.id == task_id:
                return task
        return None

    def resolve_task_id(self, id_or_prefix: str) -> str | None:
        """Resolve a full id or unique id prefix to a task id.

        Raises:
            ValueError: If the prefix is ambiguous
        """
        return resolve_id((t.id for t in self.state.tasks), id_or_prefix)

    def create_task(self, fields: TaskCreate | dict) -> Task:
        """Create a new task.

        Args:
            fields: TaskCreate or a dict of its fields; ``tags`` may be a
                comma-separated string

        Returns:
            Created Task object
        """
        data = fields if isinstance(fields, TaskCreate) else TaskCreate.model_validate(fields)
        now = datetime.now(UTC)
        task = Task(
            id=new_id(),
            **data.model_dump(),
            created_at=now,
            updated_at=now,
        )
        self.state.tasks.append(task)
        self.state.persist()
        get_logger().info("task created: %s", task.id)
        return task

    def update_task(self, task_id: str, fields: TaskUpdate | dict) -> Task | None:
        """Update an existing task.

        Only the supplied fields are merged; everything else keeps its
        previous value. ``updated_at`` is always refreshed.

        Args:
            task_id: Task ID to update
            fields: TaskUpdate or a dict of the fields to change

        Returns:
            Updated Task object, or None if no task has this id
        """
        updates = fields if isinstance(fields, TaskUpdate) else TaskUpdate.model_validate(fields)

        for index, task in enumerate(self.state.tasks):
            if task.id != task_id:
                continue
            merged = {
                **task.model_dump(),
                **updates.changes(),
                "updated_at": datetime.now(UTC),
            }
            updated = Task.model_validate(merged)
            self.state.tasks[index] = updated
            self.state.persist()
            get_logger().info("task updated: %s", task_id)
            return updated

        get_logger().debug("update skipped, task not found: %s", task_id)
        return None

    def delete_task(self, task_id: str) -> None:
        """Delete a task and every note attached to it.

        Deleting an unknown id is a no-op apart from persisting.

        Args:
            task_id: Task ID to delete
        """
        self.state.tasks = [t for t in self.state.tasks if t.id != task_id]
        self.state.notes = [n for n in self.state.notes if n.task_id != task_id]
        self.state.persist()
        get_logger().info("task deleted: %s", task_id)
