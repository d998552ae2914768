# src/project_tracker/tracker/project.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from enum import StrEnum

from ..core.ports import TaskMatcher
from . import task_models
from .task_models import Task, TaskPriority, TaskState

logger = logging.getLogger(__name__)


class ProjectState(StrEnum):
    """Aggregate state derived from the project's tasks."""

    EMPTY = "empty"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Project:
    """
    A titled collection of tasks.

    The project owns task-id allocation: ids start at 1 and are never reused,
    even after a task is removed. Tasks keep insertion order.

    `created`, `next_task_id` and `tasks` are only meant to be passed when
    restoring a stored project; new projects come from ProjectRegistry.add_project.
    """

    __slots__ = ("_id", "_title", "description", "_created", "_next_task_id", "_tasks")

    def __init__(
        self,
        id: int,
        title: str,
        description: str,
        *,
        created: date | None = None,
        next_task_id: int = 1,
        tasks: Iterable[Task] | None = None,
    ) -> None:
        self._id = id
        self._title = title
        self.description = description
        self._created = created if created is not None else task_models._today()
        self._tasks: list[Task] = list(tasks or [])

        highest = max((t.id for t in self._tasks), default=0)
        if next_task_id <= highest:
            logger.warning(
                "Project id=%s: stored next_task_id=%s <= highest task id=%s; bumping.",
                id,
                next_task_id,
                highest,
            )
            next_task_id = highest + 1
        self._next_task_id = next_task_id

    # ---- identity (read-only) ----

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def created(self) -> date:
        return self._created

    @property
    def next_task_id(self) -> int:
        return self._next_task_id

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in insertion order."""
        return tuple(self._tasks)

    # ---- task management ----

    def add_task(self, description: str, priority: TaskPriority) -> Task:
        task = Task(id=self._next_task_id, description=description, priority=priority)
        self._tasks.append(task)
        self._next_task_id += 1
        logger.debug("Task added project=%s task_id=%s prio=%s", self._id, task.id, priority.name)
        return task

    def remove_task(self, task: Task) -> bool:
        for i, t in enumerate(self._tasks):
            if t is task:
                del self._tasks[i]
                logger.debug("Task removed project=%s task_id=%s", self._id, task.id)
                return True
        return False

    def get_task_by_id(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def find_tasks(self, matcher: TaskMatcher) -> list[Task]:
        return [t for t in self._tasks if matcher.matches(t)]

    def sorted_tasks(self) -> list[Task]:
        """Tasks ordered by priority (LOW first), then description."""
        return sorted(self._tasks, key=Task.sort_key)

    # ---- derived state ----

    def get_state(self) -> ProjectState:
        if not self._tasks:
            return ProjectState.EMPTY
        if all(t.state == TaskState.DONE for t in self._tasks):
            return ProjectState.COMPLETED
        return ProjectState.ONGOING

    def get_last_updated(self) -> date:
        if not self._tasks:
            return self._created
        return max(t.last_updated for t in self._tasks)

    def __lt__(self, other: Project) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._title < other._title

    def __repr__(self) -> str:
        return f"Project(id={self._id}, title={self._title!r}, tasks={len(self._tasks)})"
