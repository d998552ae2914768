# src/project_tracker/tracker/matchers.py

"""
Built-in task matchers for Project.find_tasks.

Any object with a `matches(task) -> bool` method works as a matcher; these
are just the common ones. Combining matchers is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from .task_models import Task, TaskPriority, TaskState


@dataclass(frozen=True, slots=True)
class NotDoneMatcher:
    def matches(self, task: Task) -> bool:
        return task.state != TaskState.DONE


@dataclass(frozen=True, slots=True)
class PriorityMatcher:
    priority: TaskPriority

    def matches(self, task: Task) -> bool:
        return task.priority == self.priority


@dataclass(frozen=True, slots=True)
class AssigneeMatcher:
    """Case-insensitive match on the task's assignee; unassigned tasks never match."""

    name: str

    def matches(self, task: Task) -> bool:
        return task.assignee is not None and task.assignee.casefold() == self.name.casefold()
