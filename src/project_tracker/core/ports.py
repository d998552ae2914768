# src/project_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the tracker.

Project depends on the TaskMatcher Protocol, and the composition root depends
on ProjectRepo, instead of concrete classes. New filters and alternative
stores can be added without touching the core.
"""

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..tracker.project import Project
    from ..tracker.task_models import Task


class TaskMatcher(Protocol):
    """Pure predicate over tasks. Must not mutate or keep the task."""

    def matches(self, task: Task) -> bool: ...


class ProjectRepo(Protocol):
    """
    Persistence collaborator for the full project list.

    load_projects returns [] when nothing has been stored yet.
    """

    def load_projects(self) -> list[Project]: ...
    def save_projects(self, projects: Sequence[Project]) -> None: ...
