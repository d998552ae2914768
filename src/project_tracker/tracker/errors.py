# src/project_tracker/tracker/errors.py

from __future__ import annotations


class TrackerError(Exception):
    """Base class for errors raised by the tracker core and its store."""


class DuplicateTitleError(TrackerError, ValueError):
    """A project with the same title (case-insensitive) already exists."""

    def __init__(self, title: str) -> None:
        super().__init__(f"A project with this title already exists: {title}")
        self.title = title


class AlreadyAssignedError(TrackerError, RuntimeError):
    """Task assignee is one-shot: it cannot be set a second time."""

    def __init__(self, task_id: int, assignee: str) -> None:
        super().__init__(f"Task {task_id} is already taken by {assignee}")
        self.task_id = task_id
        self.assignee = assignee


class ProjectStoreError(TrackerError):
    """Stored project data could not be read or written."""
