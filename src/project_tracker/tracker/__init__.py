"""
Tracker domain.

Components:
- task_models.py: Task, TaskPriority, TaskState, compare_tasks
- matchers.py: built-in TaskMatcher implementations
- project.py: Project (owns tasks and task ids), ProjectState
- registry.py: ProjectRegistry (owns projects, project ids, title uniqueness)
- project_store.py: SQLite snapshot store used at start/exit
- errors.py: DuplicateTitleError, AlreadyAssignedError, ProjectStoreError
"""

from .errors import AlreadyAssignedError, DuplicateTitleError, ProjectStoreError, TrackerError
from .matchers import AssigneeMatcher, NotDoneMatcher, PriorityMatcher
from .project import Project, ProjectState
from .registry import ProjectRegistry
from .task_models import Task, TaskPriority, TaskState, compare_tasks

__all__ = [
    "AlreadyAssignedError",
    "AssigneeMatcher",
    "DuplicateTitleError",
    "NotDoneMatcher",
    "PriorityMatcher",
    "Project",
    "ProjectRegistry",
    "ProjectState",
    "ProjectStoreError",
    "Task",
    "TaskPriority",
    "TaskState",
    "TrackerError",
    "compare_tasks",
]
