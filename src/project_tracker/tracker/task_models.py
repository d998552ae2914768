# src/project_tracker/tracker/task_models.py

from __future__ import annotations

from datetime import date
from enum import StrEnum

from .errors import AlreadyAssignedError


def _today() -> date:
    return date.today()


class TaskPriority(StrEnum):
    """
    Task priority.

    Declaration order is the sort order (LOW < MEDIUM < HIGH). Comparisons
    between priorities use `rank`, not the string values.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_db(cls, raw: str | None) -> TaskPriority:
        if not raw:
            raise ValueError("empty task priority")
        return cls(raw)


_PRIORITY_RANK = {p: i for i, p in enumerate(TaskPriority)}


class TaskState(StrEnum):
    """Task lifecycle state. Any state may follow any state."""

    TO_DO = "to_do"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskState:
        if not raw:
            raise ValueError("empty task state")
        return cls(raw)


class Task:
    """
    Single unit of work inside a Project.

    Tasks are created by Project.add_task, or restored by the store with every
    field given. After that, id is fixed and priority, state and assignee only
    change through the set_* methods, which refresh last_updated. Equality is
    identity: two tasks with the same fields are still different tasks.
    """

    __slots__ = ("_id", "description", "_priority", "_state", "_assignee", "_last_updated")

    def __init__(
        self,
        id: int,
        description: str,
        priority: TaskPriority,
        *,
        state: TaskState = TaskState.TO_DO,
        assignee: str | None = None,
        last_updated: date | None = None,
    ) -> None:
        self._id = id
        self.description = description
        self._priority = priority
        self._state = state
        self._assignee = assignee
        self._last_updated = last_updated if last_updated is not None else _today()

    @property
    def id(self) -> int:
        return self._id

    @property
    def priority(self) -> TaskPriority:
        return self._priority

    @property
    def state(self) -> TaskState:
        return self._state

    @property
    def assignee(self) -> str | None:
        return self._assignee

    @property
    def last_updated(self) -> date:
        return self._last_updated

    def _touch(self) -> None:
        self._last_updated = _today()

    def set_assignee(self, name: str) -> None:
        if self._assignee is not None:
            raise AlreadyAssignedError(self._id, self._assignee)
        self._assignee = name
        self._touch()

    def set_state(self, state: TaskState) -> None:
        self._state = state
        self._touch()

    def set_priority(self, priority: TaskPriority) -> None:
        self._priority = priority
        self._touch()

    def sort_key(self) -> tuple[int, str]:
        return (self._priority.rank, self.description)

    def __lt__(self, other: Task) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"Task(id={self._id}, description={self.description!r}, priority={self._priority.name})"

    def __str__(self) -> str:
        return (
            f"[Task ID: {self._id} | Description: {self.description} | "
            f"Prio: {self._priority.name} | State: {self._state.name} | "
            f"Taken by: {self._assignee or '-'} | Last updated: {self._last_updated.isoformat()}]"
        )


def compare_tasks(a: Task, b: Task) -> int:
    """Three-way comparison by (priority rank, description); use with functools.cmp_to_key."""
    ka, kb = a.sort_key(), b.sort_key()
    return (ka > kb) - (ka < kb)
