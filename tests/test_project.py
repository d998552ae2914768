# tests/test_project.py

from __future__ import annotations

from datetime import date

from project_tracker.tracker.project import Project, ProjectState
from project_tracker.tracker.task_models import Task, TaskPriority, TaskState


def test_task_ids_are_sequential_and_never_reused() -> None:
    p = Project(1, "Website", "redesign")
    t1 = p.add_task("a", TaskPriority.LOW)
    t2 = p.add_task("b", TaskPriority.LOW)

    assert (t1.id, t2.id) == (1, 2)
    assert p.remove_task(t2) is True

    t3 = p.add_task("c", TaskPriority.LOW)
    assert t3.id == 3
    assert p.next_task_id == 4


def test_add_task_returns_live_handle() -> None:
    p = Project(1, "Website", "redesign")
    task = p.add_task("Design mockup", TaskPriority.HIGH)

    task.set_state(TaskState.DONE)

    assert p.get_task_by_id(1).state == TaskState.DONE


def test_remove_task_is_by_identity() -> None:
    p = Project(1, "Website", "redesign")
    p.add_task("a", TaskPriority.LOW)
    lookalike = Task(id=1, description="a", priority=TaskPriority.LOW)

    assert p.remove_task(lookalike) is False
    assert len(p.tasks) == 1


def test_remove_missing_task_returns_false() -> None:
    p = Project(1, "Website", "redesign")
    t = p.add_task("a", TaskPriority.LOW)
    assert p.remove_task(t) is True
    assert p.remove_task(t) is False


def test_get_task_by_id_not_found_is_none() -> None:
    p = Project(1, "Website", "redesign")
    p.add_task("a", TaskPriority.LOW)
    assert p.get_task_by_id(1) is not None
    assert p.get_task_by_id(99) is None


def test_state_lifecycle() -> None:
    p = Project(1, "Website", "redesign")
    assert p.get_state() == ProjectState.EMPTY

    first = p.add_task("a", TaskPriority.LOW)
    assert p.get_state() == ProjectState.ONGOING

    first.set_state(TaskState.DONE)
    assert p.get_state() == ProjectState.COMPLETED

    p.add_task("b", TaskPriority.LOW)
    assert p.get_state() == ProjectState.ONGOING


def test_last_updated_uses_created_when_empty_then_latest_task(clock) -> None:
    p = Project(1, "Website", "redesign", created=date(2024, 1, 10))
    assert p.get_last_updated() == date(2024, 1, 10)

    a = p.add_task("a", TaskPriority.LOW)
    clock.today = date(2024, 3, 9)
    b = p.add_task("b", TaskPriority.LOW)
    clock.today = date(2024, 3, 4)
    a.set_priority(TaskPriority.HIGH)

    assert a.last_updated == date(2024, 3, 4)
    assert b.last_updated == date(2024, 3, 9)
    assert p.get_last_updated() == date(2024, 3, 9)


def test_tasks_property_returns_snapshot() -> None:
    p = Project(1, "Website", "redesign")
    p.add_task("a", TaskPriority.LOW)

    snapshot = p.tasks
    p.add_task("b", TaskPriority.LOW)

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert len(p.find_tasks(_All())) == 2


def test_sorted_tasks_does_not_reorder_project() -> None:
    p = Project(1, "Website", "redesign")
    p.add_task("z", TaskPriority.HIGH)
    p.add_task("a", TaskPriority.LOW)
    p.add_task("m", TaskPriority.LOW)

    assert [t.description for t in p.sorted_tasks()] == ["a", "m", "z"]
    assert [t.description for t in p.tasks] == ["z", "a", "m"]


def test_restored_counter_is_bumped_past_existing_ids() -> None:
    tasks = [
        Task(id=2, description="a", priority=TaskPriority.LOW),
        Task(id=5, description="b", priority=TaskPriority.LOW),
    ]
    p = Project(1, "Website", "redesign", next_task_id=3, tasks=tasks)

    assert p.next_task_id == 6
    assert p.add_task("c", TaskPriority.LOW).id == 6


def test_restored_counter_is_kept_when_valid() -> None:
    tasks = [Task(id=2, description="a", priority=TaskPriority.LOW)]
    p = Project(1, "Website", "redesign", next_task_id=9, tasks=tasks)
    assert p.next_task_id == 9


def test_projects_order_by_title() -> None:
    a = Project(2, "Alpha", "")
    b = Project(1, "Beta", "")
    assert [p.id for p in sorted([b, a])] == [2, 1]


class _All:
    def matches(self, task: Task) -> bool:
        return True


def test_project_and_task_dates_share_one_clock(clock) -> None:
    clock.today = date(2024, 4, 2)
    p = Project(1, "Website", "redesign")
    task = p.add_task("a", TaskPriority.LOW)

    assert p.created == date(2024, 4, 2)
    assert task.last_updated == p.created
