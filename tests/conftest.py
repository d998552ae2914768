# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from project_tracker.tracker import task_models
from project_tracker.tracker.project_store import ProjectStore
from project_tracker.tracker.registry import ProjectRegistry


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than the real Settings,
    to keep unit tests isolated from the environment and any .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="project-tracker-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        data_dir=data_dir,
        projects_db_path=data_dir / "projects.sqlite3",
        save_on_exit=True,
    )


@pytest.fixture()
def registry() -> ProjectRegistry:
    return ProjectRegistry()


@pytest.fixture()
def store(tmp_path: Path) -> ProjectStore:
    return ProjectStore(tmp_path / "projects.sqlite3")


class FakeClock:
    """Controls the date used by Task for last_updated."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture()
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock(date(2024, 3, 1))
    monkeypatch.setattr(task_models, "_today", fake)
    return fake
