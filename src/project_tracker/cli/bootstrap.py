# src/project_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite ProjectStore to a ProjectRegistry,
- loads the stored projects at start and saves them back at exit.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ProjectRepo
from ..tracker.project_store import ProjectStore
from ..tracker.registry import ProjectRegistry

logger = logging.getLogger(__name__)


def ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.projects_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_registry(
    *, settings=None, store: ProjectRepo | None = None
) -> tuple[ProjectRegistry, ProjectRepo]:
    """
    Build a registry filled from the store.

    Keeping settings/store injectable makes this easy to test. If settings is
    None, falls back to get_settings(); if store is None, a ProjectStore on
    settings.projects_db_path is used. Store errors propagate: starting with an
    empty registry over unreadable data would overwrite it on the next save.
    """
    if settings is None:
        settings = get_settings()

    ensure_local_dirs(settings)

    if store is None:
        store = ProjectStore(settings.projects_db_path)

    registry = ProjectRegistry()
    registry.set_projects(store.load_projects())
    return registry, store


def save_registry(registry: ProjectRegistry, store: ProjectRepo) -> None:
    store.save_projects(registry.projects)
    logger.debug("Registry saved (%d projects)", len(registry))
