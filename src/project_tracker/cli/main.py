# src/project_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the stored projects, prints an overview of every
project and its tasks, then saves the snapshot back (when enabled).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_registry, save_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tracker.errors import TrackerError
from ..tracker.registry import ProjectRegistry

logger = logging.getLogger(__name__)


def render_overview(registry: ProjectRegistry) -> str:
    if len(registry) == 0:
        return "No projects."

    lines: list[str] = []
    for p in registry.projects:
        lines.append(
            f"Project {p.id}: {p.title} [{p.get_state().name}] "
            f"created {p.created.isoformat()}, last updated {p.get_last_updated().isoformat()}"
        )
        if p.description:
            lines.append(f"  {p.description}")
        for t in p.sorted_tasks():
            lines.append(f"  {t}")
    return "\n".join(lines)


def main() -> int:
    settings = get_settings()

    setup_logging(log_dir=settings.log_dir, level=settings.log_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        registry, store = create_registry(settings=settings)
    except TrackerError:
        logger.exception("Failed to load projects.")
        return 1

    print(render_overview(registry))

    if settings.save_on_exit:
        try:
            save_registry(registry, store)
        except TrackerError:
            logger.exception("Failed to save projects.")
            return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
