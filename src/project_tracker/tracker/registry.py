# src/project_tracker/tracker/registry.py

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from .errors import DuplicateTitleError
from .project import Project

logger = logging.getLogger(__name__)


class ProjectRegistry:
    """
    Owns every project and hands out project ids.

    Guarantees:
    - ids start at 1, increase monotonically and are never reused
    - add_project never creates two projects whose titles match case-insensitively

    set_projects (bulk load) trusts its input and skips the title check.

    Not thread-safe: callers sharing one registry across threads must guard
    all mutating calls with a single lock.
    """

    def __init__(self) -> None:
        self._next_project_id = 1
        self._projects: list[Project] = []

    @property
    def projects(self) -> tuple[Project, ...]:
        return tuple(self._projects)

    @property
    def next_project_id(self) -> int:
        return self._next_project_id

    def is_title_unique(self, title: str) -> bool:
        key = title.casefold()
        return all(p.title.casefold() != key for p in self._projects)

    def add_project(self, title: str, description: str) -> Project:
        if not self.is_title_unique(title):
            logger.info("Rejected duplicate project title %r", title)
            raise DuplicateTitleError(title)

        project = Project(self._next_project_id, title, description)
        self._projects.append(project)
        self._next_project_id += 1
        logger.debug("Project added id=%s title=%r", project.id, title)
        return project

    def remove_project(self, project: Project) -> bool:
        for i, p in enumerate(self._projects):
            if p is project:
                del self._projects[i]
                logger.debug("Project removed id=%s", project.id)
                return True
        return False

    def get_project_by_id(self, project_id: int) -> Project | None:
        for p in self._projects:
            if p.id == project_id:
                return p
        return None

    def find_projects(self, search_text: str) -> list[Project]:
        """Projects whose title contains search_text (case-insensitive), in registry order."""
        needle = search_text.casefold()
        return [p for p in self._projects if needle in p.title.casefold()]

    def get_highest_id(self) -> int:
        return max((p.id for p in self._projects), default=0)

    def set_projects(self, incoming: Sequence[Project] | None) -> bool:
        """
        Replace the whole collection (load path).

        Returns False and changes nothing when incoming is None. Titles are
        not re-validated; duplicates are accepted as-is and only logged.
        """
        if incoming is None:
            logger.warning("set_projects called without data; keeping %d projects", len(self._projects))
            return False

        self._projects = list(incoming)
        self._next_project_id = self.get_highest_id() + 1

        dupes = [t for t, n in Counter(p.title.casefold() for p in self._projects).items() if n > 1]
        if dupes:
            logger.warning("Loaded projects contain duplicate titles: %s", ", ".join(sorted(dupes)))

        logger.info(
            "Projects replaced: %d projects, next_project_id=%s",
            len(self._projects),
            self._next_project_id,
        )
        return True

    def __len__(self) -> int:
        return len(self._projects)
