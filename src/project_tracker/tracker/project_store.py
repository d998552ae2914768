# src/project_tracker/tracker/project_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from .errors import ProjectStoreError
from .project import Project
from .task_models import Task, TaskPriority, TaskState

logger = logging.getLogger(__name__)


class ProjectStore:
    """
    SQLite snapshot store for the full project list.

    The whole collection is written at once (save_projects) and read back at
    once (load_projects); there are no per-row updates. `position` columns
    keep the in-memory order of projects and tasks.

    The schema is migration-safe:
    - create tables if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    A load never creates the database file: a missing file means "nothing
    saved yet" and yields an empty list.
    """

    def __init__(self, db_path: str | Path = "projects.sqlite3") -> None:
        self._db_path = Path(db_path)
        logger.info("ProjectStore ready db=%s exists=%s", self._db_path, self._db_path.exists())

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS projects (
                id INTEGER PRIMARY KEY,
                position INTEGER NOT NULL,
                title TEXT NOT NULL,
                description TEXT NOT NULL DEFAULT '',
                created TEXT NOT NULL,
                next_task_id INTEGER NOT NULL DEFAULT 1
            )
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                project_id INTEGER NOT NULL,
                position INTEGER NOT NULL,
                id INTEGER NOT NULL,
                description TEXT NOT NULL DEFAULT '',
                priority TEXT NOT NULL,
                state TEXT NOT NULL DEFAULT 'to_do',
                assignee TEXT,
                last_updated TEXT NOT NULL,
                PRIMARY KEY (project_id, id)
            )
            """
        )

        def add_cols(table: str, wanted: dict[str, str]) -> None:
            cur.execute(f"PRAGMA table_info({table})")
            cols = {row["name"] for row in cur.fetchall()}
            for name, decl in wanted.items():
                if name in cols:
                    continue
                cur.execute(f"ALTER TABLE {table} ADD COLUMN {name} {decl}")
                logger.info("ProjectStore migration: added column %s.%s", table, name)

        add_cols("projects", {"next_task_id": "INTEGER NOT NULL DEFAULT 1"})
        add_cols("tasks", {"assignee": "TEXT"})

        cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_project ON tasks(project_id, position)")

    @staticmethod
    def _parse_date(raw: str | None) -> date:
        if not raw:
            raise ValueError("missing date")
        return date.fromisoformat(raw)

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"] or ""),
            priority=TaskPriority.from_db(row["priority"]),
            state=TaskState.from_db(row["state"]),
            assignee=row["assignee"],
            last_updated=self._parse_date(row["last_updated"]),
        )

    # ---- public API ----

    def count_projects(self) -> int:
        if not self._db_path.exists():
            return 0
        conn = self._get_conn()
        try:
            self._ensure_schema(conn)
            (n,) = conn.execute("SELECT COUNT(*) FROM projects").fetchone()
            return int(n)
        except sqlite3.Error as e:
            raise ProjectStoreError(f"Failed to count projects in {self._db_path}: {e}") from e
        finally:
            conn.close()

    def load_projects(self) -> list[Project]:
        if not self._db_path.exists():
            logger.info("No stored projects at %s; starting empty.", self._db_path)
            return []

        conn = self._get_conn()
        try:
            self._ensure_schema(conn)
            conn.commit()

            tasks_by_project: dict[int, list[Task]] = {}
            for row in conn.execute("SELECT * FROM tasks ORDER BY project_id, position"):
                tasks_by_project.setdefault(int(row["project_id"]), []).append(self._row_to_task(row))

            projects: list[Project] = []
            for row in conn.execute("SELECT * FROM projects ORDER BY position"):
                pid = int(row["id"])
                projects.append(
                    Project(
                        pid,
                        str(row["title"]),
                        str(row["description"] or ""),
                        created=self._parse_date(row["created"]),
                        next_task_id=int(row["next_task_id"] or 1),
                        tasks=tasks_by_project.get(pid, []),
                    )
                )
        except (sqlite3.Error, ValueError) as e:
            raise ProjectStoreError(f"Failed to load projects from {self._db_path}: {e}") from e
        finally:
            conn.close()

        logger.info("Loaded %d projects from %s", len(projects), self._db_path)
        return projects

    def save_projects(self, projects: Sequence[Project]) -> None:
        """Replace the stored snapshot with `projects` in one transaction."""
        project_rows = []
        task_rows = []
        for pos, p in enumerate(projects):
            project_rows.append(
                (p.id, pos, p.title, p.description, p.created.isoformat(), p.next_task_id)
            )
            for tpos, t in enumerate(p.tasks):
                task_rows.append(
                    (
                        p.id,
                        tpos,
                        t.id,
                        t.description,
                        t.priority.value,
                        t.state.value,
                        t.assignee,
                        t.last_updated.isoformat(),
                    )
                )

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._get_conn()
        except (OSError, sqlite3.Error) as e:
            raise ProjectStoreError(f"Cannot open {self._db_path} for writing: {e}") from e

        try:
            self._ensure_schema(conn)
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.execute("DELETE FROM projects")
                conn.executemany(
                    """
                    INSERT INTO projects(id, position, title, description, created, next_task_id)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    project_rows,
                )
                conn.executemany(
                    """
                    INSERT INTO tasks(
                        project_id, position, id, description,
                        priority, state, assignee, last_updated
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    task_rows,
                )
        except sqlite3.Error as e:
            raise ProjectStoreError(f"Failed to save projects to {self._db_path}: {e}") from e
        finally:
            conn.close()

        logger.info(
            "Saved %d projects (%d tasks) to %s", len(project_rows), len(task_rows), self._db_path
        )
