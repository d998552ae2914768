# src/project_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "project-tracker.log"
PACKAGE = "project_tracker"

# Marks handlers installed here so a second setup call replaces only those.
_OWNED_ATTR = "_project_tracker_handler"


class _PackageFilter(logging.Filter):
    """Pass every record from `package`; records from anywhere else only at `foreign_level`+."""

    def __init__(self, package: str, foreign_level: int = logging.ERROR) -> None:
        super().__init__()
        self._package = package
        self._prefix = package + "."
        self._foreign_level = foreign_level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == self._package or record.name.startswith(self._prefix):
            return True
        return record.levelno >= self._foreign_level


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    *,
    log_dir: str | Path,
    level: int | str = logging.INFO,
    package: str = PACKAGE,
) -> Path:
    """
    Send `package` logs at `level` to stderr and everything at DEBUG to
    <log_dir>/project-tracker.log. Other libraries reach the console only at
    ERROR. Safe to call again: handlers from an earlier call are replaced,
    handlers installed by anyone else are left alone.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in [h for h in root.handlers if getattr(h, _OWNED_ATTR, False)]:
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_parse_level(level))
    console.addFilter(_PackageFilter(package))

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)

    for h in (console, file_handler):
        h.setFormatter(fmt)
        setattr(h, _OWNED_ATTR, True)
        root.addHandler(h)

    logging.captureWarnings(True)
    return log_file
