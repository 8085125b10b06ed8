"""Logging configuration for alias-it.

Logs to both:
- ~/.config/alias-it/alias-it.log (persistent, 1 MB cap, 2 backups)
- stderr (only warnings and above, so normal output stays clean)
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "alias-it.log"

_LOG_MAX_BYTES = 1024 * 1024
_LOG_BACKUP_COUNT = 2


def log_dir() -> Path:
    return Path.home() / ".config" / "alias-it"


def setup_logging(debug: bool = False) -> None:
    """Configure the alias_it logger tree. Safe to call more than once."""
    root = logging.getLogger("alias_it")
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    try:
        directory = log_dir()
        directory.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(directory / LOG_FILE_NAME),
            maxBytes=_LOG_MAX_BYTES,
            backupCount=_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except (OSError, RuntimeError):
        # No home directory or a read-only one: stderr only.
        fh = None
    if fh is not None:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setLevel(logging.DEBUG if debug else logging.WARNING)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(sh)
