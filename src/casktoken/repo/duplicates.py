"""Locate the project root and detect already-existing cask files."""

from __future__ import annotations

import logging
from pathlib import Path

from casktoken.constants.config import DEFAULT_CASKS_DIR

logger = logging.getLogger(__name__)


def resolve_project_root(start: Path, casks_dir: str = DEFAULT_CASKS_DIR) -> Path:
    """Return the nearest ancestor of ``start`` holding a casks directory.

    Falls back to ``start`` itself when no ancestor has one.
    """
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / casks_dir).is_dir():
            return candidate
    logger.debug("No %s directory above %s", casks_dir, start)
    return start


def cask_path(root: Path, file_name: str, casks_dir: str = DEFAULT_CASKS_DIR) -> Path:
    """Path a cask file lives at: sharded by the file name's first character."""
    return root / casks_dir / file_name[0] / file_name


def find_existing_cask(root: Path, file_name: str, casks_dir: str = DEFAULT_CASKS_DIR) -> Path | None:
    """Return the path of an existing cask with this file name, if any."""
    path = cask_path(root, file_name, casks_dir)
    if path.is_file():
        logger.debug("Cask file already exists: %s", path)
        return path
    return None
