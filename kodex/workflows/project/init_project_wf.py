"""Init workflow: create the components and output directories."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from kodex.helpers.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryStatus:
    """Whether a project directory was created by this run."""

    path: Path
    created: bool


def ensure_directory(path: Path) -> DirectoryStatus:
    """Create ``path`` if missing; never touches an existing directory's content."""
    if path.is_dir():
        return DirectoryStatus(path=path, created=False)
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
    logger.info("[init] Created %s", path)
    return DirectoryStatus(path=path, created=True)


def init_project_workflow(components_dir: str | Path, dist_dir: str | Path) -> list[DirectoryStatus]:
    """
    Ensure the project directories exist. Idempotent.

    Returns:
        One status per directory, components first

    Raises:
        OutputWriteError: a directory could not be created (e.g. a file is in the way)
    """
    return [ensure_directory(Path(components_dir)), ensure_directory(Path(dist_dir))]
