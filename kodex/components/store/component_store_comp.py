"""Component store: load component records from a directory of JSON files.

One JSON object per file. Required fields are ``title``, ``description``,
``type`` and ``content``; ``group`` is optional. A single bad file aborts the
whole load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from kodex.helpers.dto.component_dto import Component
from kodex.helpers.exceptions import (
    ComponentParseError,
    ComponentsDirNotFoundError,
    EmptyComponentStoreError,
)

logger = logging.getLogger(__name__)

COMPONENT_SUFFIX = ".json"
REQUIRED_FIELDS = ("title", "description", "type", "content")
FORBIDDEN_TYPE_CHARS = ("/", "\\", "\x00")


def list_component_files(directory: Path) -> list[Path]:
    """Return the component files of ``directory`` in sorted filename order."""
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == COMPONENT_SUFFIX),
        key=lambda p: p.name,
    )


def load_components(directory: str | Path) -> list[Component]:
    """
    Load every component record in ``directory``.

    Args:
        directory: Folder holding ``*.json`` component files

    Returns:
        Components in sorted filename order

    Raises:
        ComponentsDirNotFoundError: directory is missing or not a directory
        EmptyComponentStoreError: no component files in the directory
        ComponentParseError: a file is not a valid component record
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ComponentsDirNotFoundError(directory)

    files = list_component_files(directory)
    if not files:
        raise EmptyComponentStoreError(directory)

    components = [parse_component_file(path) for path in files]
    logger.debug("[store] Loaded %d components from %s", len(components), directory)
    return components


def parse_component_file(path: Path) -> Component:
    """Read and validate a single component file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ComponentParseError(path, f"cannot read file ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ComponentParseError(path, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e

    return component_from_record(data, source_file=path.name, path=path)


def component_from_record(data: Any, source_file: str, path: Path | None = None) -> Component:
    """
    Build a Component from a decoded JSON value.

    String fields are coerced with ``str()``; ``type`` is stripped and
    lowercased and must not be empty. An empty or null ``group`` means
    ungrouped. Unknown keys are ignored.
    """
    where = path if path is not None else Path(source_file)
    if not isinstance(data, dict):
        raise ComponentParseError(where, "expected a JSON object")

    missing = [field for field in REQUIRED_FIELDS if data.get(field) is None]
    if missing:
        raise ComponentParseError(where, f"missing required field(s): {', '.join(missing)}")

    type_ = str(data["type"]).strip().lower()
    if not type_:
        raise ComponentParseError(where, "field 'type' must not be empty")
    # type becomes a file extension inside the output directory
    if any(char in type_ for char in FORBIDDEN_TYPE_CHARS):
        raise ComponentParseError(where, f"field 'type' must not contain path separators or NUL: {type_!r}")

    group = data.get("group")
    group = str(group) if group not in (None, "") else None

    return Component(
        title=str(data["title"]),
        description=str(data["description"]),
        type=type_,
        content=str(data["content"]),
        group=group,
        source_file=source_file,
    )
