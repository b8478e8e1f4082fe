"""Output generator: write selected components to the output directory.

Two modes:
1. Separate: one file per selected component, ``slug(title)-<id>.<type>``
2. Bundle: one ``bundle.<type>`` per type, chunks prefixed with a comment header

Existing files with the same name are overwritten. Writes happen one at a
time; the first failure aborts the rest (files already written stay).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from kodex.helpers.dto.component_dto import GeneratedFile, OutputMode, SelectedComponent
from kodex.helpers.exceptions import OutputWriteError
from kodex.helpers.slug_helper import component_filename

logger = logging.getLogger(__name__)

BUNDLE_STEM = "bundle"
CHUNK_SEPARATOR = "\n\n"


# ---------------------------------------------------------------------------
# Low-level writes
# ---------------------------------------------------------------------------


def ensure_output_dir(output_dir: Path) -> Path:
    """Create ``output_dir`` (and parents) if needed."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise OutputWriteError(output_dir, getattr(e, "strerror", None) or str(e)) from e
    return output_dir


def write_text_file(path: Path, content: str, mode: OutputMode, component_count: int) -> GeneratedFile:
    """Write ``content`` verbatim (UTF-8, no newline translation)."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, ValueError) as e:
        raise OutputWriteError(path, getattr(e, "strerror", None) or str(e)) from e

    logger.debug("[output] Wrote %s (%d component(s))", path, component_count)
    return GeneratedFile(
        path=path,
        mode=mode,
        component_count=component_count,
        bytes_written=len(content.encode("utf-8")),
    )


# ---------------------------------------------------------------------------
# Separate mode
# ---------------------------------------------------------------------------


def separate_filename(item: SelectedComponent) -> str:
    """Filename for one component in separate mode."""
    return component_filename(item.title, item.type, item.sequence_id)


def generate_separate_files(selection: Sequence[SelectedComponent], output_dir: Path) -> list[GeneratedFile]:
    """Write each selected component to its own file."""
    written: list[GeneratedFile] = []
    for item in selection:
        path = output_dir / separate_filename(item)
        written.append(write_text_file(path, item.content, "separate", 1))
    return written


# ---------------------------------------------------------------------------
# Bundle mode
# ---------------------------------------------------------------------------


def bundle_header(item: SelectedComponent) -> str:
    """One-line comment placed above a component inside a bundle."""
    if item.sequence_id is None:
        return f"/* {item.title} - {item.description} */"
    return f"/* {item.title} - {item.description} (ID: {item.sequence_id}) */"


def group_by_type(selection: Sequence[SelectedComponent]) -> dict[str, list[SelectedComponent]]:
    """Group items by type; type order is first occurrence, item order is kept."""
    groups: dict[str, list[SelectedComponent]] = {}
    for item in selection:
        groups.setdefault(item.type, []).append(item)
    return groups


def render_bundle(items: Sequence[SelectedComponent]) -> str:
    """Concatenate items with their headers, separated by a blank line."""
    return CHUNK_SEPARATOR.join(f"{bundle_header(item)}\n{item.content}" for item in items)


def generate_bundled_files(selection: Sequence[SelectedComponent], output_dir: Path) -> list[GeneratedFile]:
    """Write one ``bundle.<type>`` file per selected type."""
    written: list[GeneratedFile] = []
    for type_, items in group_by_type(selection).items():
        path = output_dir / f"{BUNDLE_STEM}.{type_}"
        written.append(write_text_file(path, render_bundle(items), "bundle", len(items)))
    return written


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def generate_files(
    selection: Sequence[SelectedComponent],
    output_dir: str | Path,
    bundle: bool = False,
) -> list[GeneratedFile]:
    """
    Write the selection to ``output_dir``.

    Args:
        selection: Finalized selection in output order
        output_dir: Target directory, created if missing
        bundle: Bundle by type when True, one file per component otherwise

    Returns:
        Descriptors of the written files, in write order

    Raises:
        OutputWriteError: directory creation or a file write failed
    """
    output_dir = ensure_output_dir(Path(output_dir))
    if bundle:
        written = generate_bundled_files(selection, output_dir)
    else:
        written = generate_separate_files(selection, output_dir)
    logger.info("[output] Generated %d file(s) in %s", len(written), output_dir)
    return written
