"""Component DTOs shared by the store, taxonomy, selection and output layers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

OutputMode = Literal["separate", "bundle"]


@dataclass(frozen=True)
class Component:
    """
    One code snippet record loaded from ``components/*.json``.

    ``group`` is None for ungrouped components. ``source_file`` is the
    originating filename and is only used in diagnostics.
    """

    title: str
    description: str
    type: str  # Lowercase category key, also the output file extension
    content: str
    group: str | None = None
    source_file: str = ""

    @property
    def group_ref(self) -> GroupRef | None:
        """The (type, group) pair of this component, or None when ungrouped."""
        if self.group is None:
            return None
        return GroupRef(type=self.type, group=self.group)


@dataclass(frozen=True)
class GroupRef:
    """A group within a type."""

    type: str
    group: str

    def __str__(self) -> str:
        return f"{self.type}:{self.group}"


@dataclass(frozen=True)
class SelectedComponent:
    """
    A component finalized by the selection flow.

    ``sequence_id`` is unique within one selection run and only disambiguates
    generated filenames and bundle headers. None means the item did not come
    from a selection run.
    """

    component: Component
    sequence_id: int | None = None

    @property
    def title(self) -> str:
        return self.component.title

    @property
    def description(self) -> str:
        return self.component.description

    @property
    def type(self) -> str:
        return self.component.type

    @property
    def content(self) -> str:
        return self.component.content


@dataclass(frozen=True)
class GeneratedFile:
    """Descriptor of one file written by the output generator."""

    path: Path
    mode: OutputMode
    component_count: int
    bytes_written: int

    @property
    def filename(self) -> str:
        return self.path.name
