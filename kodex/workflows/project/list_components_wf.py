"""List workflow: read-only overview of the component library."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from kodex.components.taxonomy.taxonomy_comp import UNGROUPED, available_types, build_structure, group_count
from kodex.helpers.dto.component_dto import Component


@dataclass
class GroupListing:
    """Components of one bucket; ``group`` is None for the ungrouped bucket."""

    group: str | None
    components: list[Component]


@dataclass
class TypeListing:
    """All buckets of one type, in store order."""

    type: str
    groups: list[GroupListing] = field(default_factory=list)

    @property
    def component_count(self) -> int:
        return sum(len(g.components) for g in self.groups)


@dataclass
class LibraryListing:
    """Overview returned by :func:`list_components_workflow`."""

    types: list[TypeListing]
    total_components: int
    total_groups: int

    @property
    def total_types(self) -> int:
        return len(self.types)


def list_components_workflow(components: Sequence[Component]) -> LibraryListing:
    """Group components by type (sorted) and group (store order) for display."""
    types = available_types(components)
    structure = build_structure(components, types)

    listings = []
    for type_ in types:
        buckets = structure.get(type_, {})
        listings.append(
            TypeListing(
                type=type_,
                groups=[
                    GroupListing(group=None if key == UNGROUPED else key, components=members)
                    for key, members in buckets.items()
                ],
            )
        )

    return LibraryListing(
        types=listings,
        total_components=len(components),
        total_groups=group_count(components),
    )
