"""Taxonomy index: types, groups and the type -> group -> components tree.

Everything here is derived on demand from the loaded component list; nothing
is cached. Bucket contents keep the store order.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Iterable, Sequence

from kodex.helpers.dto.component_dto import Component, GroupRef

# Bucket key for components without a group. A component whose group is
# literally "_ungrouped" is still offered as a group by available_groups, but
# build_structure files it into this shared bucket, so it gets no whole-group row.
UNGROUPED = "_ungrouped"

Structure = dict[str, dict[str, list[Component]]]


def available_types(components: Iterable[Component]) -> list[str]:
    """Distinct component types, sorted ascending."""
    return sorted({comp.type for comp in components})


def available_groups(components: Iterable[Component], selected_types: Collection[str]) -> list[GroupRef]:
    """
    Distinct (type, group) pairs among grouped components of the selected types.

    Pairs are returned in first-occurrence order.
    """
    seen: dict[GroupRef, None] = {}
    for comp in components:
        if comp.type not in selected_types:
            continue
        ref = comp.group_ref
        if ref is not None:
            seen.setdefault(ref, None)
    return list(seen)


def build_structure(
    components: Iterable[Component],
    selected_types: Collection[str],
    selected_groups: Collection[GroupRef] | None = None,
) -> Structure:
    """
    Partition components into ``type -> group key -> [components]``.

    Args:
        components: Components in store order
        selected_types: Types to keep
        selected_groups: Group restriction, or None for no restriction

    Returns:
        Nested dict; the group key is the group name or ``UNGROUPED``

    Note:
        The group restriction only applies to grouped components. Ungrouped
        components of a selected type are always kept.
    """
    allowed = set(selected_groups) if selected_groups is not None else None
    structure: Structure = {}

    for comp in components:
        if comp.type not in selected_types:
            continue

        ref = comp.group_ref
        if allowed is not None and ref is not None and ref not in allowed:
            continue

        key = comp.group if comp.group is not None else UNGROUPED
        structure.setdefault(comp.type, {}).setdefault(key, []).append(comp)

    return structure


def count_by_type(components: Iterable[Component]) -> dict[str, int]:
    """Number of components per type."""
    return dict(Counter(comp.type for comp in components))


def count_in_group(components: Iterable[Component], ref: GroupRef) -> int:
    """Number of components belonging to ``ref``."""
    return sum(1 for comp in components if comp.group_ref == ref)


def group_count(components: Sequence[Component]) -> int:
    """Number of distinct (type, group) pairs across all components."""
    return len(available_groups(components, available_types(components)))
