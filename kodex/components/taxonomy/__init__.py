"""
Taxonomy package.
"""

from .taxonomy_comp import (
    UNGROUPED,
    Structure,
    available_groups,
    available_types,
    build_structure,
    count_by_type,
    count_in_group,
    group_count,
)

__all__ = [
    "UNGROUPED",
    "Structure",
    "available_groups",
    "available_types",
    "build_structure",
    "count_by_type",
    "count_in_group",
    "group_count",
]
