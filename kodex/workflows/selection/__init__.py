"""
Selection workflows package.
"""

from .select_components_wf import (
    ItemChoices,
    SelectionFlow,
    ask_bundle_workflow,
    build_group_choices,
    build_item_choices,
    build_type_choices,
    finalize_selection,
    select_components_workflow,
)

__all__ = [
    "ItemChoices",
    "SelectionFlow",
    "ask_bundle_workflow",
    "build_group_choices",
    "build_item_choices",
    "build_type_choices",
    "finalize_selection",
    "select_components_workflow",
]
