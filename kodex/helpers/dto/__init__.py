"""
DTO package.
"""

from .component_dto import Component, GeneratedFile, GroupRef, OutputMode, SelectedComponent
from .selection_dto import ALL_GROUPS, Choice, ChoiceKind, ChoiceProvider, SelectionState

__all__ = [
    "ALL_GROUPS",
    "Choice",
    "ChoiceKind",
    "ChoiceProvider",
    "Component",
    "GeneratedFile",
    "GroupRef",
    "OutputMode",
    "SelectedComponent",
    "SelectionState",
]
