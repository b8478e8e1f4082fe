"""Choice DTOs and the choice-provider protocol used by the selection flow."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol, runtime_checkable

ChoiceKind = Literal["separator", "type", "all_groups", "group", "group_bundle", "item"]

ALL_GROUPS = "__all_groups__"


class SelectionState(str, Enum):
    """States of the selection flow, in the order they are visited."""

    SELECT_TYPES = "select_types"
    SELECT_GROUPS = "select_groups"
    SELECT_ITEMS = "select_items"
    FINALIZE = "finalize"
    DONE = "done"


@dataclass(frozen=True)
class Choice:
    """
    One row of a multi-choice prompt.

    The flow fills in the structured fields; the provider decides how to
    render them. Separators carry ``value=None`` and can never be picked.

    Kinds:
    - "separator": type heading in the component list
    - "type": a category in step 1
    - "all_groups": the synthetic "include every group" option in step 2
    - "group": a (type, group) pair in step 2
    - "group_bundle": "select this entire group" in step 3
    - "item": a single component in step 3
    """

    kind: ChoiceKind
    value: str | None
    label: str
    type: str | None = None
    group: str | None = None
    description: str = ""
    count: int = 0
    indent: bool = False

    @property
    def selectable(self) -> bool:
        return self.kind != "separator"


@runtime_checkable
class ChoiceProvider(Protocol):
    """Protocol for the interactive collaborator that answers selection prompts.

    The terminal implementation lives in the CLI layer; tests supply a
    scripted provider.
    """

    def multi_select(self, step: SelectionState, choices: Sequence[Choice], defaults: Sequence[str]) -> list[str]:
        """Ask the user to pick any number of choices.

        Args:
            step: Which selection step is asking (drives the prompt text)
            choices: Rows to show, separators included
            defaults: Values pre-selected when the user just confirms

        Returns:
            The confirmed choice values

        Raises:
            SelectionCancelledError: the user aborted the prompt

        """
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    def on_invalid(self, step: SelectionState) -> None:
        """Called when a confirmed selection was empty and the step re-prompts."""
        ...
