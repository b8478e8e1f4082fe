"""Interactive component selection workflow.

Narrows the loaded components down to the final ordered selection in three
prompts, then finalizes:

    SELECT_TYPES -> SELECT_GROUPS -> SELECT_ITEMS -> FINALIZE -> DONE

Prompts go through an injected ChoiceProvider. An empty confirmed set
re-prompts the same step. Cancellation propagates as SelectionCancelledError
and leaves no partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from kodex.components.taxonomy.taxonomy_comp import (
    UNGROUPED,
    Structure,
    available_groups,
    available_types,
    build_structure,
    count_by_type,
    count_in_group,
)
from kodex.helpers.dto.component_dto import Component, GroupRef, SelectedComponent
from kodex.helpers.dto.selection_dto import ALL_GROUPS, Choice, ChoiceProvider, SelectionState
from kodex.helpers.exceptions import SelectionCancelledError

logger = logging.getLogger(__name__)


@dataclass
class ItemChoices:
    """Flattened step-3 choices plus what each selectable value expands to."""

    choices: list[Choice] = field(default_factory=list)
    expansions: dict[str, list[Component]] = field(default_factory=dict)


def build_type_choices(components: Sequence[Component], types: Sequence[str]) -> list[Choice]:
    """Step 1 rows: one per type with its component count."""
    counts = count_by_type(components)
    return [Choice(kind="type", value=t, label=t, type=t, count=counts.get(t, 0)) for t in types]


def build_group_choices(components: Sequence[Component], groups: Sequence[GroupRef]) -> tuple[list[Choice], dict[str, GroupRef]]:
    """Step 2 rows: the synthetic "all groups" row followed by one row per group."""
    choices = [Choice(kind="all_groups", value=ALL_GROUPS, label=ALL_GROUPS)]
    refs: dict[str, GroupRef] = {}
    for index, ref in enumerate(groups):
        value = f"group:{index}"
        refs[value] = ref
        choices.append(
            Choice(
                kind="group",
                value=value,
                label=ref.group,
                type=ref.type,
                group=ref.group,
                count=count_in_group(components, ref),
            )
        )
    return choices, refs


def build_item_choices(structure: Structure, multiple_types: bool) -> ItemChoices:
    """
    Flatten the structure into step 3 rows.

    For every type: a separator (only when several types are active), then per
    bucket a "whole group" row (real groups only) followed by one row per
    component.
    """
    result = ItemChoices()
    item_index = 0
    group_index = 0

    for type_, buckets in structure.items():
        if multiple_types:
            result.choices.append(Choice(kind="separator", value=None, label=type_, type=type_))

        for group_key, members in buckets.items():
            grouped = group_key != UNGROUPED
            if grouped:
                value = f"group:{group_index}"
                group_index += 1
                result.expansions[value] = list(members)
                result.choices.append(
                    Choice(
                        kind="group_bundle",
                        value=value,
                        label=group_key,
                        type=type_,
                        group=group_key,
                        count=len(members),
                    )
                )

            for comp in members:
                value = f"item:{item_index}"
                item_index += 1
                result.expansions[value] = [comp]
                result.choices.append(
                    Choice(
                        kind="item",
                        value=value,
                        label=comp.title,
                        type=type_,
                        group=comp.group,
                        description=comp.description,
                        indent=grouped,
                    )
                )

    return result


def finalize_selection(item_choices: ItemChoices, confirmed: Sequence[str]) -> list[SelectedComponent]:
    """
    Expand confirmed values in flattened-list order and number the result.

    A group row expands to every member of its bucket. Duplicates are kept:
    picking a group and one of its members yields that member twice.
    """
    chosen = set(confirmed)
    selection: list[SelectedComponent] = []
    for choice in item_choices.choices:
        if choice.value is None or choice.value not in chosen:
            continue
        for comp in item_choices.expansions[choice.value]:
            selection.append(SelectedComponent(component=comp, sequence_id=len(selection)))
    return selection


class SelectionFlow:
    """
    Finite state machine driving the three selection prompts.

    Attributes:
        state: Current state; DONE once ``run`` returned
        selected_types: Types kept after step 1
        selected_groups: Group restriction after step 2 (None = no restriction)
        result: Finalized selection after FINALIZE
    """

    def __init__(self, components: Sequence[Component], provider: ChoiceProvider) -> None:
        self.components = list(components)
        self.provider = provider
        self.state = SelectionState.SELECT_TYPES
        self.selected_types: list[str] = []
        self.selected_groups: list[GroupRef] | None = None
        self.item_choices = ItemChoices()
        self.confirmed_items: list[str] = []
        self.result: list[SelectedComponent] = []
        self._handlers: dict[SelectionState, Callable[[], SelectionState]] = {
            SelectionState.SELECT_TYPES: self._select_types,
            SelectionState.SELECT_GROUPS: self._select_groups,
            SelectionState.SELECT_ITEMS: self._select_items,
            SelectionState.FINALIZE: self._finalize,
        }

    def run(self) -> list[SelectedComponent]:
        """Run every state until DONE and return the finalized selection."""
        while self.state is not SelectionState.DONE:
            logger.debug("[selection] Entering %s", self.state.value)
            self.state = self._handlers[self.state]()
        return self.result

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _select_types(self) -> SelectionState:
        types = available_types(self.components)
        if not types:
            return SelectionState.DONE

        if len(types) < 2:
            self.selected_types = types
            return SelectionState.SELECT_GROUPS

        choices = build_type_choices(self.components, types)
        self.selected_types = self._prompt(SelectionState.SELECT_TYPES, choices, defaults=types)
        return SelectionState.SELECT_GROUPS

    def _select_groups(self) -> SelectionState:
        groups = available_groups(self.components, self.selected_types)
        if not groups:
            self.selected_groups = None
            return SelectionState.SELECT_ITEMS

        choices, refs = build_group_choices(self.components, groups)
        picked = self._prompt(SelectionState.SELECT_GROUPS, choices, defaults=[ALL_GROUPS])
        if ALL_GROUPS in picked:
            self.selected_groups = None
        else:
            self.selected_groups = [refs[value] for value in picked]
        return SelectionState.SELECT_ITEMS

    def _select_items(self) -> SelectionState:
        structure = build_structure(self.components, self.selected_types, self.selected_groups)
        self.item_choices = build_item_choices(structure, multiple_types=len(self.selected_types) > 1)
        if not self.item_choices.expansions:
            return SelectionState.DONE

        self.confirmed_items = self._prompt(SelectionState.SELECT_ITEMS, self.item_choices.choices, defaults=[])
        return SelectionState.FINALIZE

    def _finalize(self) -> SelectionState:
        self.result = finalize_selection(self.item_choices, self.confirmed_items)
        logger.info("[selection] %d component(s) selected", len(self.result))
        return SelectionState.DONE

    # ------------------------------------------------------------------
    # Prompt helper
    # ------------------------------------------------------------------

    def _prompt(self, step: SelectionState, choices: Sequence[Choice], defaults: Sequence[str]) -> list[str]:
        """Ask until a non-empty selection of known values is confirmed, in choice order."""
        known = [c.value for c in choices if c.selectable and c.value is not None]
        while True:
            try:
                answer = self.provider.multi_select(step, choices, defaults)
            except (KeyboardInterrupt, EOFError) as e:
                raise SelectionCancelledError(f"Selection cancelled at {step.value}") from e

            picked = set(answer)
            ordered = [value for value in known if value in picked]
            if ordered:
                return ordered
            self.provider.on_invalid(step)


def select_components_workflow(components: Sequence[Component], provider: ChoiceProvider) -> list[SelectedComponent]:
    """Run the full selection flow; an empty list means nothing was selected."""
    return SelectionFlow(components, provider).run()


def ask_bundle_workflow(provider: ChoiceProvider, message: str, default: bool = False) -> bool:
    """Ask whether the selection should be bundled by type."""
    try:
        return provider.confirm(message, default=default)
    except (KeyboardInterrupt, EOFError) as e:
        raise SelectionCancelledError("Selection cancelled at bundle question") from e
