"""
Terminal choice provider built on rich.

Multi-choice prompts render as a numbered checklist. The user toggles rows by
number (``1,3-5``), uses ``all`` / ``none``, and confirms with an empty line.
Ctrl+C or end of input cancels the whole selection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from kodex.helpers.dto.selection_dto import Choice, SelectionState
from kodex.helpers.exceptions import SelectionCancelledError
from kodex.interfaces.cli.messages import Messages
from kodex.interfaces.cli.ui import COLOR_MUTED, console as default_console

logger = logging.getLogger(__name__)

SELECT_ALL = "all"
SELECT_NONE = "none"


@dataclass
class SelectionInput:
    """Parsed answer line of a checklist prompt."""

    confirm: bool = False
    select_all: bool = False
    select_none: bool = False
    toggles: list[int] = field(default_factory=list)  # 1-based row numbers
    unknown: list[str] = field(default_factory=list)


def parse_selection_input(text: str, row_count: int) -> SelectionInput:
    """
    Parse one answer line.

    Empty input confirms. Tokens are separated by commas or whitespace; each
    is a row number, an inclusive range ``a-b``, ``all`` or ``none``. Numbers
    outside ``1..row_count`` are reported as unknown.
    """
    result = SelectionInput()
    text = text.strip().lower()
    if not text:
        result.confirm = True
        return result

    for token in text.replace(",", " ").split():
        if token == SELECT_ALL:
            result.select_all = True
            continue
        if token == SELECT_NONE:
            result.select_none = True
            continue

        start_text, sep, end_text = token.partition("-")
        try:
            start = int(start_text)
            end = int(end_text) if sep else start
        except ValueError:
            result.unknown.append(token)
            continue

        if start > end:
            start, end = end, start
        if start < 1 or end > row_count:
            result.unknown.append(token)
            continue
        result.toggles.extend(range(start, end + 1))

    return result


class RichChoiceProvider:
    """ChoiceProvider that talks to the user through a rich console."""

    def __init__(
        self,
        messages: Messages,
        type_color: Callable[[str], str],
        ui_color: Callable[[str], str] | None = None,
        console: Console | None = None,
    ) -> None:
        self.messages = messages
        self.type_color = type_color
        self.ui_color = ui_color or (lambda name: {"selected": "cyan", "unselected": COLOR_MUTED}.get(name, "white"))
        self.console = console or default_console

    # ------------------------------------------------------------------
    # ChoiceProvider protocol
    # ------------------------------------------------------------------

    def multi_select(self, step: SelectionState, choices: Sequence[Choice], defaults: Sequence[str]) -> list[str]:
        rows = [c for c in choices if c.selectable]
        selected = {c.value for c in rows if c.value in set(defaults)}

        self.console.print(f"\n[bold]{escape(self.messages.t(f'step_{step.value}'))}[/bold]")
        while True:
            self._render(choices, rows, selected)
            answer = self._ask(self.messages.t("prompt_input"))
            parsed = parse_selection_input(answer, len(rows))

            for token in parsed.unknown:
                self.console.print(f"[yellow]{escape(self.messages.t('invalid_token', token=token))}[/yellow]")

            if parsed.confirm:
                return [c.value for c in rows if c.value in selected and c.value is not None]

            if parsed.select_none:
                selected.clear()
            if parsed.select_all:
                selected = {c.value for c in rows}
            for number in parsed.toggles:
                value = rows[number - 1].value
                if value in selected:
                    selected.discard(value)
                else:
                    selected.add(value)

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return Confirm.ask(escape(message), default=default, console=self.console)
        except (KeyboardInterrupt, EOFError) as e:
            raise SelectionCancelledError("Prompt cancelled") from e

    def on_invalid(self, step: SelectionState) -> None:
        self.console.print(f"[bold yellow]⚠[/bold yellow] {escape(self.messages.t(f'invalid_{step.value}'))}")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        try:
            return Prompt.ask(f"[{COLOR_MUTED}]{escape(prompt)}[/{COLOR_MUTED}]", default="", show_default=False, console=self.console)
        except (KeyboardInterrupt, EOFError) as e:
            raise SelectionCancelledError("Prompt cancelled") from e

    def _render(self, choices: Sequence[Choice], rows: Sequence[Choice], selected: set[str | None]) -> None:
        table = Table(box=box.SIMPLE, show_header=False, pad_edge=False)
        table.add_column(justify="right", style=COLOR_MUTED, no_wrap=True)
        table.add_column(no_wrap=True)
        table.add_column()

        numbers = {id(c): index for index, c in enumerate(rows, 1)}
        for choice in choices:
            if not choice.selectable:
                table.add_row("", "", self.render_label(choice))
                continue
            on = choice.value in selected
            color = self.ui_color("selected" if on else "unselected")
            mark = f"[{color}]{'◉' if on else '◯'}[/{color}]"
            table.add_row(str(numbers[id(choice)]), mark, self.render_label(choice))

        self.console.print(table)

    def render_label(self, choice: Choice) -> str:
        """Markup for one choice row, by kind."""
        components_word = self.messages.t("components_word")
        color = self.type_color(choice.type) if choice.type else "white"

        if choice.kind == "separator":
            return f"\n[bold {color}]── {escape((choice.type or choice.label).upper())} ──[/bold {color}]"
        if choice.kind == "type":
            return f"[{color}]{escape(choice.label.upper())}[/{color}] ({choice.count} {components_word})"
        if choice.kind == "all_groups":
            return f"[white]{escape(self.messages.t('all_groups'))}[/white]"
        if choice.kind == "group":
            type_label = escape((choice.type or "").upper())
            return f"[{color}]{type_label}[/{color}] › [white]{escape(choice.label)}[/white] ({choice.count} {components_word})"
        if choice.kind == "group_bundle":
            return f"[{color}]📁 {escape(choice.label.upper())}[/{color}] [{COLOR_MUTED}]({choice.count} {components_word})[/{COLOR_MUTED}]"

        prefix = "  " if choice.indent else ""
        return f"{prefix}[{color}]•[/{color}] {escape(choice.label)} - [{COLOR_MUTED}]{escape(choice.description)}[/{COLOR_MUTED}]"
