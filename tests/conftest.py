"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real filesystem under tmp_path for the component store and output tests
- A scripted ChoiceProvider instead of a terminal for the selection flow
"""

import json
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Union

import pytest

# Add project root to path so tests can import kodex package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from kodex.helpers.dto.component_dto import Component  # noqa: E402
from kodex.helpers.dto.selection_dto import Choice, SelectionState  # noqa: E402
from kodex.helpers.exceptions import SelectionCancelledError  # noqa: E402

Answer = Union[list[str], Callable[[Sequence[Choice]], list[str]], BaseException]


class ScriptedChoiceProvider:
    """
    ChoiceProvider test double.

    Each multi_select call consumes the next scripted answer: a list of raw
    values, a callable receiving the choices, or an exception to raise.
    """

    def __init__(self, answers: Sequence[Answer] = (), confirms: Sequence[bool | BaseException] = ()) -> None:
        self.answers = list(answers)
        self.confirms = list(confirms)
        self.calls: list[tuple[SelectionState, list[Choice], list[str]]] = []
        self.invalid_steps: list[SelectionState] = []
        self.confirm_messages: list[str] = []

    def multi_select(self, step: SelectionState, choices: Sequence[Choice], defaults: Sequence[str]) -> list[str]:
        self.calls.append((step, list(choices), list(defaults)))
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {step}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        if callable(answer):
            return answer(choices)
        return list(answer)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirm_messages.append(message)
        if not self.confirms:
            return default
        answer = self.confirms.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def on_invalid(self, step: SelectionState) -> None:
        self.invalid_steps.append(step)

    @property
    def steps(self) -> list[SelectionState]:
        return [call[0] for call in self.calls]


def pick(*labels: str, kinds: Sequence[str] = ("item",)) -> Callable[[Sequence[Choice]], list[str]]:
    """Answer that selects every choice of ``kinds`` whose label is in ``labels``."""

    def _answer(choices: Sequence[Choice]) -> list[str]:
        return [c.value for c in choices if c.kind in kinds and c.label in labels and c.value is not None]

    return _answer


def keep_defaults(choices: Sequence[Choice]) -> list[str]:
    """Placeholder answer used where the test only cares that a prompt happened."""
    return [c.value for c in choices if c.value is not None]


def make_component(
    title: str,
    type_: str = "css",
    group: str | None = None,
    description: str | None = None,
    content: str | None = None,
) -> Component:
    """Build a Component with sensible defaults."""
    return Component(
        title=title,
        description=description if description is not None else f"{title} description",
        type=type_,
        content=content if content is not None else f"/* {title} */",
        group=group,
        source_file=f"{title.lower().replace(' ', '-')}.json",
    )


def write_component_file(directory: Path, name: str, record: Any) -> Path:
    """Write one component record (or raw text) into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    if isinstance(record, str):
        path.write_text(record, encoding="utf-8")
    else:
        path.write_text(json.dumps(record), encoding="utf-8")
    return path


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """Components folder with a small mixed library (html, css, js; grouped and ungrouped)."""
    directory = tmp_path / "components"
    records = {
        "01-button.json": {"title": "Button", "description": "Primary button", "type": "html", "group": "forms", "content": "<button>Go</button>"},
        "02-input.json": {"title": "Input", "description": "Text input", "type": "html", "group": "forms", "content": "<input>"},
        "03-card.json": {"title": "Card", "description": "Content card", "type": "html", "content": "<div class=\"card\"></div>"},
        "04-button-style.json": {"title": "Button Style", "description": "Button CSS", "type": "CSS", "group": "forms", "content": ".btn { color: red; }"},
        "05-reset.json": {"title": "Reset", "description": "CSS reset", "type": "css", "content": "* { margin: 0; }"},
        "06-toggle.json": {"title": "Toggle", "description": "Toggle script", "type": "js", "group": "widgets", "content": "export const toggle = () => {};"},
    }
    for name, record in records.items():
        write_component_file(directory, name, record)
    return directory


@pytest.fixture
def scripted_provider() -> type[ScriptedChoiceProvider]:
    """The ScriptedChoiceProvider class, for tests that build their own script."""
    return ScriptedChoiceProvider


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast test without terminal interaction")
    config.addinivalue_line("markers", "integration: drives the CLI entry point end to end")


__all__ = [
    "ScriptedChoiceProvider",
    "SelectionCancelledError",
    "keep_defaults",
    "make_component",
    "pick",
    "write_component_file",
]
