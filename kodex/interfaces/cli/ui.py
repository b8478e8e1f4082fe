#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_MUTED = "bright_black"

BANNER = r"""
  __    __                  __            __    __          ______   __        ______
/  |  /  |                /  |          /  |  /  |        /      \ /  |      /      |
$$ | /$$/   ______    ____$$ |  ______  $$ |  $$ |       /$$$$$$  |$$ |      $$$$$$/
$$ |/$$/   /      \  /    $$ | /      \ $$  \/$$/ ______ $$ |  $$/ $$ |        $$ |
$$  $$<   /$$$$$$  |/$$$$$$$ |/$$$$$$  | $$  $$< /      |$$ |      $$ |        $$ |
$$$$$  \  $$ |  $$ |$$ |  $$ |$$    $$ |  $$$$  \$$$$$$/ $$ |   __ $$ |        $$ |
$$ |$$  \ $$ \__$$ |$$ \__$$ |$$$$$$$$/  $$ /$$  |       $$ \__/  |$$ |_____  _$$ |_
$$ | $$  |$$    $$/ $$    $$ |$$       |$$ |  $$ |       $$    $$/ $$       |/ $$   |
$$/   $$/  $$$$$$/   $$$$$$$/  $$$$$$$/ $$/   $$/         $$$$$$/  $$$$$$$$/ $$$$$$/
"""


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: RenderableType, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def colored(text: str, color: str) -> str:
    """Wrap user text in a color tag, escaping any markup it contains."""
    return f"[{color}]{escape(text)}[/{color}]"


def show_banner(tagline: str):
    """Print the ASCII banner shown before a build."""
    console.print(Text(BANNER, style=COLOR_INFO))
    console.print(f"[{COLOR_MUTED}]{' ' * 15}{escape(tagline)}[/{COLOR_MUTED}]\n")


def show_header(title: str):
    """Print the short header used by non-build commands."""
    console.print(f"[bold {COLOR_INFO}]🔧 {escape(title)}[/bold {COLOR_INFO}]")
    console.print("=" * 30)


def show_controls(title: str, rows: Iterable[tuple[str, str, str]]):
    """Show the key-binding overview as a small panel of (key, color, description) rows."""
    table = Table.grid(padding=(0, 2))
    table.add_column(no_wrap=True)
    table.add_column()
    for key, color, description in rows:
        table.add_row(f"[{color}]{escape(key)}[/{color}]", escape(description))
    console.print(
        Panel(table, title=f"[{COLOR_MUTED}]{escape(title)}[/{COLOR_MUTED}]", border_style=COLOR_MUTED, box=box.SQUARE, expand=False)
    )


def show_file_list(title: str, filenames: Iterable[str], icon: str = "📄"):
    """Print a heading followed by one line per generated file."""
    console.print(f"\n[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(title)}")
    for name in filenames:
        console.print(f"   {icon} {escape(name)}")


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
