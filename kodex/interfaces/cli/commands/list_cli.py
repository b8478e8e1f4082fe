"""
List command: print the component library grouped by type and group.

Read-only: no selection, no file writes.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from kodex.interfaces.cli.ui import COLOR_INFO, COLOR_MUTED, colored, console, show_header
from kodex.interfaces.cli.utils import build_context, load_components_or_report
from kodex.workflows.project.list_components_wf import list_components_workflow


def cmd_list(args: argparse.Namespace) -> int:
    """Show every component by type (sorted) and group, with totals."""
    ctx = build_context(args)
    msg = ctx.messages
    show_header(msg.t("header"))

    components = load_components_or_report(ctx)
    if components is None:
        return 0

    listing = list_components_workflow(components)

    console.print(f"\n📋 {escape(msg.t('list_title'))}:")
    console.print("=" * 50)

    for type_listing in listing.types:
        color = ctx.config.type_color(type_listing.type)
        console.print(f"\n🏷️  {colored(type_listing.type.upper(), color)}")

        for group in type_listing.groups:
            if group.group is not None:
                console.print(f"   [{COLOR_MUTED}]└─[/{COLOR_MUTED}] [white]{escape(group.group)}[/white]")
            prefix = "     " if group.group is not None else "   "
            for comp in group.components:
                console.print(f"{prefix}{colored('•', color)} {escape(comp.title)}")
                console.print(f"{prefix}  [{COLOR_MUTED}]{escape(comp.description)}[/{COLOR_MUTED}]")

    console.print(
        "\n📊 "
        + msg.t(
            "list_total",
            components=f"[{COLOR_INFO}]{listing.total_components}[/{COLOR_INFO}]",
            types=f"[{COLOR_INFO}]{listing.total_types}[/{COLOR_INFO}]",
        )
    )
    if listing.total_groups > 0:
        console.print(f"🗂️  {msg.t('list_groups', count=f'[{COLOR_INFO}]{listing.total_groups}[/{COLOR_INFO}]')}")

    console.print(f"\n⚙️  {msg.t('config_hint', file=f'[{COLOR_INFO}]kodex.yaml[/{COLOR_INFO}]')}")
    return 0
