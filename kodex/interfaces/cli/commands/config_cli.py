"""
Config command: describe the configurable options.

Read-only. ``--show`` additionally prints the effective merged configuration.
"""

from __future__ import annotations

import argparse

import yaml
from rich.markup import escape
from rich.syntax import Syntax

from kodex.interfaces.cli.ui import COLOR_INFO, InfoPanel, console, show_header
from kodex.interfaces.cli.utils import build_context
from kodex.services.config_svc import LOCAL_CONFIG_FILES

OPTION_KEYS = (
    "config_paths",
    "config_type_colors",
    "config_colors",
    "config_locale",
    "config_banner",
    "config_output",
)


def cmd_config(args: argparse.Namespace) -> int:
    """Print the config file locations and available settings."""
    ctx = build_context(args)
    msg = ctx.messages
    show_header(msg.t("header"))

    files = getattr(args, "config", None) or " / ".join(LOCAL_CONFIG_FILES)
    console.print(f"\n⚙️  {msg.t('config_file', file=f'[{COLOR_INFO}]{escape(str(files))}[/{COLOR_INFO}]')}")
    console.print(f"\n📝 {escape(msg.t('config_settings'))}")
    for key in OPTION_KEYS:
        console.print(f"   • {escape(msg.t(key))}")

    if getattr(args, "show", False):
        rendered = yaml.safe_dump(ctx.config.get_config(), sort_keys=False, allow_unicode=True)
        console.print()
        InfoPanel.show(msg.t("config_effective"), Syntax(rendered, "yaml"))
    return 0
