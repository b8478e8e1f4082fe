"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from kodex.components.store.component_store_comp import load_components
from kodex.helpers.dto.component_dto import Component
from kodex.helpers.dto.selection_dto import ChoiceProvider
from kodex.helpers.exceptions import (
    ComponentParseError,
    ComponentsDirNotFoundError,
    EmptyComponentStoreError,
)
from kodex.interfaces.cli.messages import Messages
from kodex.interfaces.cli.prompt_provider import RichChoiceProvider
from kodex.interfaces.cli.ui import colored, print_error
from kodex.services.config_svc import ConfigService

__all__ = [
    "CliContext",
    "build_context",
    "create_choice_provider",
    "format_types",
    "load_components_or_report",
]


@dataclass
class CliContext:
    """Per-invocation state shared by the command handlers."""

    config: ConfigService
    messages: Messages
    components_dir: Path
    dist_dir: Path


def build_context(args: argparse.Namespace) -> CliContext:
    """Compose config once and resolve directories (CLI flags win over config)."""
    config = ConfigService(config_path=getattr(args, "config", None))
    components_dir = getattr(args, "components_dir", None)
    dist_dir = getattr(args, "dist_dir", None)
    return CliContext(
        config=config,
        messages=Messages(config.locale),
        components_dir=Path(components_dir) if components_dir else config.components_dir,
        dist_dir=Path(dist_dir) if dist_dir else config.dist_dir,
    )


def create_choice_provider(ctx: CliContext) -> ChoiceProvider:
    """Terminal provider for the interactive selection."""
    return RichChoiceProvider(ctx.messages, type_color=ctx.config.type_color, ui_color=ctx.config.ui_color)


def format_types(ctx: CliContext, types: list[str]) -> str:
    """Comma-separated, colorized upper-case type names."""
    return ", ".join(colored(t.upper(), ctx.config.type_color(t)) for t in types)


def load_components_or_report(ctx: CliContext) -> list[Component] | None:
    """
    Load the component store, printing a user-facing message on failure.

    Returns:
        The components, or None when loading failed (message already printed)
    """
    try:
        return load_components(ctx.components_dir)
    except ComponentsDirNotFoundError as e:
        print_error(escape(ctx.messages.t("err_dir_missing", path=e.path)))
    except EmptyComponentStoreError as e:
        print_error(escape(ctx.messages.t("err_empty", path=e.path)))
    except ComponentParseError as e:
        print_error(escape(ctx.messages.t("err_parse", error=e)))
    return None
