#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from rich.markup import escape

from kodex.__version__ import __version__
from kodex.helpers.logging_helper import configure_logging, summarize_exception
from kodex.interfaces.cli.commands.build_cli import cmd_build
from kodex.interfaces.cli.commands.config_cli import cmd_config
from kodex.interfaces.cli.commands.init_cli import cmd_init
from kodex.interfaces.cli.commands.list_cli import cmd_list
from kodex.interfaces.cli.messages import Messages
from kodex.interfaces.cli.ui import console, print_error, print_warning
from kodex.services.config_svc import ConfigService

logger = logging.getLogger(__name__)


def _add_dir_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--components-dir", help="folder with the JSON components (default: ./components)")
    parser.add_argument("--dist-dir", help="output folder (default: ./dist)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="kodex",
        description="KodeX - bundle snippets from your private component library",
        epilog="Examples:\n"
        "  kodex                                      # Select components and generate files\n"
        "  kodex build --bundle                       # Generate one bundle file per type\n"
        "  kodex list                                 # Show all available components\n"
        "  kodex init                                 # Create components/ and dist/\n"
        "  kodex config --show                        # Print the effective configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--config", help="path to a YAML or JSON config file")
    p.add_argument("-v", "--verbose", action="store_true", help="show debug logging and tracebacks")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    # No subcommand means build
    p.set_defaults(func=cmd_build, bundle=None, components_dir=None, dist_dir=None)

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'kodex <command> --help' for command-specific help)",
    )

    # build: Interactive selection and file generation
    s = sub.add_parser("build", help="Select components and generate files (default)")
    mode = s.add_mutually_exclusive_group()
    mode.add_argument("--bundle", dest="bundle", action="store_true", default=None, help="bundle files by type without asking")
    mode.add_argument("--separate", dest="bundle", action="store_false", default=None, help="write one file per component without asking")
    _add_dir_options(s)
    s.set_defaults(func=cmd_build, bundle=None)

    # list: Show the library
    s = sub.add_parser("list", help="List available components by type and group")
    _add_dir_options(s)
    s.set_defaults(func=cmd_list)

    # init: Create project folders
    s = sub.add_parser("init", help="Create the components/ and dist/ folders")
    _add_dir_options(s)
    s.set_defaults(func=cmd_init)

    # config: Describe settings
    s = sub.add_parser("config", help="Describe the configurable options")
    s.add_argument("--show", action="store_true", help="print the effective merged configuration")
    s.set_defaults(func=cmd_config)

    return p


def _messages(args: argparse.Namespace) -> Messages:
    """Messages for the configured locale, for errors raised outside a command's own handling."""
    return Messages(ConfigService(config_path=getattr(args, "config", None)).locale)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(console, verbose=args.verbose)

    try:
        result: int = args.func(args)
    except KeyboardInterrupt:
        print_warning(escape(_messages(args).t("cancelled")))
        return 0
    except Exception as e:
        logger.debug("[cli] Command %s failed", args.cmd or "build", exc_info=True)
        print_error(escape(_messages(args).t("err_unexpected", error=summarize_exception(e))))
        return 1
    return result


if __name__ == "__main__":
    raise SystemExit(main())
