"""
Init command: create the components/ and dist/ folders.

Idempotent: existing folders are reported and left untouched.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from kodex.helpers.exceptions import OutputWriteError
from kodex.interfaces.cli.ui import print_error, print_info, print_success, show_header
from kodex.interfaces.cli.utils import build_context
from kodex.workflows.project.init_project_wf import init_project_workflow


def cmd_init(args: argparse.Namespace) -> int:
    """Ensure the project folders exist and report what was created."""
    ctx = build_context(args)
    msg = ctx.messages
    show_header(msg.t("header"))
    print_info(escape(msg.t("init_start")))

    try:
        statuses = init_project_workflow(ctx.components_dir, ctx.dist_dir)
    except OutputWriteError as e:
        print_error(escape(msg.t("err_write", path=e.path, reason=e.reason)))
        return 1

    for status in statuses:
        if status.created:
            print_success(escape(msg.t("init_created", path=status.path)))
        else:
            print_info(escape(msg.t("init_exists", path=status.path)))

    print_success(escape(msg.t("init_done")))
    print_info(escape(msg.t("init_next", path=ctx.components_dir)))
    return 0
