"""
Build command: select components interactively and generate output files.

Architecture:
- Loads the component store through the CLI utils (errors become messages)
- Delegates selection and writing to build_components_workflow
- Never writes anything on load failure, empty selection or cancellation
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from kodex.components.taxonomy.taxonomy_comp import available_types, group_count
from kodex.helpers.dto.selection_dto import ChoiceProvider
from kodex.helpers.exceptions import OutputWriteError, SelectionCancelledError
from kodex.interfaces.cli.ui import (
    COLOR_INFO,
    COLOR_SUCCESS,
    console,
    print_error,
    print_success,
    print_warning,
    show_banner,
    show_controls,
    show_file_list,
)
from kodex.interfaces.cli.utils import (
    CliContext,
    build_context,
    create_choice_provider,
    format_types,
    load_components_or_report,
)
from kodex.workflows.build.build_components_wf import BuildResult, build_components_workflow


def cmd_build(args: argparse.Namespace, provider: ChoiceProvider | None = None) -> int:
    """
    Load components, run the three-step selection and write the result.

    Args:
        args: Parsed arguments (bundle, components_dir, dist_dir, config)
        provider: Choice provider; the rich terminal provider when None

    Returns:
        Exit code (0 = success or nothing to do, 1 = write failure)
    """
    ctx = build_context(args)
    msg = ctx.messages

    if ctx.config.get("ui.show_banner", True):
        show_banner(msg.t("tagline"))

    components = load_components_or_report(ctx)
    if components is None:
        return 0

    _show_startup_info(ctx, components)

    try:
        result = build_components_workflow(
            components,
            provider or create_choice_provider(ctx),
            output_dir=ctx.dist_dir,
            bundle=getattr(args, "bundle", None),
            bundle_question=msg.t("bundle_question"),
            default_bundle=bool(ctx.config.get("output.default_bundle", False)),
        )
    except SelectionCancelledError:
        print_warning(escape(msg.t("cancelled")))
        return 0
    except OutputWriteError as e:
        print_error(escape(msg.t("err_write", path=e.path, reason=e.reason)))
        return 1

    if result.status == "nothing_selected":
        print_error(escape(msg.t("nothing_selected")))
        return 0

    _show_result(ctx, result)
    return 0


def _show_startup_info(ctx: CliContext, components: list) -> None:
    """Categories, totals and the controls overview."""
    msg = ctx.messages
    types = available_types(components)
    console.print(f"📊 {msg.t('categories_detected', count=f'[{COLOR_INFO}]{len(types)}[/{COLOR_INFO}]', types=format_types(ctx, types))}")
    console.print(f"📦 {msg.t('components_loaded', count=f'[{COLOR_INFO}]{len(components)}[/{COLOR_INFO}]')}")
    groups = group_count(components)
    if groups:
        console.print(f"✨ {msg.t('groups_found', count=f'[{COLOR_INFO}]{groups}[/{COLOR_INFO}]')}")
    console.print()

    show_controls(msg.t("controls_title"), controls_rows(ctx))


def controls_rows(ctx: CliContext) -> list[tuple[str, str, str]]:
    """Key, color and description of each prompt control; confirm/cancel colors come from config."""
    msg = ctx.messages
    return [
        ("1,3-5", COLOR_INFO, msg.t("controls_toggle")),
        ("all / none", COLOR_INFO, msg.t("controls_all")),
        ("Enter", ctx.config.ui_color("confirm"), msg.t("controls_confirm")),
        ("Ctrl+C", ctx.config.ui_color("cancel"), msg.t("controls_exit")),
    ]


def _show_result(ctx: CliContext, result: BuildResult) -> None:
    """Selected count, written files and the output location."""
    msg = ctx.messages
    console.print(f"\n🎉 {msg.t('selected_total', count=f'[{COLOR_SUCCESS}]{len(result.selection)}[/{COLOR_SUCCESS}]')}")

    if result.bundle:
        show_file_list(msg.t("bundle_created"), [f.filename for f in result.files], icon="📦")
    else:
        show_file_list(msg.t("separate_created"), [f.filename for f in result.files], icon="📄")

    print_success(msg.t("build_success", count=f"[{COLOR_SUCCESS}]{len(result.selection)}[/{COLOR_SUCCESS}]"))
    console.print(f"📁 {msg.t('files_location', path=f'[{COLOR_INFO}]{escape(str(result.output_dir))}[/{COLOR_INFO}]')}")
