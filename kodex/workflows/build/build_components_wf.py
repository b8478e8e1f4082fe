"""Build workflow: selection flow, bundle decision, file generation.

The caller loads the components first (so it can report load errors and show
startup info); this workflow takes them from there. Nothing is written unless
the selection is non-empty and every prompt was answered.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from kodex.components.output.file_write_comp import generate_files
from kodex.helpers.dto.component_dto import Component, GeneratedFile, SelectedComponent
from kodex.helpers.dto.selection_dto import ChoiceProvider
from kodex.workflows.selection.select_components_wf import ask_bundle_workflow, select_components_workflow

logger = logging.getLogger(__name__)

BuildStatus = Literal["generated", "nothing_selected"]


@dataclass
class BuildResult:
    """Outcome of one build run."""

    status: BuildStatus
    output_dir: Path
    bundle: bool = False
    selection: list[SelectedComponent] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)


def build_components_workflow(
    components: Sequence[Component],
    provider: ChoiceProvider,
    output_dir: str | Path,
    bundle: bool | None = None,
    bundle_question: str = "Bundle the files by type?",
    default_bundle: bool = False,
) -> BuildResult:
    """
    Select components interactively and write them to ``output_dir``.

    Args:
        components: Loaded components in store order
        provider: Interactive choice provider
        output_dir: Directory the files are written to
        bundle: Output mode; None asks the user
        bundle_question: Prompt text for the bundle question
        default_bundle: Default answer of the bundle question

    Returns:
        BuildResult with status "nothing_selected" (no writes) or "generated"

    Raises:
        SelectionCancelledError: a prompt was cancelled (no writes)
        OutputWriteError: writing failed (files written before the failure stay)
    """
    output_dir = Path(output_dir)
    selection = select_components_workflow(components, provider)
    if not selection:
        logger.info("[build] Nothing selected, no files written")
        return BuildResult(status="nothing_selected", output_dir=output_dir)

    if bundle is None:
        bundle = ask_bundle_workflow(provider, bundle_question, default=default_bundle)

    files = generate_files(selection, output_dir, bundle=bundle)
    return BuildResult(
        status="generated",
        output_dir=output_dir,
        bundle=bundle,
        selection=selection,
        files=files,
    )
