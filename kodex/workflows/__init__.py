"""
Workflows package.
"""

from .build.build_components_wf import BuildResult, build_components_workflow
from .project.init_project_wf import DirectoryStatus, init_project_workflow
from .project.list_components_wf import LibraryListing, list_components_workflow
from .selection.select_components_wf import SelectionFlow, ask_bundle_workflow, select_components_workflow

__all__ = [
    "BuildResult",
    "DirectoryStatus",
    "LibraryListing",
    "SelectionFlow",
    "ask_bundle_workflow",
    "build_components_workflow",
    "init_project_workflow",
    "list_components_workflow",
    "select_components_workflow",
]
