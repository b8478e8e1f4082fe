"""
Project workflows package.
"""

from .init_project_wf import DirectoryStatus, ensure_directory, init_project_workflow
from .list_components_wf import GroupListing, LibraryListing, TypeListing, list_components_workflow

__all__ = [
    "DirectoryStatus",
    "GroupListing",
    "LibraryListing",
    "TypeListing",
    "ensure_directory",
    "init_project_workflow",
    "list_components_workflow",
]
