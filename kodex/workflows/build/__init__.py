"""
Build workflows package.
"""

from .build_components_wf import BuildResult, BuildStatus, build_components_workflow

__all__ = ["BuildResult", "BuildStatus", "build_components_workflow"]
