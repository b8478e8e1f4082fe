"""
Output package.
"""

from .file_write_comp import (
    bundle_header,
    ensure_output_dir,
    generate_bundled_files,
    generate_files,
    generate_separate_files,
    group_by_type,
    render_bundle,
    separate_filename,
)

__all__ = [
    "bundle_header",
    "ensure_output_dir",
    "generate_bundled_files",
    "generate_files",
    "generate_separate_files",
    "group_by_type",
    "render_bundle",
    "separate_filename",
]
