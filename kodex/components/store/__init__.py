"""
Store package.
"""

from .component_store_comp import (
    COMPONENT_SUFFIX,
    REQUIRED_FIELDS,
    component_from_record,
    list_component_files,
    load_components,
    parse_component_file,
)

__all__ = [
    "COMPONENT_SUFFIX",
    "REQUIRED_FIELDS",
    "component_from_record",
    "list_component_files",
    "load_components",
    "parse_component_file",
]
