"""
Helpers package.
"""

from .dto.component_dto import Component, GeneratedFile, GroupRef, SelectedComponent
from .exceptions import (
    ComponentParseError,
    ComponentsDirNotFoundError,
    ComponentStoreError,
    EmptyComponentStoreError,
    KodexError,
    OutputWriteError,
    SelectionCancelledError,
)
from .logging_helper import configure_logging, summarize_exception
from .slug_helper import component_filename, slugify

__all__ = [
    "Component",
    "ComponentParseError",
    "ComponentStoreError",
    "ComponentsDirNotFoundError",
    "EmptyComponentStoreError",
    "GeneratedFile",
    "GroupRef",
    "KodexError",
    "OutputWriteError",
    "SelectedComponent",
    "SelectionCancelledError",
    "component_filename",
    "configure_logging",
    "slugify",
    "summarize_exception",
]
