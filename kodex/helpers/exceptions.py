"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from pathlib import Path


class KodexError(Exception):
    """Base class for all KodeX errors."""


class ComponentStoreError(KodexError):
    """Raised when the component directory cannot be loaded."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class ComponentsDirNotFoundError(ComponentStoreError):
    """Raised when the components directory does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"Components directory not found: {path}")


class EmptyComponentStoreError(ComponentStoreError):
    """Raised when the components directory holds no component files."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"No JSON components found in {path}")


class ComponentParseError(ComponentStoreError):
    """Raised when a component file is not a valid component record."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Invalid component file {Path(path).name}: {reason}")


class SelectionCancelledError(KodexError):
    """Raised when the user aborts an interactive prompt."""


class OutputWriteError(KodexError):
    """Raised when a generated file or the output directory cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
