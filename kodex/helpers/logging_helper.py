"""
Logging helpers for the CLI process.

Sets up a single rich handler for the whole process and turns unexpected
exceptions into one-line messages while keeping the full traceback in the
debug log.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

_handler: RichHandler | None = None


def configure_logging(console: Console, verbose: bool = False) -> None:
    """
    Configure root logging once per process.

    Args:
        console: Console the log records are rendered on (shared with the UI)
        verbose: DEBUG level with tracebacks when True, WARNING otherwise
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def summarize_exception(e: BaseException, fallback: str = "An unexpected error occurred") -> str:
    """
    Reduce an exception to a single line for terminal display.

    The full traceback is logged at DEBUG level so ``--verbose`` still shows it.

    Example:
        >>> summarize_exception(ValueError("bad value\\nmore detail"))
        'ValueError: bad value'
    """
    logger.debug("[cli] Unexpected error", exc_info=e)
    text = str(e).strip()
    if not text:
        return fallback
    first_line = text.splitlines()[0]
    return f"{type(e).__name__}: {first_line}"
