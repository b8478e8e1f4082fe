"""
Cli package.
"""

from .messages import Messages
from .prompt_provider import RichChoiceProvider, parse_selection_input
from .ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_MUTED,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_MUTED",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "Messages",
    "RichChoiceProvider",
    "parse_selection_input",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
