"""
Services package.
"""

from .config_svc import DEFAULT_TYPE_COLORS, ConfigService

__all__ = [
    "DEFAULT_TYPE_COLORS",
    "ConfigService",
]
