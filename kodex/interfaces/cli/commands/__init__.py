"""
CLI commands package.
"""

from .build_cli import cmd_build
from .config_cli import cmd_config
from .init_cli import cmd_init
from .list_cli import cmd_list

__all__ = ["cmd_build", "cmd_config", "cmd_init", "cmd_list"]
