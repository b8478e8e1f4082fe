#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from JSON/YAML files and env vars
#  - Caches composed config for the lifetime of one command
#  - Consumed by the CLI layer only; core modules get plain values
# ======================================================================

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

# Files looked up in the working directory, lowest priority first.
# yaml.safe_load also reads JSON, so the original config.json keeps working.
LOCAL_CONFIG_FILES = ("config.json", "kodex.yaml")

ENV_CONFIG_PATH = "KODEX_CONFIG"
ENV_OVERRIDES = {
    "KODEX_COMPONENTS_DIR": ("paths", "components_dir"),
    "KODEX_DIST_DIR": ("paths", "dist_dir"),
    "KODEX_LOCALE": ("ui", "locale"),
}

DEFAULT_TYPE_COLORS: dict[str, str] = {
    "html": "red",
    "css": "blue",
    "js": "yellow",
    "javascript": "yellow",
    "typescript": "cyan",
    "json": "bright_black",
    "xml": "magenta",
    "php": "magenta",
    "python": "green",
    "java": "yellow",
    "go": "cyan",
    "rust": "bright_black",
    "c": "bright_black",
    "cpp": "blue",
    "default": "white",
}


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → local files → $KODEX_CONFIG
    → explicit path → env), caches the result, and provides reload capability.
    """

    def __init__(self, config_path: str | Path | None = None, cwd: str | Path | None = None) -> None:
        """
        Args:
            config_path: Explicit config file (``--config``), highest file priority
            cwd: Directory searched for local config files (default: process cwd)
        """
        self._config_path = Path(config_path) if config_path else None
        self._cwd = Path(cwd) if cwd else None
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def cwd(self) -> Path:
        return self._cwd if self._cwd is not None else Path.cwd()

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("ui.locale")
            'en'
            >>> service.get("ui.type_colors.css")
            'blue'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Typed accessors used by the CLI
    # ----------------------------------------------------------------------

    def resolve_path(self, key_path: str) -> Path:
        """Config path value resolved against the working directory."""
        value = self.get(key_path)
        if value is None or value == "":
            value = self._default_value(key_path)
        path = Path(str(value))
        return path if path.is_absolute() else self.cwd / path

    @property
    def components_dir(self) -> Path:
        return self.resolve_path("paths.components_dir")

    @property
    def dist_dir(self) -> Path:
        return self.resolve_path("paths.dist_dir")

    @property
    def locale(self) -> str:
        return str(self.get("ui.locale", "en")).lower()

    def type_color(self, type_: str) -> str:
        """Color for a component type, falling back to ``ui.type_colors.default``."""
        colors = self.get("ui.type_colors", {}) or {}
        for key in (type_.lower(), "default"):
            color = colors.get(key)
            if isinstance(color, str) and color:
                return color
        return "white"

    def ui_color(self, name: str) -> str:
        """Color for a UI role (confirm, cancel, selected, unselected)."""
        return str(self.get(f"ui.colors.{name}", "white"))

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config.json, then ./kodex.yaml
          3) $KODEX_CONFIG (if set)
          4) Explicit config path
          5) Environment variables (KODEX_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        for name in LOCAL_CONFIG_FILES:
            self._deep_merge(cfg, self._load_yaml(self.cwd / name))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(Path(env_path), required=True))

        if self._config_path is not None:
            self._deep_merge(cfg, self._load_yaml(self._config_path, required=True))

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "paths": {
                "components_dir": "components",
                "dist_dir": "dist",
            },
            "ui": {
                "locale": "en",
                "show_banner": True,
                "colors": {
                    "confirm": "green",
                    "cancel": "red",
                    "selected": "cyan",
                    "unselected": "bright_black",
                },
                "type_colors": copy.deepcopy(DEFAULT_TYPE_COLORS),
            },
            "output": {
                "default_bundle": False,
            },
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: Path, required: bool = False) -> dict[str, Any]:
        """
        Load a YAML (or JSON) file; returns {} if not found or invalid.

        Missing optional files are silent; missing explicit files and
        malformed files log a warning and fall back to the other layers.
        """
        if not path.is_file():
            if required:
                self._logger.warning("Config file not found: %s (using defaults)", path)
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning("Failed to load config %s, using defaults: %s", path, e)
            return {}
        if data is None:
            return {}
        if not isinstance(data, dict):
            self._logger.warning("Ignoring config %s: top level must be a mapping", path)
            return {}
        return self._drop_mismatched(data, self._default_config(), path)

    def _drop_mismatched(self, data: dict[str, Any], defaults: dict[str, Any], path: Path, prefix: str = "") -> dict[str, Any]:
        """
        Remove entries whose shape does not match the defaults.

        A known section must stay a mapping and a known setting must not become
        null, a mapping or a list. Unknown keys pass through unchanged.
        """
        cleaned: dict[str, Any] = {}
        for key, value in data.items():
            dotted = f"{prefix}{key}"
            if key not in defaults:
                cleaned[key] = value
                continue

            default = defaults[key]
            if isinstance(default, dict):
                if not isinstance(value, dict):
                    self._logger.warning("Ignoring %s in config %s: expected a mapping", dotted, path)
                    continue
                cleaned[key] = self._drop_mismatched(value, default, path, prefix=f"{dotted}.")
            elif value is None or isinstance(value, (dict, list)):
                self._logger.warning("Ignoring %s in config %s: expected a single value", dotted, path)
            else:
                cleaned[key] = value
        return cleaned

    def _default_value(self, key_path: str) -> Any:
        node: Any = self._default_config()
        for part in key_path.split("."):
            node = node.get(part) if isinstance(node, dict) else None
        return node

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """Apply KODEX_* environment variables onto the nested config."""
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                cfg.setdefault(section, {})[key] = value
