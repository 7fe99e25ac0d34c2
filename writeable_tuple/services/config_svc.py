#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, overrides and env vars
#  - Caches composed config for performance
#  - Builds RenderOptions for tuple rendering
# ======================================================================

from __future__ import annotations

import copy
import logging
import os
from typing import Any

import yaml

from writeable_tuple.helpers.dto.render_dto import RenderOptions
from writeable_tuple.helpers.exceptions import InvalidArgumentError
from writeable_tuple.helpers.logging_helper import describe_value

ENV_PREFIX = "WRITEABLE_TUPLE_"
ENV_CONFIG_PATH = "WRITEABLE_TUPLE_CONFIG"
REPO_CONFIG_RELPATH = os.path.join("config", "writeable_tuple.yaml")

_DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "open": "(",
        "close": ")",
        "separator": ", ",
        "none_text": "",
    },
}


class ConfigService:
    """
    Service for loading and caching configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache and optional overrides."""
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

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
            >>> service.get("render.separator")
            ', '
            >>> service.get("render.missing", "x")
            'x'
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

    def make_render_options(self) -> RenderOptions:
        """
        Build RenderOptions from the current configuration.

        Returns:
            RenderOptions ready to pass to render()/render_tail()

        Raises:
            InvalidArgumentError: If a render setting is not a string
        """
        section = self.get("render", {})
        if not isinstance(section, dict):
            raise InvalidArgumentError(f"render must be a mapping, got {describe_value(section)}")
        values: dict[str, str] = {}
        for field in ("open", "close", "separator", "none_text"):
            value = section.get(field, _DEFAULT_CONFIG["render"][field])
            if not isinstance(value, str):
                raise InvalidArgumentError(f"render.{field} must be a string, got {describe_value(value)}")
            values[field] = value
        return RenderOptions(**values)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/writeable_tuple.yaml (if present)
          3) $WRITEABLE_TUPLE_CONFIG (if set)
          4) overrides dict passed to the constructor
          5) Environment variables (WRITEABLE_TUPLE_<SECTION>_<FIELD>)

        Returns merged config as dict.
        """
        cfg = copy.deepcopy(_DEFAULT_CONFIG)

        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), REPO_CONFIG_RELPATH)))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, copy.deepcopy(self._overrides))

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

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

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Failed to load config file {path} (using defaults): {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          WRITEABLE_TUPLE_RENDER_SEPARATOR=" | "
          WRITEABLE_TUPLE_RENDER_NONE_TEXT="-"
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == ENV_CONFIG_PATH:
                continue

            parts = k[len(ENV_PREFIX) :].lower().split("_", 1)
            if len(parts) == 1:
                continue
            section, field = parts
            if not isinstance(cfg.get(section), dict):
                self._logger.debug(f"Ignoring env override {k}: unknown section {section!r}")
                continue
            cfg[section][field] = v
