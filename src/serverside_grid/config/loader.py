"""
Configuration Loader - YAML Loading with Validation.

Loads grid configuration from YAML files and validates it using the
Pydantic models. The file path may come from the caller or from the
SERVERSIDE_GRID_CONFIG environment variable.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from serverside_grid.config.models import GridConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SERVERSIDE_GRID_CONFIG"


class ConfigLoader:
    """Loads and validates grid configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> GridConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file; falls back to
                         $SERVERSIDE_GRID_CONFIG when omitted
            profile: Optional profile name merged over the file

        Returns:
            Validated GridConfig object

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            ValueError: If no path was given and the env var is unset
            ValidationError: If config is invalid
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR)
            if not config_path:
                raise ValueError(
                    f"No config path given and {CONFIG_ENV_VAR} is not set"
                )

        path = self._resolve(config_path)
        raw = self._read_yaml(path)

        if profile:
            raw = _deep_merge(raw, self._read_yaml(self._profile_path(profile)))

        config = GridConfig.model_validate(raw)
        logger.debug(
            f"Loaded grid config from {path}: {len(config.grids)} grids, "
            f"{len(config.custom_filters)} custom filters"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> GridConfig:
        """Validate configuration given as a dictionary."""
        return GridConfig.model_validate(config_dict)

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _profile_path(self, profile: str) -> Path:
        path = self._base_path / "profiles" / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return path

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overlay`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> GridConfig:
    """Convenience wrapper around ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
