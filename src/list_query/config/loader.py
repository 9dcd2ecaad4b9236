"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files, layers an optional profile and
ad-hoc overrides on top, and validates the result using Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from list_query.config.models import ListQueryConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = Path("config") / "profiles"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of base with overlay merged in, recursing into dicts."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> ListQueryConfig:
        """
        Load configuration from YAML file.

        Layers are applied in order: file, profile, overrides.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name under config/profiles
            overrides: Optional dict merged last

        Returns:
            Validated ListQueryConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        layers = [self._read_yaml(self._resolve(config_path))]
        if profile:
            layers.append(self._read_profile(profile))
        if overrides:
            layers.append(overrides)

        merged: Dict[str, Any] = {}
        for layer in layers:
            merged = deep_merge(merged, layer)

        config = ListQueryConfig.model_validate(merged)
        logger.debug(
            f"Loaded config {config_path} (profile={profile}, "
            f"overrides={sorted(overrides) if overrides else []})"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ListQueryConfig:
        """Validate a configuration given as a plain dictionary."""
        return ListQueryConfig.model_validate(config_dict)

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        path = self._base_path / PROFILE_DIR / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._read_yaml(path)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ListQueryConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        overrides: Optional dict merged last

    Returns:
        Validated ListQueryConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile, overrides)
