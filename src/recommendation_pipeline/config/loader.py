"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from recommendation_pipeline.config.models import PipelineConfig
from recommendation_pipeline.exceptions import ConfigurationError


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        overrides: Optional[Dict[str, Any]] = None,
    ) -> PipelineConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            overrides: Optional dict deep-merged over the file contents

        Returns:
            Validated PipelineConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the YAML is malformed or the config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> PipelineConfig:
        """
        Load configuration from dictionary.

        Raises:
            ConfigurationError: If the config is invalid
        """
        try:
            return PipelineConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid pipeline configuration: {e}") from e

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Top level of {path} must be a mapping, got {type(loaded).__name__}"
            )
        return loaded

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    overrides: Optional[Dict[str, Any]] = None,
    base_path: Optional[Path] = None,
) -> PipelineConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        overrides: Optional dict deep-merged over the file contents
        base_path: Base path for resolving relative paths

    Returns:
        Validated PipelineConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, overrides)
