"""
Configuration Loader - YAML Loading with Validation.

A run is configured from an optional YAML file with command line values
merged on top. The merged mapping is validated once by the Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from layoff_cleaner.config.models import CleaningConfig


class ConfigLoader:
    """Builds a validated CleaningConfig from YAML and overrides."""

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> CleaningConfig:
        """
        Load configuration.

        Args:
            config_path: YAML config file (defaults only when omitted)
            overrides: Values deep-merged over the file contents

        Returns:
            Validated CleaningConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        settings: Dict[str, Any] = {}
        if config_path is not None:
            settings = self._read_yaml(Path(config_path))
        if overrides:
            settings = merge_settings(settings, overrides)
        return CleaningConfig.model_validate(settings)

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def merge_settings(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Nested sections are merged key by key, anything else is replaced."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> CleaningConfig:
    """Shortcut for ConfigLoader().load()."""
    return ConfigLoader().load(config_path, overrides)
