"""
Configuration Loader - YAML Loading with Validation.

Resolution order, later sources winning:
    1. The YAML file passed to load()
    2. config/profiles/<profile>.yaml under the base path
    3. FLIGHT_SEARCH_TIMEZONE from the environment
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from flight_search.config.models import FlightSearchConfig

logger = logging.getLogger(__name__)

TIMEZONE_ENV_VAR = "FLIGHT_SEARCH_TIMEZONE"


def merge_settings(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return base with overlay merged in; nested sections merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Builds a FlightSearchConfig from YAML, profiles and the environment."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> FlightSearchConfig:
        """
        Load and validate configuration.

        Args:
            config_path: YAML file, absolute or relative to the base path
            profile: Optional profile name merged over the file

        Returns:
            Validated FlightSearchConfig object

        Raises:
            FileNotFoundError: If the file or profile doesn't exist
            ValidationError: If the merged settings are invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        settings = _read_yaml(path)
        if profile:
            profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile}")
            settings = merge_settings(settings, _read_yaml(profile_path))

        timezone = os.environ.get(TIMEZONE_ENV_VAR)
        if timezone:
            logger.info(f"Using timezone {timezone} from {TIMEZONE_ENV_VAR}")
            settings = merge_settings(settings, {"global": {"timezone": timezone}})

        logger.debug(f"Loaded config from {path} (profile={profile})")
        return FlightSearchConfig.model_validate(settings)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> FlightSearchConfig:
    """Load configuration with a one-off ConfigLoader."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
