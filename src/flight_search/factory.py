"""
Validator Factory - Wire a RequestValidator from Configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from flight_search.adapters.console_logger import ConsoleAuditLogger
from flight_search.adapters.metrics_collector import InMemoryMetricsCollector
from flight_search.config.loader import load_config
from flight_search.config.models import FlightSearchConfig
from flight_search.validation.request_validator import RequestValidator, system_clock

logger = logging.getLogger(__name__)


def create_validator(
    config: Optional[FlightSearchConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> RequestValidator:
    """
    Create a RequestValidator with the collaborators the config enables.

    Args:
        config: Configuration object. Takes precedence over config_path.
        config_path: YAML file to load when no config is given
        profile: Optional profile merged over config_path
        base_path: Base path for relative config and profile paths

    Returns:
        Configured RequestValidator

    Example:
        >>> validator = create_validator(config_path="config/default.yaml")
        >>> validator.run_flight_search("01/12/2030", "mel", False, "08/12/2030",
        ...                             "syd", "economy", 1, 0, 0)
        True
    """
    if config is None:
        if config_path is not None:
            config = load_config(config_path, profile, base_path)
        else:
            config = FlightSearchConfig()

    audit_logger = None
    if config.audit.enabled:
        audit_logger = ConsoleAuditLogger(verbose=config.audit.verbose)

    metrics_collector = None
    if config.metrics.enabled:
        metrics_collector = InMemoryMetricsCollector()

    logger.info(
        f"Creating validator: timezone={config.global_settings.timezone or 'local'}, "
        f"audit={config.audit.enabled}, metrics={config.metrics.enabled}"
    )

    return RequestValidator(
        clock=system_clock(config.global_settings.timezone),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
