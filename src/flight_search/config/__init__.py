"""
Configuration Package - Models and Loaders.

This package handles the configurable surroundings of flight search
validation:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - FlightSearchConfig: Root configuration object
    - GlobalConfig: Timezone used to resolve the current date
    - AuditConfig: Audit trail on/off and verbosity
    - MetricsConfig: Metrics collection on/off

The business rules (airports, seating classes, passenger limits) are
not part of the configuration.
"""

from flight_search.config.loader import ConfigLoader, load_config
from flight_search.config.models import (
    AuditConfig,
    FlightSearchConfig,
    GlobalConfig,
    MetricsConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "AuditConfig",
    "FlightSearchConfig",
    "GlobalConfig",
    "MetricsConfig",
]
