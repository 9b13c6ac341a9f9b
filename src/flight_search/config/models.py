"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Only the
surroundings of validation are configurable; the business rules are fixed.
"""

from __future__ import annotations

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    # None resolves "today" from the local system clock
    timezone: Optional[str] = Field(default=None)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        # Directories inside tzdata such as "America" raise OSError
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value


class AuditConfig(BaseModel):
    """Configuration for the audit trail."""

    enabled: bool = False
    verbose: bool = True


class MetricsConfig(BaseModel):
    """Configuration for metrics collection."""

    enabled: bool = False


class FlightSearchConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    audit: AuditConfig = Field(default_factory=AuditConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    model_config = {"populate_by_name": True}
