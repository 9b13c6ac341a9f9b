"""
Core Domain Entities.

This module defines the fundamental entities of the flight search domain:
the candidate request supplied by a caller and the validated snapshot a
RequestValidator commits once every rule passes.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, Field


# Airport codes accepted for departure and destination (lowercase)
VALID_AIRPORTS: FrozenSet[str] = frozenset(
    {"syd", "mel", "lax", "cdg", "del", "pvg", "doh"}
)

# Seating classes in cabin order (lowercase)
VALID_SEATING_CLASSES: Tuple[str, ...] = (
    "economy",
    "premium economy",
    "business",
    "first",
)

# Textual date layout, DD/MM/YYYY
DATE_FORMAT = "%d/%m/%Y"


class FlightSearchRequest(BaseModel):
    """Candidate flight search, exactly as supplied by the caller."""

    departure_date: Optional[str] = Field(
        default=None, description="Departure date as DD/MM/YYYY"
    )
    departure_airport_code: Optional[str] = Field(
        default=None, description="Three-letter departure airport code"
    )
    emergency_row_seating: bool = Field(
        default=False, description="Emergency row seating requested"
    )
    return_date: Optional[str] = Field(
        default=None, description="Return date as DD/MM/YYYY"
    )
    destination_airport_code: Optional[str] = Field(
        default=None, description="Three-letter destination airport code"
    )
    seating_class: Optional[str] = Field(
        default=None, description="economy, premium economy, business or first"
    )
    adult_passenger_count: int = Field(default=0, description="Adults")
    child_passenger_count: int = Field(
        default=0, description="Children aged 2-11"
    )
    infant_passenger_count: int = Field(
        default=0, description="Infants under 2"
    )

    model_config = {"frozen": True}

    @property
    def total_passengers(self) -> int:
        """Adults, children and infants combined."""
        return (
            self.adult_passenger_count
            + self.child_passenger_count
            + self.infant_passenger_count
        )


class ValidatedSearch(BaseModel):
    """Snapshot of a flight search that passed every rule."""

    departure_date: str
    departure_airport_code: str
    emergency_row_seating: bool
    return_date: str
    destination_airport_code: str
    seating_class: str
    adult_passenger_count: int
    child_passenger_count: int
    infant_passenger_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_request(cls, request: FlightSearchRequest) -> "ValidatedSearch":
        """Copy every field of an accepted request verbatim."""
        return cls(**request.model_dump())
