"""
Domain models (Pydantic).

These types are the contract between the parsing layer and its callers:
- `ParseContext`: what the caller knows up front (its current timezone, the trip id)
- `LegDraft`: one flight leg extracted from pasted text, handed to persistence

A `LegDraft` never has missing slots. Fields the parser could not locate carry
their documented default instead, and instants are always aware UTC datetimes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ParseContext(BaseModel):
    """Per-call inputs every parser receives besides the text itself."""

    model_config = ConfigDict(frozen=True)

    default_timezone: str
    trip_id: Any = None


class LegDraft(BaseModel):
    """A structured, possibly partially defaulted flight leg."""

    model_config = ConfigDict(frozen=True)

    name: str
    departure_instant: datetime
    departure_location: str = ""
    departure_timezone: str
    arrival_instant: datetime
    arrival_location: str = ""
    arrival_timezone: str
    carrier: str = ""
    confirmation: str | None = None
    trip_id: Any = None

    @field_validator("departure_instant", "arrival_instant")
    @classmethod
    def _require_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("leg instants must be timezone-aware")
        return value.astimezone(timezone.utc)

    def to_record(self) -> dict[str, Any]:
        """Row payload for the legs store (ISO-8601 UTC strings with a `Z` suffix)."""
        return {
            "name": self.name,
            "departure_datetime": _iso_z(self.departure_instant),
            "departure_location": self.departure_location,
            "departure_timezone": self.departure_timezone,
            "arrival_datetime": _iso_z(self.arrival_instant),
            "arrival_location": self.arrival_location,
            "arrival_timezone": self.arrival_timezone,
            "carrier": self.carrier,
            "confirmation": self.confirmation,
            "trip_id": self.trip_id,
        }


def _iso_z(instant: datetime) -> str:
    return instant.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
