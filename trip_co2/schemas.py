"""
schemas.py – Pydantic models for trip requests read from files or the CLI.

Coordinates are kept permissive (Optional, no range checks) so that the
estimator, not the schema, decides what counts as a usable point.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """A latitude / longitude pair as it appears in a trip file."""

    latitude: Optional[float] = Field(None, description="Latitude in degrees")
    longitude: Optional[float] = Field(None, description="Longitude in degrees")


class TripRequest(BaseModel):
    """One trip to estimate: a mode plus either a distance or two points."""

    id: Optional[str] = Field(None, description="Caller-supplied trip reference")
    mode: str = Field(..., description="Transport mode identifier, e.g. bus")
    distance_km: Optional[float] = Field(None, description="Distance in kilometres")
    start: Optional[Coordinates] = Field(None, description="Starting point")
    end: Optional[Coordinates] = Field(None, description="Ending point")

    @property
    def uses_points(self) -> bool:
        """True when the trip is described by points rather than a distance."""
        return self.start is not None or self.end is not None
