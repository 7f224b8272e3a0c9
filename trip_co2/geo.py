"""
geo.py – GPS points and great-circle distance.

Distances use the haversine formula on a sphere of mean Earth radius
(6371 km). No elevation, no road network, and no plausibility checks on the
coordinates themselves: latitude 200 is accepted and simply computed.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt
from typing import Any, Union

from trip_co2.constants import EARTH_RADIUS_KM


@dataclass(frozen=True)
class GeoPoint:
    """A latitude / longitude pair in degrees."""

    latitude: float
    longitude: float

    def as_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


PointLike = Union[GeoPoint, Mapping[str, Any]]


def make_geo_point(latitude: float, longitude: float) -> GeoPoint:
    """Create a GeoPoint from a latitude and a longitude."""
    return GeoPoint(latitude=latitude, longitude=longitude)


def point_coords(point: Any) -> tuple[Any, Any]:
    """
    Return ``(latitude, longitude)`` from a GeoPoint, a mapping with
    ``latitude`` / ``longitude`` keys, or any object with those attributes.

    Missing fields come back as None.
    """
    if point is None:
        return None, None
    if isinstance(point, Mapping):
        return point.get("latitude"), point.get("longitude")
    return getattr(point, "latitude", None), getattr(point, "longitude", None)


def distance_km(p1: PointLike, p2: PointLike) -> float:
    """
    Great-circle distance in kilometres between two points (haversine).

    Symmetric, non-negative, and 0.0 for identical points. Longitude
    wrap-around is handled by the trigonometry, no antimeridian branch.
    """
    lat1, lon1 = point_coords(p1)
    lat2, lon2 = point_coords(p2)

    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
    # rounding can push a past 1 for near-antipodal points
    a = min(a, 1.0)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_KM * c
