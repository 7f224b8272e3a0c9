"""
calculations.py – Trip CO₂ emission estimator.

Emission formula references
────────────────────────────
 Mode                                         Formula
 ─────────────────────────────────────────────────────────────────────
 car                                          km × 1.2 × factor(car)
 subway, regional-rail, tram, commuter-rail,  km × factor(mode)
 bus
 walk, bike                                   0 (always)

Two call styles are provided:

* ``estimate_*`` functions return an :class:`EmissionEstimate` carrying either
  the grams or a named error kind.
* ``emission_for_distance`` / ``emission_from_geo_points`` return a plain
  number: the grams (always ≥ 0), ``-1`` for an invalid distance or point,
  ``-2`` for an unrecognized mode. Callers must check for negatives.

Every failure is logged as a WARNING on this module's logger; logging never
changes the returned value.

Usage
──────
    from trip_co2 import make_geo_point, emission_from_geo_points, MODE_BUS

    paris = make_geo_point(48.8566, 2.3522)
    lyon = make_geo_point(45.7640, 4.8357)
    grams = emission_from_geo_points(paris, lyon, MODE_BUS)
    if grams < 0:
        ...
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Optional

from trip_co2.constants import (
    CAR_MULTIPLIER,
    ERROR_INVALID_DISTANCE,
    ERROR_INVALID_END_POINT,
    ERROR_INVALID_START_POINT,
    ERROR_SENTINELS,
    ERROR_UNRECOGNIZED_MODE,
    MODE_CAR,
    ZERO_EMISSION_MODES,
)
from trip_co2.emission_factors import get_emission_factor, is_known_mode
from trip_co2.geo import distance_km as haversine_distance_km
from trip_co2.geo import point_coords
from trip_co2.schemas import TripRequest

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Result dataclass
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class EmissionEstimate:
    """Outcome of one estimate: grams on success, an error kind otherwise."""
    mode: Any
    distance_km: Optional[float] = None
    grams: Optional[float] = None
    error: Optional[str] = None      # one of the ERROR_* kinds

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def legacy_value(self) -> float | int:
        """Grams on success, else the numeric sentinel (-1 or -2)."""
        if self.error is not None:
            return ERROR_SENTINELS[self.error]
        return self.grams

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


# ─────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ─────────────────────────────────────────────────────────────────────────────

def _finite_float(value: Any) -> float | None:
    """
    Return *value* as a finite float, or None when it is not a real number,
    is a bool, is NaN / infinite, or is an int too large for a float.
    """
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _is_usable_distance(value: Any) -> bool:
    """
    A distance is usable when it is a finite number strictly above zero.

    Zero (including -0.0), None, NaN and non-numeric values are rejected,
    so a zero-length trip is an error rather than a "0 grams" answer.
    """
    number = _finite_float(value)
    return number is not None and number > 0


def _is_usable_coord(value: Any) -> bool:
    # 0 is rejected on purpose: a point on the equator or the prime
    # meridian is treated as missing.
    number = _finite_float(value)
    return number is not None and number != 0


def _is_usable_point(point: Any) -> bool:
    lat, lon = point_coords(point)
    return _is_usable_coord(lat) and _is_usable_coord(lon)


def _grams_for_mode(distance: float, mode: str) -> float:
    if mode == MODE_CAR:
        return distance * CAR_MULTIPLIER * get_emission_factor(mode)
    return distance * get_emission_factor(mode)


# ─────────────────────────────────────────────────────────────────────────────
# Discriminated API
# ─────────────────────────────────────────────────────────────────────────────

def estimate_for_distance(distance_km: Any, mode: Any) -> EmissionEstimate:
    """
    Estimate grams of CO₂ for *distance_km* kilometres travelled by *mode*.

    Parameters
    ----------
    distance_km:
        Distance in kilometres. Must be a finite number above zero.
    mode:
        One of the ``MODE_*`` identifiers.

    Returns
    -------
    EmissionEstimate
        ``error`` is ``invalid_distance`` or ``unrecognized_mode`` on failure.
        The distance check runs first.
    """
    if not _is_usable_distance(distance_km):
        logger.warning("Undefined distance: %r (mode=%r)", distance_km, mode)
        return EmissionEstimate(mode=mode, error=ERROR_INVALID_DISTANCE)

    distance = float(distance_km)

    if not is_known_mode(mode):
        logger.warning("Undefined transport mode: %r", mode)
        return EmissionEstimate(mode=mode, distance_km=distance, error=ERROR_UNRECOGNIZED_MODE)

    if mode in ZERO_EMISSION_MODES:
        grams = 0.0
    else:
        grams = _grams_for_mode(distance, mode)

    logger.debug("%.3f km by %s → %.3f g CO₂", distance, mode, grams)
    return EmissionEstimate(mode=mode, distance_km=distance, grams=grams)


def estimate_from_geo_points(start: Any, end: Any, mode: Any) -> EmissionEstimate:
    """
    Estimate grams of CO₂ for the great-circle trip from *start* to *end*.

    Points may be GeoPoint instances or mappings with ``latitude`` /
    ``longitude`` keys. A point with a latitude or longitude of exactly 0 is
    rejected like a missing one.
    """
    if not _is_usable_point(start):
        logger.warning("Undefined start point: %r", start)
        return EmissionEstimate(mode=mode, error=ERROR_INVALID_START_POINT)
    if not _is_usable_point(end):
        logger.warning("Undefined end point: %r", end)
        return EmissionEstimate(mode=mode, error=ERROR_INVALID_END_POINT)

    return estimate_for_distance(haversine_distance_km(start, end), mode)


def estimate_trip(request: TripRequest) -> EmissionEstimate:
    """Estimate a :class:`TripRequest`, by points when it has any, else by distance."""
    if request.uses_points:
        start = request.start.model_dump() if request.start is not None else None
        end = request.end.model_dump() if request.end is not None else None
        return estimate_from_geo_points(start, end, request.mode)
    return estimate_for_distance(request.distance_km, request.mode)


# ─────────────────────────────────────────────────────────────────────────────
# Sentinel API
# ─────────────────────────────────────────────────────────────────────────────

def emission_for_distance(distance_km: Any, mode: Any) -> float | int:
    """Grams of CO₂ for a distance, or ``-1`` (bad distance) / ``-2`` (bad mode)."""
    return estimate_for_distance(distance_km, mode).legacy_value


def emission_from_geo_points(start: Any, end: Any, mode: Any) -> float | int:
    """Grams of CO₂ between two points, or ``-1`` (bad point) / the distance codes."""
    return estimate_from_geo_points(start, end, mode).legacy_value
