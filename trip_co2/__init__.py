"""
trip_co2 – CO₂ emission estimates for single trips.

Given a distance or two GPS points and a transport mode, returns grams of CO₂.
"""
from trip_co2.calculations import (
    EmissionEstimate,
    emission_for_distance,
    emission_from_geo_points,
    estimate_for_distance,
    estimate_from_geo_points,
    estimate_trip,
)
from trip_co2.constants import (
    ALLOWED_MODES,
    INVALID_INPUT,
    MODE_BIKE,
    MODE_BUS,
    MODE_CAR,
    MODE_COMMUTER_RAIL,
    MODE_REGIONAL_RAIL,
    MODE_SUBWAY,
    MODE_TRAM,
    MODE_WALK,
    UNRECOGNIZED_MODE,
)
from trip_co2.emission_factors import EMISSION_FACTORS, get_emission_factor
from trip_co2.geo import GeoPoint, distance_km, make_geo_point

__all__ = [
    "ALLOWED_MODES",
    "EMISSION_FACTORS",
    "EmissionEstimate",
    "GeoPoint",
    "INVALID_INPUT",
    "MODE_BIKE",
    "MODE_BUS",
    "MODE_CAR",
    "MODE_COMMUTER_RAIL",
    "MODE_REGIONAL_RAIL",
    "MODE_SUBWAY",
    "MODE_TRAM",
    "MODE_WALK",
    "UNRECOGNIZED_MODE",
    "distance_km",
    "emission_for_distance",
    "emission_from_geo_points",
    "estimate_for_distance",
    "estimate_from_geo_points",
    "estimate_trip",
    "get_emission_factor",
    "make_geo_point",
]
