"""
emission_factors.py – Emission factor table for passenger transport modes.

All factors are in grams CO₂ per kilometre travelled, attributed to the mode
in aggregate (not per occupant).
Source: RATP published averages (https://www.ratp.fr/categorie-faq/5041).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from trip_co2.constants import (
    MODE_BIKE,
    MODE_BUS,
    MODE_CAR,
    MODE_COMMUTER_RAIL,
    MODE_REGIONAL_RAIL,
    MODE_SUBWAY,
    MODE_TRAM,
    MODE_WALK,
)

# ─────────────────────────────────────────────────────────────
# Passenger transport (g CO₂ / km)
# ─────────────────────────────────────────────────────────────
EMISSION_FACTORS: Mapping[str, float] = MappingProxyType({
    MODE_WALK:           0.0,
    MODE_BIKE:           0.0,
    MODE_SUBWAY:         3.8,
    MODE_REGIONAL_RAIL:  3.9,
    MODE_TRAM:           3.1,
    MODE_BUS:           95.4,
    MODE_CAR:          206.0,
    MODE_COMMUTER_RAIL:  6.4,
})


def is_known_mode(mode: object) -> bool:
    """Return True when *mode* is one of the registered transport modes."""
    return isinstance(mode, str) and mode in EMISSION_FACTORS


def get_emission_factor(mode: str) -> float:
    """
    Return grams CO₂ per km for *mode*.

    Raises
    ------
    KeyError
        If *mode* is not registered. The estimator checks
        ``is_known_mode`` first and reports unknown modes itself.
    """
    return EMISSION_FACTORS[mode]
