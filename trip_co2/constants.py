"""
constants.py – Shared labels, sentinel codes, and numeric constants.
"""

# ── Transport mode labels ─────────────────────────────────────
MODE_WALK = "walk"
MODE_BIKE = "bike"
MODE_SUBWAY = "subway"
MODE_REGIONAL_RAIL = "regional-rail"
MODE_TRAM = "tram"
MODE_BUS = "bus"
MODE_CAR = "car"
MODE_COMMUTER_RAIL = "commuter-rail"

ALLOWED_MODES = [
    MODE_WALK,
    MODE_BIKE,
    MODE_SUBWAY,
    MODE_REGIONAL_RAIL,
    MODE_TRAM,
    MODE_BUS,
    MODE_CAR,
    MODE_COMMUTER_RAIL,
]

# Modes whose emission is always 0, regardless of the factor table
ZERO_EMISSION_MODES = frozenset({MODE_WALK, MODE_BIKE})

# ── Car correction ────────────────────────────────────────────
# Average occupancy / inefficiency multiplier, car only
CAR_MULTIPLIER = 1.2

# ── Geodesy ───────────────────────────────────────────────────
EARTH_RADIUS_KM = 6371.0

# ── Sentinel return codes ─────────────────────────────────────
INVALID_INPUT = -1
UNRECOGNIZED_MODE = -2

# ── Error kinds (discriminated results) ───────────────────────
ERROR_INVALID_DISTANCE = "invalid_distance"
ERROR_UNRECOGNIZED_MODE = "unrecognized_mode"
ERROR_INVALID_START_POINT = "invalid_start_point"
ERROR_INVALID_END_POINT = "invalid_end_point"

ERROR_SENTINELS = {
    ERROR_INVALID_DISTANCE: INVALID_INPUT,
    ERROR_UNRECOGNIZED_MODE: UNRECOGNIZED_MODE,
    ERROR_INVALID_START_POINT: INVALID_INPUT,
    ERROR_INVALID_END_POINT: INVALID_INPUT,
}

# ── CLI output formats ────────────────────────────────────────
OUTPUT_TABLE = "table"
OUTPUT_JSON = "json"
ALLOWED_OUTPUT_FORMATS = {OUTPUT_TABLE, OUTPUT_JSON}
