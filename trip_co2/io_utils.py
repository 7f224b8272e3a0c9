"""
io_utils.py – Trip file loading and result writing.

Trip files are JSON arrays of trip request objects:

    [
        {"id": "commute", "mode": "bus", "distance_km": 12.5},
        {"id": "weekend", "mode": "car",
         "start": {"latitude": 48.8566, "longitude": 2.3522},
         "end":   {"latitude": 45.7640, "longitude": 4.8357}}
    ]
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from trip_co2.calculations import EmissionEstimate
from trip_co2.schemas import TripRequest


def _write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Serialise *data* to JSON at *path*, creating parents as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=indent, ensure_ascii=False, default=str)


def load_trip_requests(path: Path) -> list[TripRequest]:
    """
    Read and validate a trip file.

    Raises
    ------
    OSError
        If the file cannot be read.
    json.JSONDecodeError
        If the file is not valid JSON.
    ValueError
        If the top-level value is not a list.
    pydantic.ValidationError
        If an entry does not match :class:`TripRequest`.
    """
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of trips, got {type(data).__name__}")
    return [TripRequest.model_validate(item) for item in data]


def build_result_payload(request: TripRequest, estimate: EmissionEstimate) -> dict[str, Any]:
    """Combine a request and its estimate into one JSON-serialisable record."""
    return {
        "id": request.id,
        "mode": request.mode,
        "distance_km": estimate.distance_km,
        "grams_co2": estimate.grams,
        "error": estimate.error,
        "legacy_value": estimate.legacy_value,
    }


def write_results(path: Path, payloads: list[dict[str, Any]]) -> Path:
    """Write per-trip result records to *path* and return it."""
    _write_json(path, payloads)
    return path
