"""
Unit tests for trip_co2/io_utils.py
"""
import json

import pytest
from pydantic import ValidationError

from trip_co2.calculations import estimate_trip
from trip_co2.io_utils import build_result_payload, load_trip_requests, write_results
from trip_co2.schemas import TripRequest


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadTripRequests:

    def test_loads_distance_and_point_trips(self, tmp_path):
        path = _write(tmp_path / "trips.json", [
            {"id": "a", "mode": "bus", "distance_km": 12.5},
            {"mode": "car",
             "start": {"latitude": 48.8566, "longitude": 2.3522},
             "end": {"latitude": 45.7640, "longitude": 4.8357}},
        ])
        trips = load_trip_requests(path)

        assert len(trips) == 2
        assert trips[0].id == "a"
        assert trips[0].distance_km == 12.5
        assert not trips[0].uses_points
        assert trips[1].uses_points
        assert trips[1].start.latitude == 48.8566

    def test_empty_array(self, tmp_path):
        assert load_trip_requests(_write(tmp_path / "t.json", [])) == []

    def test_non_array_raises_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            load_trip_requests(_write(tmp_path / "t.json", {"mode": "bus"}))

    def test_missing_mode_raises_validation_error(self, tmp_path):
        with pytest.raises(ValidationError):
            load_trip_requests(_write(tmp_path / "t.json", [{"distance_km": 3}]))

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "t.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_trip_requests(path)

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_trip_requests(tmp_path / "nope.json")


class TestResultPayloads:

    def test_success_payload(self):
        req = TripRequest(id="x", mode="bus", distance_km=10)
        payload = build_result_payload(req, estimate_trip(req))
        assert payload == {
            "id": "x",
            "mode": "bus",
            "distance_km": 10.0,
            "grams_co2": pytest.approx(954.0),
            "error": None,
            "legacy_value": pytest.approx(954.0),
        }

    def test_error_payload_keeps_sentinel(self):
        req = TripRequest(mode="rocket", distance_km=10)
        payload = build_result_payload(req, estimate_trip(req))
        assert payload["error"] == "unrecognized_mode"
        assert payload["legacy_value"] == -2
        assert payload["grams_co2"] is None

    def test_write_results_creates_parents(self, tmp_path):
        dest = tmp_path / "out" / "results.json"
        written = write_results(dest, [{"id": "a", "grams_co2": 1.5}])
        assert written == dest
        assert json.loads(dest.read_text(encoding="utf-8")) == [{"id": "a", "grams_co2": 1.5}]
