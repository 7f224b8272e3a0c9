"""
Unit tests for trip_co2/geo.py

Reference distances are great-circle (haversine, R = 6371 km), not road
distances.
"""
import dataclasses
import math

import pytest

from trip_co2.geo import GeoPoint, distance_km, make_geo_point, point_coords


PARIS = make_geo_point(48.8566, 2.3522)
LYON = make_geo_point(45.7640, 4.8357)


class TestMakeGeoPoint:

    def test_builds_point_with_fields(self):
        p = make_geo_point(48.8566, 2.3522)
        assert p.latitude == 48.8566
        assert p.longitude == 2.3522

    def test_points_compare_by_value(self):
        assert make_geo_point(1.0, 2.0) == GeoPoint(latitude=1.0, longitude=2.0)

    def test_point_is_immutable(self):
        p = make_geo_point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.latitude = 3.0

    def test_as_dict(self):
        assert make_geo_point(1.5, -2.5).as_dict() == {"latitude": 1.5, "longitude": -2.5}


class TestPointCoords:

    def test_reads_geo_point(self):
        assert point_coords(PARIS) == (48.8566, 2.3522)

    def test_reads_mapping(self):
        assert point_coords({"latitude": 1, "longitude": 2}) == (1, 2)

    def test_missing_mapping_keys_are_none(self):
        assert point_coords({"latitude": 1}) == (1, None)

    def test_none_gives_nones(self):
        assert point_coords(None) == (None, None)


class TestDistanceKm:

    def test_paris_to_lyon(self):
        assert distance_km(PARIS, LYON) == pytest.approx(391.6, abs=1.0)

    def test_same_point_is_zero(self):
        assert distance_km(PARIS, PARIS) == 0.0

    @pytest.mark.parametrize("a, b", [
        (PARIS, LYON),
        (make_geo_point(-33.87, 151.21), make_geo_point(51.51, -0.13)),
        (make_geo_point(10.0, 179.5), make_geo_point(-10.0, -179.5)),
    ])
    def test_symmetric(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-9)

    def test_non_negative(self):
        assert distance_km(LYON, PARIS) > 0

    def test_accepts_mappings(self):
        d = distance_km(
            {"latitude": 48.8566, "longitude": 2.3522},
            {"latitude": 45.7640, "longitude": 4.8357},
        )
        assert d == pytest.approx(distance_km(PARIS, LYON))

    def test_across_antimeridian_is_short(self):
        # 1 degree of longitude at the equator, crossing ±180
        d = distance_km(make_geo_point(0.0, 179.5), make_geo_point(0.0, -179.5))
        assert d == pytest.approx(6371 * math.radians(1.0), rel=1e-9)

    def test_antipodal_points_give_half_circumference(self):
        d = distance_km(make_geo_point(0.0, 0.0), make_geo_point(0.0, 180.0))
        assert d == pytest.approx(math.pi * 6371, rel=1e-9)

    def test_implausible_latitude_is_still_computed(self):
        d = distance_km(make_geo_point(200.0, 10.0), make_geo_point(45.0, 10.0))
        assert math.isfinite(d)
        assert d >= 0
