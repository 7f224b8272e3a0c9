"""
Unit tests for trip_co2/emission_factors.py
"""
import pytest

from trip_co2.constants import ALLOWED_MODES
from trip_co2.emission_factors import EMISSION_FACTORS, get_emission_factor, is_known_mode


class TestEmissionFactors:

    def test_table_covers_every_mode(self):
        assert set(EMISSION_FACTORS) == set(ALLOWED_MODES)

    @pytest.mark.parametrize("mode, factor", [
        ("walk", 0.0),
        ("bike", 0.0),
        ("subway", 3.8),
        ("regional-rail", 3.9),
        ("tram", 3.1),
        ("bus", 95.4),
        ("car", 206.0),
        ("commuter-rail", 6.4),
    ])
    def test_factor_values(self, mode, factor):
        assert get_emission_factor(mode) == pytest.approx(factor)

    def test_factors_are_non_negative(self):
        assert all(v >= 0 for v in EMISSION_FACTORS.values())

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            EMISSION_FACTORS["bus"] = 1.0

    def test_unknown_mode_raises_key_error(self):
        with pytest.raises(KeyError):
            get_emission_factor("rocket")


class TestIsKnownMode:

    def test_known(self):
        assert is_known_mode("tram")

    @pytest.mark.parametrize("mode", ["rocket", "Bus", "", None, 3, ["bus"]])
    def test_unknown(self, mode):
        assert not is_known_mode(mode)
