"""
Tests for the standard atmosphere helpers.
"""

import pytest

from psych.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI
from psych.engine.atmosphere import (
    standard_conditions,
    standard_pressure,
    standard_temperature,
)
from psych.engine.errors import InvalidRange


class TestStandardPressure:
    def test_sea_level_exact(self):
        assert standard_pressure(0.0) == 101.325

    def test_denver(self):
        # 1609 m, ~83.4 kPa
        assert standard_pressure(1609.0) == pytest.approx(83.4, abs=0.3)

    def test_decreases_with_elevation(self):
        elevations = [-5000.0, -1000.0, 0.0, 1000.0, 5000.0, 11000.0]
        values = [standard_pressure(z) for z in elevations]
        assert all(b < a for a, b in zip(values, values[1:]))

    def test_below_range(self):
        with pytest.raises(InvalidRange):
            standard_pressure(-5001.0)

    def test_above_range(self):
        with pytest.raises(InvalidRange):
            standard_pressure(11001.0)


class TestStandardTemperature:
    def test_sea_level_exact(self):
        assert standard_temperature(0.0) == 15.0

    def test_lapse_rate(self):
        assert standard_temperature(1000.0) == pytest.approx(8.5)

    def test_tropopause(self):
        assert standard_temperature(11000.0) == pytest.approx(-56.5)

    def test_out_of_range(self):
        with pytest.raises(InvalidRange):
            standard_temperature(20000.0)


class TestStandardConditions:
    def test_sea_level_ip(self):
        result = standard_conditions(0.0, UnitSystem.IP)
        assert result.pressure == pytest.approx(DEFAULT_PRESSURE_IP, abs=0.01)
        assert result.temperature == pytest.approx(59.0)
        assert result.unit_system == UnitSystem.IP

    def test_sea_level_si(self):
        result = standard_conditions(0.0, UnitSystem.SI)
        assert result.pressure == pytest.approx(DEFAULT_PRESSURE_SI)
        assert result.temperature == pytest.approx(15.0)

    def test_denver_altitude_ip(self):
        # Denver ~5280 ft, expected ~12.1-12.2 psia
        result = standard_conditions(5280.0, UnitSystem.IP)
        assert 12.0 <= result.pressure <= 12.5

    def test_ip_range_checked_in_meters(self):
        # 40000 ft is ~12192 m, above the valid span
        with pytest.raises(InvalidRange):
            standard_conditions(40000.0, UnitSystem.IP)
