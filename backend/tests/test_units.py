"""
Tests for IP <-> SI unit conversions.

The enthalpy pair is the one to watch: it shifts the zero-enthalpy reference
(dry air at 0 °F vs 0 °C), so a round trip only closes if the offset is
applied exactly once in each direction.
"""

import pytest

from psych.engine import units


def rel(value: float):
    return pytest.approx(value, rel=1e-9, abs=1e-12)


class TestTemperature:
    def test_freezing_point(self):
        assert units.f_to_c(32.0) == 0.0
        assert units.c_to_f(0.0) == 32.0

    def test_boiling_point(self):
        assert units.f_to_c(212.0) == pytest.approx(100.0)
        assert units.c_to_f(100.0) == pytest.approx(212.0)

    def test_minus_forty_is_the_same(self):
        assert units.f_to_c(-40.0) == pytest.approx(-40.0)

    @pytest.mark.parametrize("temp_f", [-148.0, -40.0, 0.0, 75.2, 392.0])
    def test_round_trip(self, temp_f):
        assert units.c_to_f(units.f_to_c(temp_f)) == rel(temp_f)


class TestPressure:
    def test_standard_atmosphere(self):
        # 14.696 psia is one standard atmosphere
        assert units.psi_to_kpa(14.696) == pytest.approx(101.325, abs=0.001)

    def test_one_psi(self):
        assert units.psi_to_kpa(1.0) == pytest.approx(6.894757, rel=1e-7)

    def test_pa_kpa(self):
        assert units.pa_to_kpa(101325.0) == pytest.approx(101.325)
        assert units.kpa_to_pa(101.325) == pytest.approx(101325.0)

    @pytest.mark.parametrize("psi", [0.5, 12.1, 14.696, 30.0])
    def test_round_trip(self, psi):
        assert units.kpa_to_psi(units.psi_to_kpa(psi)) == rel(psi)


class TestEnthalpy:
    def test_ip_zero_is_dry_air_at_zero_f(self):
        # Dry air at 0 °F: 1.006 kJ/(kg·K) * -17.78 °C
        assert units.btu_lb_to_kj_kg(0.0) == pytest.approx(1.006 * units.f_to_c(0.0), abs=0.01)

    def test_si_zero_is_positive_in_ip(self):
        # Dry air at 0 °C carries ~7.69 BTU/lb above the 0 °F reference
        assert units.kj_kg_to_btu_lb(0.0) == pytest.approx(7.689, abs=0.01)

    def test_offset_is_not_a_pure_scale(self):
        scaled_only = 28.2 * 1.055056 / 0.45359237
        assert units.btu_lb_to_kj_kg(28.2) == pytest.approx(
            scaled_only - units.ENTHALPY_REFERENCE_OFFSET
        )

    @pytest.mark.parametrize("h_btu", [-5.0, 0.0, 20.5, 28.2, 120.0])
    def test_round_trip_ip_si_ip(self, h_btu):
        assert units.kj_kg_to_btu_lb(units.btu_lb_to_kj_kg(h_btu)) == rel(h_btu)

    @pytest.mark.parametrize("h_kj", [-20.0, 0.0, 47.8, 250.0])
    def test_round_trip_si_ip_si(self, h_kj):
        assert units.btu_lb_to_kj_kg(units.kj_kg_to_btu_lb(h_kj)) == rel(h_kj)


class TestVolumeAndDensity:
    def test_specific_volume_factor(self):
        # 1 m³/kg = 16.0185 ft³/lb
        assert units.m3_kg_to_ft3_lb(1.0) == pytest.approx(16.0185, rel=1e-5)

    def test_density_factor(self):
        # 1 kg/m³ = 0.062428 lb/ft³
        assert units.kg_m3_to_lb_ft3(1.0) == pytest.approx(0.062428, rel=1e-5)

    def test_density_is_reciprocal_scaling_of_volume(self):
        v_si = 0.8544
        rho_si = 1.0 / v_si
        assert units.kg_m3_to_lb_ft3(rho_si) == pytest.approx(
            1.0 / units.m3_kg_to_ft3_lb(v_si)
        )

    @pytest.mark.parametrize("v_ft3", [11.0, 13.686, 16.5])
    def test_volume_round_trip(self, v_ft3):
        assert units.m3_kg_to_ft3_lb(units.ft3_lb_to_m3_kg(v_ft3)) == rel(v_ft3)

    @pytest.mark.parametrize("rho", [0.06, 0.0737, 0.08])
    def test_density_round_trip(self, rho):
        assert units.kg_m3_to_lb_ft3(units.lb_ft3_to_kg_m3(rho)) == rel(rho)


class TestLength:
    def test_mile(self):
        assert units.ft_to_m(5280.0) == pytest.approx(1609.344)

    def test_round_trip(self):
        assert units.m_to_ft(units.ft_to_m(1234.5)) == rel(1234.5)
