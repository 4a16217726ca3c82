"""
Tests for the Newton-Raphson wet-bulb solver.

The solver's answer is cross-checked against a bracketed root (scipy brentq)
of the same energy balance and against psychrolib's own wet-bulb routine.
Degenerate inputs must end in NonConvergence, never a hang or a
ZeroDivisionError.
"""

import pytest
import psychrolib
from scipy.optimize import brentq

from psych.engine.errors import NonConvergence
from psych.engine.humidity import humidity_ratio_from_rh, humidity_ratio_from_wet_bulb
from psych.engine.wet_bulb import wet_bulb

P_STD = 101.325  # kPa


def _bracketed_wet_bulb(Tdb: float, RH: float, pressure: float, lower: float) -> float:
    W_target = humidity_ratio_from_rh(Tdb, RH, pressure)

    def objective(Twb: float) -> float:
        return humidity_ratio_from_wet_bulb(Tdb, Twb, pressure) - W_target

    return brentq(objective, lower, Tdb, xtol=1e-10)


class TestWetBulbStandardRoom:
    """24 °C, 50% RH at sea level."""

    def setup_method(self):
        self.Twb = wet_bulb(24.0, 0.5, P_STD)

    def test_expected_range(self):
        assert 16.6 <= self.Twb <= 17.2

    def test_below_dry_bulb(self):
        assert self.Twb < 24.0

    def test_reproduces_target_humidity_ratio(self):
        W_target = humidity_ratio_from_rh(24.0, 0.5, P_STD)
        W = humidity_ratio_from_wet_bulb(24.0, self.Twb, P_STD)
        assert abs((W - W_target) / W_target) < 1e-5

    def test_matches_bracketed_root(self):
        assert self.Twb == pytest.approx(_bracketed_wet_bulb(24.0, 0.5, P_STD, -20.0), abs=0.01)

    def test_matches_psychrolib(self):
        psychrolib.SetUnitSystem(psychrolib.SI)
        expected = psychrolib.GetTWetBulbFromRelHum(24.0, 0.5, P_STD * 1000.0)
        assert self.Twb == pytest.approx(expected, abs=0.1)


class TestWetBulbConditions:
    def test_saturated_air(self):
        assert wet_bulb(30.0, 1.0, P_STD) == pytest.approx(30.0, abs=1e-9)

    def test_below_freezing(self):
        Twb = wet_bulb(-10.0, 0.5, P_STD)
        assert Twb < -10.0
        assert Twb == pytest.approx(_bracketed_wet_bulb(-10.0, 0.5, P_STD, -40.0), abs=0.01)

    def test_hot_dry_desert(self):
        Twb = wet_bulb(45.0, 0.1, P_STD)
        assert Twb == pytest.approx(_bracketed_wet_bulb(45.0, 0.1, P_STD, 0.0), abs=0.01)

    def test_high_altitude(self):
        # Lower pressure means more evaporative cooling at the same RH
        Twb_high = wet_bulb(24.0, 0.5, 80.0)
        Twb_sea = wet_bulb(24.0, 0.5, P_STD)
        assert Twb_high < Twb_sea

    @pytest.mark.parametrize("RH", [0.1, 0.3, 0.5, 0.7, 0.9])
    def test_increases_with_rh(self, RH):
        assert wet_bulb(25.0, RH, P_STD) < wet_bulb(25.0, RH + 0.05, P_STD)


class TestWetBulbGuards:
    def test_zero_rh_does_not_divide_by_zero(self):
        with pytest.raises(NonConvergence):
            wet_bulb(24.0, 0.0, P_STD)

    def test_zero_rh_at_cold_extreme(self):
        with pytest.raises(NonConvergence):
            wet_bulb(-100.0, 0.0, P_STD)

    def test_zero_rh_at_hot_extreme(self):
        with pytest.raises(NonConvergence):
            wet_bulb(200.0, 0.0, P_STD)

    def test_starting_guess_above_boiling(self):
        with pytest.raises(NonConvergence) as exc_info:
            wet_bulb(120.0, 0.05, P_STD)
        assert exc_info.value.iterations == 0

    def test_iteration_cap(self):
        with pytest.raises(NonConvergence) as exc_info:
            wet_bulb(30.0, 0.2, P_STD, max_iterations=1)
        assert exc_info.value.iterations == 1
        assert exc_info.value.residual > 1e-5

    def test_no_iterations_allowed(self):
        with pytest.raises(NonConvergence):
            wet_bulb(25.0, 0.5, P_STD, max_iterations=0)

    def test_non_convergence_is_a_value_error(self):
        with pytest.raises(ValueError):
            wet_bulb(24.0, 0.0, P_STD)
