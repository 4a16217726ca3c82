"""
Humidity ratio, partial vapor pressure and relative humidity.

Equation numbers refer to ASHRAE Fundamentals handbook (2005), chapter 6,
unless noted otherwise. All functions work in SI: °C, kPa, kg/kg dry air.
"""

from psych.engine.errors import InvalidRange
from psych.engine.saturation import saturation_pressure

# Ratio of molecular masses of water vapor and dry air
MW_RATIO = 0.62198

# Same ratio as published in the 2009 handbook (chapter 1, eq. 20)
_MW_RATIO_2009 = 0.621945


def _check_vapor_below_total(pv: float, pressure: float) -> None:
    if pressure - pv <= 0:
        raise InvalidRange(
            f"Vapor pressure {pv:.4f} kPa is not below ambient pressure "
            f"{pressure:.4f} kPa; humidity ratio is undefined."
        )


def partial_vapor_pressure(pressure: float, W: float) -> float:
    """Partial pressure of water vapor (kPa), eq. 38."""
    return pressure * W / (MW_RATIO + W)


def humidity_ratio_from_wet_bulb(Tdb: float, Twb: float, pressure: float) -> float:
    """
    Humidity ratio from dry-bulb and wet-bulb temperatures.

    Saturation humidity ratio at the wet bulb (eq. 23) fed into the energy
    balance of eq. 35 above freezing or eq. 37 (latent heat of ice) below.
    The result may be negative for an inconsistent (Tdb, Twb) pair; callers
    decide whether that is an error.
    """
    Pws = saturation_pressure(Twb)
    _check_vapor_below_total(Pws, pressure)
    Ws = MW_RATIO * Pws / (pressure - Pws)

    if Tdb >= 0:
        return (
            ((2501 - 2.326 * Twb) * Ws - 1.006 * (Tdb - Twb))
            / (2501 + 1.86 * Tdb - 4.186 * Twb)
        )
    return (
        ((2830 - 0.24 * Twb) * Ws - 1.006 * (Tdb - Twb))
        / (2830 + 1.86 * Tdb - 2.1 * Twb)
    )


def humidity_ratio_from_rh(Tdb: float, RH: float, pressure: float) -> float:
    """Humidity ratio from dry-bulb and relative humidity (fraction), eqs. 22/24."""
    Pws = saturation_pressure(Tdb)
    _check_vapor_below_total(RH * Pws, pressure)
    return MW_RATIO * RH * Pws / (pressure - RH * Pws)


def humidity_ratio_from_dew_point(Tdp: float, pressure: float) -> float:
    """Humidity ratio from dew point, 2009 handbook chapter 1 eq. 20."""
    Pw = saturation_pressure(Tdp)
    _check_vapor_below_total(Pw, pressure)
    return _MW_RATIO_2009 * Pw / (pressure - Pw)


def humidity_ratio_from_enthalpy(Tdb: float, h: float) -> float:
    """Humidity ratio from dry-bulb and enthalpy (kJ/kg dry air), eq. 32 solved for W."""
    return (h - 1.006 * Tdb) / (2501 + 1.86 * Tdb)


def relative_humidity(Tdb: float, W: float, pressure: float) -> float:
    """Relative humidity (fraction) from humidity ratio, eq. 24."""
    return partial_vapor_pressure(pressure, W) / saturation_pressure(Tdb)


def relative_humidity_from_wet_bulb(Tdb: float, Twb: float, pressure: float) -> float:
    W = humidity_ratio_from_wet_bulb(Tdb, Twb, pressure)
    return relative_humidity(Tdb, W, pressure)


def relative_humidity_from_dew_point(Tdb: float, Tdp: float) -> float:
    return saturation_pressure(Tdp) / saturation_pressure(Tdb)


def degree_of_saturation(Tdb: float, W: float, pressure: float) -> float:
    """Ratio of W to the saturation humidity ratio at the same Tdb and pressure."""
    return W / humidity_ratio_from_rh(Tdb, 1.0, pressure)
