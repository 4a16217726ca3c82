"""
Standard atmosphere pressure and temperature from elevation.

ASHRAE Fundamentals 2005, chapter 6, equations 3 and 4. Valid from
-5000 m to 11000 m.
"""

from psych.config import STANDARD_ELEVATION_MAX, STANDARD_ELEVATION_MIN, UnitSystem
from psych.engine import units
from psych.engine.errors import InvalidRange, InvalidUnitSystem
from psych.models.state import StandardAtmosphereOutput


def _check_elevation(elevation: float) -> None:
    if not STANDARD_ELEVATION_MIN <= elevation <= STANDARD_ELEVATION_MAX:
        raise InvalidRange(
            f"Elevation {elevation} m is outside the standard atmosphere range "
            f"[{STANDARD_ELEVATION_MIN:g}, {STANDARD_ELEVATION_MAX:g}] m"
        )


def standard_pressure(elevation: float) -> float:
    """Standard barometric pressure (kPa) at an elevation in metres."""
    _check_elevation(elevation)
    return 101.325 * (1 - 0.0000225577 * elevation) ** 5.2559


def standard_temperature(elevation: float) -> float:
    """Standard air temperature (°C) at an elevation in metres."""
    _check_elevation(elevation)
    return 15 - 0.0065 * elevation


def standard_conditions(elevation: float, unit_system: UnitSystem) -> StandardAtmosphereOutput:
    """
    Standard pressure and temperature in the caller's unit system.

    Args:
        elevation: Elevation in feet (IP) or meters (SI)
        unit_system: IP or SI

    Returns:
        StandardAtmosphereOutput with pressure in psia (IP) or Pa (SI) and
        temperature in °F (IP) or °C (SI)
    """
    if unit_system == UnitSystem.IP:
        elevation_m = units.ft_to_m(elevation)
        pressure = units.kpa_to_psi(standard_pressure(elevation_m))
        temperature = units.c_to_f(standard_temperature(elevation_m))
    elif unit_system == UnitSystem.SI:
        pressure = units.kpa_to_pa(standard_pressure(elevation))
        temperature = standard_temperature(elevation)
    else:
        raise InvalidUnitSystem(f"Unknown unit system: {unit_system!r}")

    return StandardAtmosphereOutput(
        elevation=elevation,
        unit_system=unit_system,
        pressure=pressure,
        temperature=temperature,
    )
