"""
Dew point temperature from humidity ratio.

ASHRAE Fundamentals handbook (2005), chapter 6, equations 39 and 40.
Valid for dew points below about 93 °C.
"""

import math

from psych.engine.errors import InvalidRange
from psych.engine.humidity import partial_vapor_pressure

_C14 = 6.54
_C15 = 14.526
_C16 = 0.7389
_C17 = 0.09486
_C18 = 0.4569


def dew_point(pressure: float, W: float) -> float:
    """
    Dew point (°C) at ambient pressure (kPa) and humidity ratio (kg/kg).

    Both correlations are evaluated and the above-freezing one (eq. 39) wins
    whenever its own result is non-negative; otherwise eq. 40 is used.
    """
    Pw = partial_vapor_pressure(pressure, W)
    if Pw <= 0:
        raise InvalidRange(
            f"Dew point is undefined for vapor pressure {Pw} kPa (W={W})"
        )

    alpha = math.log(Pw)
    Tdp1 = (
        _C14 + _C15 * alpha + _C16 * alpha ** 2 + _C17 * alpha ** 3
        + _C18 * Pw ** 0.1984
    )
    Tdp2 = 6.09 + 12.608 * alpha + 0.4959 * alpha ** 2

    if Tdp1 >= 0:
        return Tdp1
    return Tdp2
