"""
Saturation vapor pressure of water.

ASHRAE Fundamentals handbook (2005), chapter 6, equations 5 (over ice) and
6 (over liquid water). Valid from -100 °C to 200 °C; outside that span the
correlation is simply extrapolated.
"""

import math

# Over ice, -100 °C to 0 °C
_C1 = -5674.5359
_C2 = 6.3925247
_C3 = -0.009677843
_C4 = 6.2215701e-7
_C5 = 2.0747825e-9
_C6 = -9.484024e-13
_C7 = 4.1635019

# Over liquid water, 0 °C to 200 °C
_C8 = -5800.2206
_C9 = 1.3914993
_C10 = -0.048640239
_C11 = 4.1764768e-5
_C12 = -1.4452093e-8
_C13 = 6.5459673

_KELVIN = 273.15


def saturation_pressure(tdb: float) -> float:
    """
    Saturation vapor pressure in kPa at a dry-bulb temperature in °C.

    The ice branch covers the freezing point itself (TK <= 273.15).
    """
    TK = tdb + _KELVIN

    if TK <= _KELVIN:
        ln_pws = (
            _C1 / TK + _C2 + _C3 * TK + _C4 * TK ** 2
            + _C5 * TK ** 3 + _C6 * TK ** 4 + _C7 * math.log(TK)
        )
    else:
        ln_pws = (
            _C8 / TK + _C9 + _C10 * TK + _C11 * TK ** 2
            + _C12 * TK ** 3 + _C13 * math.log(TK)
        )

    # Pa -> kPa
    return math.exp(ln_pws) / 1000.0
