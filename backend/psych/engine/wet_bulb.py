"""
Wet-bulb temperature solver.

Finds the wet-bulb temperature whose psychrometric energy balance gives the
same humidity ratio as the known (Tdb, RH) state. Newton-Raphson starting at
saturation (Twb = Tdb) with a backward finite-difference slope; it usually
settles in three or four steps. The loop is capped and every degenerate case
ends in NonConvergence rather than a hang or a ZeroDivisionError.
"""

import logging
import math

from psych.config import (
    WET_BULB_MAX_ITERATIONS,
    WET_BULB_MIN_TARGET,
    WET_BULB_STEP,
    WET_BULB_TOLERANCE,
)
from psych.engine.errors import InvalidRange, NonConvergence
from psych.engine.humidity import humidity_ratio_from_rh, humidity_ratio_from_wet_bulb

logger = logging.getLogger(__name__)

_ABSOLUTE_ZERO_C = -273.15


def _trial_humidity_ratio(Tdb: float, Twb: float, pressure: float, iteration: int) -> float:
    """Humidity ratio at a Newton iterate; a non-physical iterate means the solve diverged."""
    if not math.isfinite(Twb) or Twb <= _ABSOLUTE_ZERO_C:
        raise NonConvergence(
            f"Wet-bulb iterate {Twb!r} left the physical range", iterations=iteration
        )
    try:
        return humidity_ratio_from_wet_bulb(Tdb, Twb, pressure)
    except InvalidRange as e:
        raise NonConvergence(
            f"Wet-bulb iterate {Twb:.4f} is not physical: {e}", iterations=iteration
        ) from e


def wet_bulb(
    Tdb: float,
    RH: float,
    pressure: float,
    max_iterations: int = WET_BULB_MAX_ITERATIONS,
    tolerance: float = WET_BULB_TOLERANCE,
) -> float:
    """
    Wet-bulb temperature (°C).

    Args:
        Tdb: Dry-bulb temperature (°C)
        RH: Relative humidity (fraction)
        pressure: Ambient pressure (kPa)
        max_iterations: Newton steps allowed before giving up
        tolerance: Relative humidity-ratio residual that counts as converged

    Raises:
        NonConvergence: target humidity ratio is ~0, the slope degenerates,
            or the tolerance is not met within max_iterations.
    """
    W_target = humidity_ratio_from_rh(Tdb, RH, pressure)

    if not math.isfinite(W_target) or abs(W_target) < WET_BULB_MIN_TARGET:
        raise NonConvergence(
            f"Target humidity ratio {W_target!r} is too close to zero for a "
            f"relative residual (Tdb={Tdb}, RH={RH})."
        )

    Twb = Tdb
    W = _trial_humidity_ratio(Tdb, Twb, pressure, 0)
    residual = abs((W - W_target) / W_target)

    for iteration in range(max_iterations):
        if residual < tolerance:
            logger.debug(
                "Wet bulb converged to %.6f after %d iterations", Twb, iteration
            )
            return Twb

        W_lower = _trial_humidity_ratio(Tdb, Twb - WET_BULB_STEP, pressure, iteration)
        slope = (W - W_lower) / WET_BULB_STEP
        if slope == 0 or not math.isfinite(slope):
            raise NonConvergence(
                f"Degenerate slope {slope!r} at Twb={Twb}",
                iterations=iteration,
                residual=residual,
            )

        Twb = Twb - (W - W_target) / slope
        W = _trial_humidity_ratio(Tdb, Twb, pressure, iteration + 1)
        residual = abs((W - W_target) / W_target)
        logger.debug(
            "Wet bulb iteration %d: Twb=%.6f residual=%.3e", iteration + 1, Twb, residual
        )

    if residual < tolerance:
        return Twb

    raise NonConvergence(
        f"Wet bulb did not converge within {max_iterations} iterations "
        f"(Tdb={Tdb}, RH={RH}, P={pressure})",
        iterations=max_iterations,
        residual=residual,
    )
