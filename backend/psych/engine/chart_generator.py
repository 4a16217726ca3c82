"""
Chart background data generator.

Generates the reference lines needed to render a psychrometric chart:
- Saturation curve (100% RH)
- Constant relative humidity lines (10%, 20%, ... 90%)

Each generator sweeps across a range of dry-bulb temperatures and evaluates
the humidity ratio for a given constant relative humidity through the state
resolver, so the chart uses exactly the correlations the calculator does.
"""

import logging

import numpy as np

from psych.config import UnitSystem, PropertySelector, CHART_RANGES
from psych.engine.errors import PsychrometricError
from psych.engine.state_resolver import evaluate

logger = logging.getLogger(__name__)

RH_LINE_VALUES = [10, 20, 30, 40, 50, 60, 70, 80, 90]


def _get_tdb_range(unit_system: UnitSystem, num_points: int = 200) -> np.ndarray:
    """Get the array of dry-bulb temperatures to sweep across."""
    ranges = CHART_RANGES[unit_system]
    return np.linspace(ranges["Tdb_min"], ranges["Tdb_max"], num_points)


def _constant_rh_points(
    rh: float,
    pressure: float,
    unit_system: UnitSystem,
    num_points: int,
    capped: bool = True,
) -> list[dict]:
    w_max = CHART_RANGES[unit_system]["W_max"] if capped else float("inf")
    points = []

    for Tdb in _get_tdb_range(unit_system, num_points):
        try:
            W = evaluate(
                pressure,
                float(Tdb),
                rh,
                PropertySelector.RELATIVE_HUMIDITY,
                PropertySelector.HUMIDITY_RATIO,
                unit_system,
            )
        except PsychrometricError as e:
            logger.warning("Skipping chart point Tdb=%.2f RH=%.2f: %s", Tdb, rh, e)
            continue
        if W <= w_max:
            points.append({
                "Tdb": round(float(Tdb), 2),
                "W": round(W, 7),
            })

    return points


def generate_saturation_curve(
    pressure: float, unit_system: UnitSystem, num_points: int = 200
) -> list[dict]:
    """
    Generate the saturation curve (100% RH boundary).

    Returns list of {Tdb, W} points tracing the upper boundary of the chart.
    """
    return _constant_rh_points(1.0, pressure, unit_system, num_points, capped=False)


def generate_rh_lines(
    pressure: float, unit_system: UnitSystem, num_points: int = 200
) -> dict[str, list[dict]]:
    """
    Generate constant relative humidity lines.

    Returns dict keyed by RH percentage string (e.g., "10", "20", ... "90"),
    each containing a list of {Tdb, W} points.
    """
    return {
        str(rh_pct): _constant_rh_points(rh_pct / 100.0, pressure, unit_system, num_points)
        for rh_pct in RH_LINE_VALUES
    }


def generate_chart_data(pressure: float, unit_system: UnitSystem) -> dict:
    """Generate all chart background data in one call."""
    ranges = CHART_RANGES[unit_system]
    return {
        "unit_system": unit_system.name,
        "pressure": pressure,
        "ranges": {
            "Tdb_min": ranges["Tdb_min"],
            "Tdb_max": ranges["Tdb_max"],
            "W_min": ranges["W_min"],
            "W_max": ranges["W_max"],
        },
        "saturation_curve": generate_saturation_curve(pressure, unit_system),
        "rh_lines": generate_rh_lines(pressure, unit_system),
    }
