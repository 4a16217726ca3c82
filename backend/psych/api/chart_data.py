"""
API routes for chart background data generation.
"""

from fastapi import APIRouter, HTTPException

from psych.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI
from psych.engine.chart_generator import generate_chart_data

router = APIRouter(prefix="/api/v1", tags=["chart-data"])


@router.get("/chart-data")
async def get_chart_data(
    unit_system: UnitSystem = UnitSystem.IP,
    pressure: float | None = None,
) -> dict:
    """
    Saturation curve and 10-90% constant RH lines for the chart background.

    Pressure is in the unit system's units (psia or Pa) and defaults to
    standard sea level. Each point is {"Tdb", "W"} with W in kg/kg (lb/lb);
    RH lines are keyed by percent ("10" .. "90") and stop at the chart's W_max.
    The payload also echoes the unit system name, pressure and axis ranges.
    """
    if pressure is None:
        pressure = (
            DEFAULT_PRESSURE_IP
            if unit_system == UnitSystem.IP
            else DEFAULT_PRESSURE_SI
        )

    try:
        data = generate_chart_data(pressure, unit_system)
        return data
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Chart data generation error: {str(e)}")
