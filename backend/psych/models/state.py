"""
Pydantic models for engine-internal state and the standard atmosphere helper.
"""

from typing import Optional

from pydantic import BaseModel, Field

from psych.config import UnitSystem


class MoistAirState(BaseModel):
    """
    Canonical SI state for a single evaluation.

    Built fresh by the resolver for every call and discarded afterwards.
    Which of humidity_ratio / relative_humidity is populated depends on the
    resolution strategy chosen for the requested output.
    """

    pressure: float = Field(..., gt=0, description="Ambient pressure (kPa)")
    dry_bulb: float = Field(..., description="Dry-bulb temperature (°C)")
    humidity_ratio: Optional[float] = Field(
        default=None, description="Humidity ratio (kg_w/kg_da)"
    )
    relative_humidity: Optional[float] = Field(
        default=None, description="Relative humidity (fraction, not clamped)"
    )


class StandardAtmosphereOutput(BaseModel):
    """Standard pressure and temperature at an elevation."""

    elevation: float = Field(..., description="Elevation (ft for IP, m for SI)")
    unit_system: UnitSystem
    pressure: float = Field(..., description="Pressure (psia for IP, Pa for SI)")
    temperature: float = Field(..., description="Temperature (°F for IP, °C for SI)")
