"""
Pydantic models for single-property evaluation and full state point input/output.
"""

from pydantic import BaseModel, Field
from psych.config import UnitSystem, PropertySelector, DEFAULT_PRESSURE_IP


class EvaluateInput(BaseModel):
    """Input model for deriving one property from one known property."""

    pressure: float = Field(
        default=DEFAULT_PRESSURE_IP,
        description="Barometric pressure. IP: psia, SI: Pa",
    )
    dry_bulb: float = Field(..., description="Dry-bulb temperature (°F or °C)")
    known_value: float = Field(..., description="Value of the known property")
    known_kind: int = Field(
        ...,
        description="Property slot of known_value (1, 2, 3, 4 or 7)",
        examples=[3],
    )
    requested_kind: int = Field(
        ...,
        description="Property slot to compute (1-10, 8 is unsupported)",
        examples=[7],
    )
    unit_system: UnitSystem = Field(
        default=UnitSystem.IP,
        description="Unit system: 0 = IP, 1 = SI",
    )


class EvaluateOutput(BaseModel):
    """Result of a single-property evaluation."""

    requested_kind: PropertySelector
    unit_system: UnitSystem
    value: float
    unit: str = Field(default="", description="Unit label for value")


class StatePointInput(BaseModel):
    """Input model for resolving every supported property at once."""

    pressure: float = Field(
        default=DEFAULT_PRESSURE_IP,
        description="Barometric pressure. IP: psia, SI: Pa",
    )
    dry_bulb: float = Field(..., description="Dry-bulb temperature (°F or °C)")
    known_value: float = Field(..., description="Value of the known property")
    known_kind: int = Field(
        ...,
        description="Property slot of known_value (1, 2, 3, 4 or 7)",
        examples=[3],
    )
    unit_system: UnitSystem = Field(
        default=UnitSystem.IP,
        description="Unit system: 0 = IP, 1 = SI",
    )
    label: str = Field(
        default="",
        description="Optional user-facing label for this state point",
    )


class StatePointOutput(BaseModel):
    """Full resolved state point with all supported psychrometric properties."""

    # Input echo
    label: str = ""
    unit_system: UnitSystem = UnitSystem.IP
    pressure: float
    dry_bulb: float
    known_value: float
    known_kind: PropertySelector

    # Resolved properties
    wet_bulb: float = Field(..., description="Wet-bulb temperature (°F or °C)")
    dew_point: float = Field(..., description="Dew point temperature (°F or °C)")
    relative_humidity: float = Field(..., description="Relative humidity (fraction)")
    humidity_ratio: float = Field(..., description="Humidity ratio (lb/lb or kg/kg)")
    vapor_pressure: float = Field(..., description="Partial vapor pressure (psi or Pa)")
    degree_of_saturation: float = Field(..., description="Degree of saturation (fraction)")
    enthalpy: float = Field(..., description="Enthalpy (BTU/lb_da or kJ/kg_da)")
    specific_volume: float = Field(..., description="Specific volume (ft³/lb_da or m³/kg_da)")
    density: float = Field(..., description="Moist air density (lb/ft³ or kg/m³)")
