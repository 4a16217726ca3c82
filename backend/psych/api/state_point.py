"""
API routes for property evaluation and state point resolution.
"""

from fastapi import APIRouter, HTTPException

from psych.config import PROPERTY_UNITS, PropertySelector, UnitSystem
from psych.engine.atmosphere import standard_conditions
from psych.engine.errors import PsychrometricError, UnsupportedProperty
from psych.engine.state_resolver import evaluate, resolve_state
from psych.models.state import StandardAtmosphereOutput
from psych.models.state_point import (
    EvaluateInput,
    EvaluateOutput,
    StatePointInput,
    StatePointOutput,
)

router = APIRouter(prefix="/api/v1", tags=["state-point"])


def _engine_error(e: PsychrometricError) -> HTTPException:
    status_code = 501 if isinstance(e, UnsupportedProperty) else 422
    return HTTPException(status_code=status_code, detail=f"{type(e).__name__}: {e}")


@router.post("/evaluate", response_model=EvaluateOutput)
async def evaluate_property(data: EvaluateInput) -> EvaluateOutput:
    """
    Derive one psychrometric property from dry-bulb, pressure and one known property.
    """
    try:
        value = evaluate(
            pressure=data.pressure,
            dry_bulb=data.dry_bulb,
            known_value=data.known_value,
            known_kind=data.known_kind,
            requested_kind=data.requested_kind,
            unit_system=data.unit_system,
        )
    except PsychrometricError as e:
        raise _engine_error(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")

    requested = PropertySelector(data.requested_kind)
    return EvaluateOutput(
        requested_kind=requested,
        unit_system=data.unit_system,
        value=value,
        unit=PROPERTY_UNITS[data.unit_system][requested],
    )


@router.post("/state-point", response_model=StatePointOutput)
async def create_state_point(data: StatePointInput) -> StatePointOutput:
    """
    Resolve every supported psychrometric property from dry-bulb, pressure
    and one known property.
    """
    try:
        return resolve_state(
            pressure=data.pressure,
            dry_bulb=data.dry_bulb,
            known_value=data.known_value,
            known_kind=data.known_kind,
            unit_system=data.unit_system,
            label=data.label,
        )
    except PsychrometricError as e:
        raise _engine_error(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/standard-atmosphere", response_model=StandardAtmosphereOutput)
async def standard_atmosphere(
    elevation: float, unit_system: UnitSystem = UnitSystem.IP
) -> StandardAtmosphereOutput:
    """
    Standard atmospheric pressure and temperature at an elevation.

    Args:
        elevation: Elevation in feet (IP) or meters (SI)
        unit_system: 0 (IP) or 1 (SI)
    """
    try:
        return standard_conditions(elevation, unit_system)
    except PsychrometricError as e:
        raise _engine_error(e)
