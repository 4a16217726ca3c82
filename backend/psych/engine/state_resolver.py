"""
Core state resolver.

Given barometric pressure, dry-bulb temperature and one known moist-air
property, derives any other supported property in IP or SI units.

Every evaluation runs through the same four steps:
  1. normalize the inputs to SI (kPa, °C, kg/kg, kJ/kg with a 0 °C reference)
  2. canonicalize the known property into relative humidity or humidity ratio
  3. derive the requested property from the canonical state
  4. convert the result back to the caller's unit system

Step 2 has two strategies. Wet-bulb and relative humidity outputs need RH,
so the known property is turned into RH first; every other output only
needs the humidity ratio W.
"""

import logging
import math
from typing import Callable, Union

from psych.config import (
    PropertySelector,
    Resolution,
    RH_FIRST_OUTPUTS,
    SATURATION_TDB_MAX,
    SATURATION_TDB_MIN,
    TEMPERATURE_KINDS,
    UnitSystem,
    VALID_INPUT_KINDS,
)
from psych.engine import units
from psych.engine.dew_point import dew_point
from psych.engine.errors import (
    InvalidPropertySelector,
    InvalidRange,
    InvalidUnitSystem,
    UnsupportedProperty,
)
from psych.engine.humidity import (
    _check_vapor_below_total,
    degree_of_saturation,
    humidity_ratio_from_dew_point,
    humidity_ratio_from_enthalpy,
    humidity_ratio_from_rh,
    humidity_ratio_from_wet_bulb,
    partial_vapor_pressure,
    relative_humidity,
    relative_humidity_from_dew_point,
)
from psych.engine.properties import enthalpy, moist_air_density, specific_volume
from psych.engine.saturation import saturation_pressure
from psych.engine.wet_bulb import wet_bulb
from psych.models.state import MoistAirState
from psych.models.state_point import StatePointOutput

logger = logging.getLogger(__name__)

Selector = Union[PropertySelector, int]


# ---------------------------------------------------------------------------
# Selector and unit-system parsing
# ---------------------------------------------------------------------------

def _parse_selector(value: Selector, role: str) -> PropertySelector:
    try:
        return PropertySelector(value)
    except ValueError:
        raise InvalidPropertySelector(
            f"Unknown {role} property selector: {value!r}. "
            f"Valid selectors are 1-10."
        ) from None


def _parse_unit_system(value: Union[UnitSystem, int]) -> UnitSystem:
    try:
        return UnitSystem(value)
    except ValueError:
        raise InvalidUnitSystem(
            f"Unknown unit system: {value!r}. Use 0 (IP) or 1 (SI)."
        ) from None


# ---------------------------------------------------------------------------
# Step 1 and 4: unit normalization
# ---------------------------------------------------------------------------

def _known_to_si(value: float, kind: PropertySelector, unit_system: UnitSystem) -> float:
    """Convert the known property to SI. RH and W are unitless."""
    if unit_system == UnitSystem.SI:
        return value
    if kind in TEMPERATURE_KINDS:
        return units.f_to_c(value)
    if kind == PropertySelector.ENTHALPY:
        return units.btu_lb_to_kj_kg(value)
    return value


def _result_from_si(value: float, kind: PropertySelector, unit_system: UnitSystem) -> float:
    """Convert a derived SI property to the caller's unit system."""
    if unit_system == UnitSystem.SI:
        if kind == PropertySelector.VAPOR_PRESSURE:
            return units.kpa_to_pa(value)
        return value

    if kind in TEMPERATURE_KINDS:
        return units.c_to_f(value)
    if kind == PropertySelector.VAPOR_PRESSURE:
        return units.kpa_to_psi(value)
    if kind == PropertySelector.ENTHALPY:
        return units.kj_kg_to_btu_lb(value)
    if kind == PropertySelector.SPECIFIC_VOLUME:
        return units.m3_kg_to_ft3_lb(value)
    if kind == PropertySelector.DENSITY:
        return units.kg_m3_to_lb_ft3(value)
    # RH, W and degree of saturation are unitless
    return value


def _check_temperature(value: float, name: str) -> None:
    if not SATURATION_TDB_MIN <= value <= SATURATION_TDB_MAX:
        raise InvalidRange(
            f"{name} {value:.4f} °C is outside the saturation correlation range "
            f"[{SATURATION_TDB_MIN:g}, {SATURATION_TDB_MAX:g}] °C"
        )


def _check_non_negative(value: float, name: str) -> float:
    if value < 0:
        raise InvalidRange(
            f"{name} resolved to {value:.6g}; the input combination is not physical."
        )
    return value


# ---------------------------------------------------------------------------
# Step 2: canonicalization strategies
# ---------------------------------------------------------------------------

def _resolve_rh_first(
    state: MoistAirState, known_value: float, known_kind: PropertySelector
) -> MoistAirState:
    """Settle relative humidity first (W is kept when it is an intermediate)."""
    Tdb, P = state.dry_bulb, state.pressure
    W = None

    if known_kind == PropertySelector.WET_BULB:
        W = _check_non_negative(
            humidity_ratio_from_wet_bulb(Tdb, known_value, P), "Humidity ratio"
        )
        RH = relative_humidity(Tdb, W, P)
    elif known_kind == PropertySelector.DEW_POINT:
        _check_vapor_below_total(saturation_pressure(known_value), P)
        RH = relative_humidity_from_dew_point(Tdb, known_value)
    elif known_kind == PropertySelector.RELATIVE_HUMIDITY:
        RH = _check_non_negative(known_value, "Relative humidity")
        _check_vapor_below_total(RH * saturation_pressure(Tdb), P)
    elif known_kind == PropertySelector.HUMIDITY_RATIO:
        W = _check_non_negative(known_value, "Humidity ratio")
        RH = relative_humidity(Tdb, W, P)
    else:  # ENTHALPY
        W = _check_non_negative(
            humidity_ratio_from_enthalpy(Tdb, known_value), "Humidity ratio"
        )
        RH = relative_humidity(Tdb, W, P)

    return state.model_copy(update={"relative_humidity": RH, "humidity_ratio": W})


def _resolve_w_first(
    state: MoistAirState, known_value: float, known_kind: PropertySelector
) -> MoistAirState:
    """Settle humidity ratio directly from the known property."""
    Tdb, P = state.dry_bulb, state.pressure

    if known_kind == PropertySelector.WET_BULB:
        W = humidity_ratio_from_wet_bulb(Tdb, known_value, P)
    elif known_kind == PropertySelector.DEW_POINT:
        W = humidity_ratio_from_dew_point(known_value, P)
    elif known_kind == PropertySelector.RELATIVE_HUMIDITY:
        RH = _check_non_negative(known_value, "Relative humidity")
        W = humidity_ratio_from_rh(Tdb, RH, P)
    elif known_kind == PropertySelector.HUMIDITY_RATIO:
        W = known_value
    else:  # ENTHALPY
        W = humidity_ratio_from_enthalpy(Tdb, known_value)

    W = _check_non_negative(W, "Humidity ratio")
    return state.model_copy(update={"humidity_ratio": W})


_RESOLVERS: dict[Resolution, Callable[[MoistAirState, float, PropertySelector], MoistAirState]] = {
    Resolution.RH_FIRST: _resolve_rh_first,
    Resolution.W_FIRST: _resolve_w_first,
}


def resolution_for(requested_kind: PropertySelector) -> Resolution:
    """Pick the canonicalization strategy for a requested output."""
    if requested_kind in RH_FIRST_OUTPUTS:
        return Resolution.RH_FIRST
    return Resolution.W_FIRST


# ---------------------------------------------------------------------------
# Step 3: output derivation (SI)
# ---------------------------------------------------------------------------

def _derive_wet_bulb(s: MoistAirState) -> float:
    return wet_bulb(s.dry_bulb, s.relative_humidity, s.pressure)


def _derive_dew_point(s: MoistAirState) -> float:
    return dew_point(s.pressure, s.humidity_ratio)


def _derive_relative_humidity(s: MoistAirState) -> float:
    return s.relative_humidity


def _derive_humidity_ratio(s: MoistAirState) -> float:
    return s.humidity_ratio


def _derive_vapor_pressure(s: MoistAirState) -> float:
    return partial_vapor_pressure(s.pressure, s.humidity_ratio)


def _derive_degree_of_saturation(s: MoistAirState) -> float:
    return degree_of_saturation(s.dry_bulb, s.humidity_ratio, s.pressure)


def _derive_enthalpy(s: MoistAirState) -> float:
    return enthalpy(s.dry_bulb, s.humidity_ratio)


def _derive_specific_volume(s: MoistAirState) -> float:
    return specific_volume(s.pressure, s.dry_bulb, s.humidity_ratio)


def _derive_density(s: MoistAirState) -> float:
    return moist_air_density(s.pressure, s.dry_bulb, s.humidity_ratio)


# Entropy has no entry: it is reported as unsupported before any work is done.
_DERIVERS: dict[PropertySelector, Callable[[MoistAirState], float]] = {
    PropertySelector.WET_BULB: _derive_wet_bulb,
    PropertySelector.DEW_POINT: _derive_dew_point,
    PropertySelector.RELATIVE_HUMIDITY: _derive_relative_humidity,
    PropertySelector.HUMIDITY_RATIO: _derive_humidity_ratio,
    PropertySelector.VAPOR_PRESSURE: _derive_vapor_pressure,
    PropertySelector.DEGREE_OF_SATURATION: _derive_degree_of_saturation,
    PropertySelector.ENTHALPY: _derive_enthalpy,
    PropertySelector.SPECIFIC_VOLUME: _derive_specific_volume,
    PropertySelector.DENSITY: _derive_density,
}


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def evaluate(
    pressure: float,
    dry_bulb: float,
    known_value: float,
    known_kind: Selector,
    requested_kind: Selector,
    unit_system: Union[UnitSystem, int],
) -> float:
    """
    Main entry point. Derives one psychrometric property from one known property.

    Args:
        pressure: Barometric pressure (psia for IP, Pa for SI)
        dry_bulb: Dry-bulb temperature (°F for IP, °C for SI)
        known_value: Value of the known property, in the unit system's units
        known_kind: Which property known_value is (1, 2, 3, 4 or 7)
        requested_kind: Which property to return (1-10, except 8)
        unit_system: 0 / UnitSystem.IP or 1 / UnitSystem.SI

    Returns:
        The requested property in the unit system's output units. Vapor
        pressure comes back in psi (IP) or Pa (SI).

    Raises:
        InvalidPropertySelector: known_kind or requested_kind is not usable
        UnsupportedProperty: requested_kind is entropy
        InvalidUnitSystem: unit_system is neither IP nor SI
        InvalidRange: non-physical pressure, temperature or humidity
        NonConvergence: the wet-bulb solver could not converge
    """
    requested = _parse_selector(requested_kind, "requested")
    if requested == PropertySelector.ENTROPY:
        raise UnsupportedProperty("Entropy is not supported by this engine.")

    known = _parse_selector(known_kind, "known")
    if known not in VALID_INPUT_KINDS:
        raise InvalidPropertySelector(
            f"{known.name} cannot be used as the known property. Valid inputs: "
            f"{', '.join(k.name for k in sorted(VALID_INPUT_KINDS))}"
        )

    system = _parse_unit_system(unit_system)

    if system == UnitSystem.IP:
        P = units.psi_to_kpa(pressure)
        Tdb = units.f_to_c(dry_bulb)
    else:
        P = units.pa_to_kpa(pressure)
        Tdb = dry_bulb
    value = _known_to_si(known_value, known, system)

    if not math.isfinite(P) or P <= 0:
        raise InvalidRange(f"Pressure must be positive, got {pressure}")
    if not math.isfinite(Tdb) or not math.isfinite(value):
        raise InvalidRange(
            f"Dry-bulb temperature and known value must be finite, got "
            f"{dry_bulb!r} and {known_value!r}"
        )
    _check_temperature(Tdb, "Dry-bulb temperature")
    if known in TEMPERATURE_KINDS:
        _check_temperature(value, known.name.replace("_", " ").capitalize())

    strategy = resolution_for(requested)
    logger.debug(
        "Resolving %s from %s via %s (P=%.4f kPa, Tdb=%.4f °C)",
        requested.name, known.name, strategy.value, P, Tdb,
    )

    state = MoistAirState(pressure=P, dry_bulb=Tdb)
    state = _RESOLVERS[strategy](state, value, known)
    result = _DERIVERS[requested](state)

    return _result_from_si(result, requested, system)


def resolve_state(
    pressure: float,
    dry_bulb: float,
    known_value: float,
    known_kind: Selector,
    unit_system: Union[UnitSystem, int],
    label: str = "",
) -> StatePointOutput:
    """
    Resolve every supported property for one state point.

    Each property goes through evaluate() so it follows exactly the same
    resolution path as a single-property request.
    """
    values = {
        kind.name.lower(): evaluate(
            pressure, dry_bulb, known_value, known_kind, kind, unit_system
        )
        for kind in _DERIVERS
    }

    return StatePointOutput(
        label=label,
        unit_system=_parse_unit_system(unit_system),
        pressure=pressure,
        dry_bulb=dry_bulb,
        known_value=known_value,
        known_kind=_parse_selector(known_kind, "known"),
        **values,
    )
