"""
Psych engine configuration and constants.
"""

from enum import Enum, IntEnum


class UnitSystem(IntEnum):
    IP = 0  # Inch-Pound (°F, BTU/lb, ft³/lb, psi)
    SI = 1  # Metric (°C, kJ/kg, m³/kg, Pa)


class PropertySelector(IntEnum):
    """Property slots, used both as the known input kind and the requested output."""

    WET_BULB = 1
    DEW_POINT = 2
    RELATIVE_HUMIDITY = 3
    HUMIDITY_RATIO = 4
    VAPOR_PRESSURE = 5
    DEGREE_OF_SATURATION = 6
    ENTHALPY = 7
    ENTROPY = 8  # reserved, never computed
    SPECIFIC_VOLUME = 9
    DENSITY = 10


class Resolution(str, Enum):
    """Which canonical quantity the resolver settles first."""

    RH_FIRST = "rh_first"
    W_FIRST = "w_first"


# Kinds accepted as the known (input) property.
VALID_INPUT_KINDS: frozenset[PropertySelector] = frozenset({
    PropertySelector.WET_BULB,
    PropertySelector.DEW_POINT,
    PropertySelector.RELATIVE_HUMIDITY,
    PropertySelector.HUMIDITY_RATIO,
    PropertySelector.ENTHALPY,
})

# Requested kinds that need relative humidity before anything else.
RH_FIRST_OUTPUTS: frozenset[PropertySelector] = frozenset({
    PropertySelector.WET_BULB,
    PropertySelector.RELATIVE_HUMIDITY,
})

TEMPERATURE_KINDS: frozenset[PropertySelector] = frozenset({
    PropertySelector.WET_BULB,
    PropertySelector.DEW_POINT,
})

# Default atmospheric pressure at sea level
DEFAULT_PRESSURE_IP = 14.696  # psia
DEFAULT_PRESSURE_SI = 101325.0  # Pa

# Valid span of the saturation pressure correlation (°C)
SATURATION_TDB_MIN = -100.0
SATURATION_TDB_MAX = 200.0

# Valid span of the standard atmosphere equations (m)
STANDARD_ELEVATION_MIN = -5000.0
STANDARD_ELEVATION_MAX = 11000.0

# Wet-bulb Newton-Raphson settings
WET_BULB_MAX_ITERATIONS = 100
WET_BULB_TOLERANCE = 1e-5     # relative humidity-ratio residual
WET_BULB_STEP = 0.001         # °C, backward finite-difference step
WET_BULB_MIN_TARGET = 1e-12   # kg/kg, below this the relative residual is undefined

# Chart axis ranges
CHART_RANGES = {
    UnitSystem.IP: {
        "Tdb_min": 20.0,   # °F
        "Tdb_max": 120.0,  # °F
        "W_min": 0.0,      # lb/lb
        "W_max": 0.032,    # lb/lb
    },
    UnitSystem.SI: {
        "Tdb_min": -10.0,  # °C
        "Tdb_max": 55.0,   # °C
        "W_min": 0.0,      # kg/kg
        "W_max": 0.030,    # kg/kg
    },
}

# Output unit labels, keyed by unit system then property slot
PROPERTY_UNITS = {
    UnitSystem.IP: {
        PropertySelector.WET_BULB: "°F",
        PropertySelector.DEW_POINT: "°F",
        PropertySelector.RELATIVE_HUMIDITY: "",
        PropertySelector.HUMIDITY_RATIO: "lb_w/lb_da",
        PropertySelector.VAPOR_PRESSURE: "psi",
        PropertySelector.DEGREE_OF_SATURATION: "",
        PropertySelector.ENTHALPY: "BTU/lb_da",
        PropertySelector.SPECIFIC_VOLUME: "ft³/lb_da",
        PropertySelector.DENSITY: "lb/ft³",
    },
    UnitSystem.SI: {
        PropertySelector.WET_BULB: "°C",
        PropertySelector.DEW_POINT: "°C",
        PropertySelector.RELATIVE_HUMIDITY: "",
        PropertySelector.HUMIDITY_RATIO: "kg_w/kg_da",
        PropertySelector.VAPOR_PRESSURE: "Pa",
        PropertySelector.DEGREE_OF_SATURATION: "",
        PropertySelector.ENTHALPY: "kJ/kg_da",
        PropertySelector.SPECIFIC_VOLUME: "m³/kg_da",
        PropertySelector.DENSITY: "kg/m³",
    },
}
