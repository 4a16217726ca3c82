"""
Closed-form moist-air properties: enthalpy, density and specific volume.

SI throughout: °C, kPa, kg/kg dry air.
"""

# Gas constant for dry air, J/(kg·K)
R_DA = 287.055


def enthalpy(Tdb: float, W: float) -> float:
    """Moist air enthalpy (kJ/kg dry air), ASHRAE 2005 ch. 6 eq. 32."""
    return 1.006 * Tdb + W * (2501 + 1.86 * Tdb)


def dry_air_density(pressure: float, Tdb: float, W: float) -> float:
    """
    Dry air density (kg dry air / m³), ASHRAE 2005 ch. 6 eq. 28.

    Total density of the air/water mixture is dry_air_density * (1 + W).
    """
    return 1000 * pressure / (R_DA * (273.15 + Tdb) * (1 + 1.6078 * W))


def moist_air_density(pressure: float, Tdb: float, W: float) -> float:
    return dry_air_density(pressure, Tdb, W) * (1 + W)


def specific_volume(pressure: float, Tdb: float, W: float) -> float:
    """Specific volume (m³/kg dry air)."""
    return 1 / dry_air_density(pressure, Tdb, W)
