"""
IP <-> SI unit conversions used at the boundary of the resolver.

Enthalpy is the one conversion that is not a pure scale: each unit system
puts zero enthalpy at a different dry-air temperature (0 °F for IP, 0 °C for
SI), so the reference offset has to be shifted exactly once per direction.
"""

_LBF_TO_N = 4.4482216152605     # N per lbf (exact)
_IN_TO_M = 0.0254               # m per inch (exact)
_FT_TO_M = 0.3048               # m per foot (exact)
_LB_TO_KG = 0.45359237          # kg per lb (exact)
_BTU_TO_KJ = 1.055056           # kJ per ISO BTU

# kPa per psi
_PSI_TO_KPA = _LBF_TO_N / _IN_TO_M ** 2 / 1000.0

# SI enthalpy (kJ/kg) of dry air at 0 °F, i.e. where the IP scale reads zero
ENTHALPY_REFERENCE_OFFSET = 17.884444444


def f_to_c(temp_f: float) -> float:
    return (temp_f - 32.0) / 1.8


def c_to_f(temp_c: float) -> float:
    return 1.8 * temp_c + 32.0


def psi_to_kpa(pressure_psi: float) -> float:
    return pressure_psi * _PSI_TO_KPA


def kpa_to_psi(pressure_kpa: float) -> float:
    return pressure_kpa / _PSI_TO_KPA


def pa_to_kpa(pressure_pa: float) -> float:
    return pressure_pa / 1000.0


def kpa_to_pa(pressure_kpa: float) -> float:
    return pressure_kpa * 1000.0


def btu_lb_to_kj_kg(h_btu_lb: float) -> float:
    """IP enthalpy (0 °F dry-air reference) to SI enthalpy (0 °C reference)."""
    return h_btu_lb * _BTU_TO_KJ / _LB_TO_KG - ENTHALPY_REFERENCE_OFFSET


def kj_kg_to_btu_lb(h_kj_kg: float) -> float:
    """SI enthalpy (0 °C dry-air reference) to IP enthalpy (0 °F reference)."""
    return (h_kj_kg + ENTHALPY_REFERENCE_OFFSET) * _LB_TO_KG / _BTU_TO_KJ


def m3_kg_to_ft3_lb(v_m3_kg: float) -> float:
    return v_m3_kg * _LB_TO_KG / _FT_TO_M ** 3


def ft3_lb_to_m3_kg(v_ft3_lb: float) -> float:
    return v_ft3_lb * _FT_TO_M ** 3 / _LB_TO_KG


def kg_m3_to_lb_ft3(rho_kg_m3: float) -> float:
    return rho_kg_m3 * _FT_TO_M ** 3 / _LB_TO_KG


def lb_ft3_to_kg_m3(rho_lb_ft3: float) -> float:
    return rho_lb_ft3 * _LB_TO_KG / _FT_TO_M ** 3


def ft_to_m(length_ft: float) -> float:
    return length_ft * _FT_TO_M


def m_to_ft(length_m: float) -> float:
    return length_m / _FT_TO_M
