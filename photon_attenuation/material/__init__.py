from .coefficient import AbsorptionEdge
from .reference_data import REFERENCE_DATA, ReferenceData, validate_atomic_number
from .elements import atomic_number, symbol
from .element import ElementInterpolator, mass_attenuation, VALID_ENERGY_RANGE_KEV
from .material import MaterialAttenuation, build_material_attenuation
from .interp_mu import PchipTable, interp_mu

__all__ = [
    "AbsorptionEdge",
    "REFERENCE_DATA",
    "ReferenceData",
    "validate_atomic_number",
    "atomic_number",
    "symbol",
    "ElementInterpolator",
    "mass_attenuation",
    "VALID_ENERGY_RANGE_KEV",
    "MaterialAttenuation",
    "build_material_attenuation",
    "PchipTable",
    "interp_mu",
]
