from . import material
from .material import (
    MaterialAttenuation,
    ElementInterpolator,
    build_material_attenuation,
    mass_attenuation,
    interp_mu,
)
from .exceptions import (
    AttenuationError,
    InvalidElementError,
    DegenerateCompositionError,
    InvalidMaterialError,
    OutOfRangeEnergyWarning,
)
from .logging import setup_log


__all__ = [
    "material",
    "MaterialAttenuation",
    "ElementInterpolator",
    "build_material_attenuation",
    "mass_attenuation",
    "interp_mu",
    "AttenuationError",
    "InvalidElementError",
    "DegenerateCompositionError",
    "InvalidMaterialError",
    "OutOfRangeEnergyWarning",
    "setup_log",
]
