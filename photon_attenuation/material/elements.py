from typing import Dict, Union

from ..exceptions import InvalidElementError
from .reference_data import validate_atomic_number

# Chemical symbols of the tabulated elements, indexed by atomic number - 1.
SYMBOLS = (
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
    "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
)

element_to_Z: Dict[str, int] = {s: i + 1 for i, s in enumerate(SYMBOLS)}
Z_to_element: Dict[int, str] = {i + 1: s for i, s in enumerate(SYMBOLS)}


def atomic_number(element: Union[str, int, float]) -> int:
    """Resolve an element given by chemical symbol or atomic number.

    Args:
        element: a symbol such as ``"Fe"`` or an atomic number.

    Returns:
        int: the atomic number, in [1, 100].
    """
    if isinstance(element, str):
        try:
            return element_to_Z[element.strip()]
        except KeyError:
            raise InvalidElementError(f"Unknown element symbol: {element!r}")
    return validate_atomic_number(element)


def symbol(z) -> str:
    """Chemical symbol of element z."""
    return Z_to_element[validate_atomic_number(z)]
