import re
import logging
import numpy as np
from typing import Dict, List, Sequence, Tuple, Union
from numpy.typing import ArrayLike, NDArray

from ..exceptions import DegenerateCompositionError, InvalidMaterialError
from .element import ElementInterpolator, as_output, check_energy_range
from .elements import atomic_number, symbol
from .reference_data import validate_atomic_number


log = logging.getLogger(__name__)


class MaterialAttenuation:
    """
    Linear attenuation coefficient of a material as a function of photon energy.

    The mass attenuation coefficient of the material is the mass-fraction weighted sum of its
    elements' coefficients, and the linear attenuation coefficient is that times the density.
    Instances are immutable once built, so a single instance can be shared by every worker of
    a photon-transport simulation.

    Attributes:
        atomic_numbers (Tuple[int, ...]): Distinct elements of the material, in order of first appearance.
        density (float): Density of the material in g/cm^3.
    """

    atomic_numbers: Tuple[int, ...]
    density: float

    def __init__(
        self,
        atomic_numbers: Union[ArrayLike, Sequence],
        fractions: ArrayLike,
        density: float,
    ):
        """
        Builds one ElementInterpolator per distinct element.

        Fractions are normalized to sum to 1. An element listed more than once contributes the
        sum of its fractions.

        Args:
            atomic_numbers: atomic number of each element, in [1, 100].
            fractions: mass fraction of each element, same length as atomic_numbers.
            density (float): density of the material in g/cm^3.
        Raises:
            InvalidMaterialError: if the density is not positive, the lengths differ, or a fraction is negative.
            InvalidElementError: if an atomic number is outside [1, 100] or not a number.
            DegenerateCompositionError: if the fractions sum to zero.
        Example:
            water = MaterialAttenuation([1, 8], [0.111898, 0.888102], density=1.0)
        """
        try:
            density = float(density)
        except (TypeError, ValueError):
            raise InvalidMaterialError(f"density must be a number, got {density!r}")
        if not np.isfinite(density) or density <= 0:
            raise InvalidMaterialError(f"density must be positive, got {density}")

        if np.ndim(atomic_numbers) == 0:
            atomic_numbers = [atomic_numbers]
        atomic_numbers = list(atomic_numbers)
        try:
            fractions = np.atleast_1d(np.asarray(fractions, dtype=np.float64))
        except (TypeError, ValueError):
            raise InvalidMaterialError(f"fractions must be numbers, got {fractions!r}")

        if len(atomic_numbers) == 0:
            raise InvalidMaterialError("material needs at least one element")
        if fractions.ndim != 1 or fractions.size != len(atomic_numbers):
            raise InvalidMaterialError(
                f"got {fractions.size} fractions for {len(atomic_numbers)} elements"
            )
        if not np.all(np.isfinite(fractions)) or np.any(fractions < 0):
            raise InvalidMaterialError(f"fractions must be non-negative, got {fractions}")

        elements = [validate_atomic_number(z) for z in atomic_numbers]

        total = fractions.sum()
        if total == 0:
            raise DegenerateCompositionError(f"fractions sum to zero: {fractions}")
        fractions = fractions / total

        composition: Dict[int, float] = {}
        for z, fraction in zip(elements, fractions):
            composition[z] = composition.get(z, 0.0) + float(fraction)

        interpolators = [ElementInterpolator(z) for z in composition]

        self.atomic_numbers = tuple(composition)
        self.density = density
        self._fractions = np.array(list(composition.values()))
        self._fractions.setflags(write=False)
        self._interpolators: Tuple[ElementInterpolator, ...] = tuple(interpolators)

        log.debug(f"built {self!r}")

    def __repr__(self):
        composition = ", ".join(
            f"{symbol(z)}: {f:.6g}" for z, f in zip(self.atomic_numbers, self._fractions)
        )
        return f"MaterialAttenuation(composition={{{composition}}}, density={self.density})"

    @property
    def fractions(self) -> NDArray[np.float64]:
        """Normalized mass fractions, aligned with atomic_numbers."""
        return self._fractions

    @property
    def composition(self) -> Dict[int, float]:
        """Mapping from atomic number to normalized mass fraction."""
        return {z: float(f) for z, f in zip(self.atomic_numbers, self._fractions)}

    @property
    def elements(self) -> Dict[int, ElementInterpolator]:
        """The interpolator of each element, by atomic number."""
        return dict(zip(self.atomic_numbers, self._interpolators))

    def _mass_attenuation(self, energy_keV: ArrayLike) -> NDArray[np.float64]:
        log_energy = np.log(np.asarray(energy_keV, dtype=np.float64))
        att = 0
        for interpolator, fraction in zip(self._interpolators, self._fractions):
            att = att + np.exp(interpolator.log_evaluate(log_energy)) * fraction
        return att

    def evaluate_mass_attenuation(self, energy_keV: ArrayLike) -> Union[float, NDArray[np.float64]]:
        """Mass attenuation coefficient of the material.

        Args:
            energy_keV (ArrayLike): photon energy in keV, scalar or array.
        Returns:
            Union[float, NDArray[np.float64]]: mass attenuation coefficient in cm^2/g.
        """
        check_energy_range(energy_keV)
        return as_output(self._mass_attenuation(energy_keV), energy_keV)

    def evaluate(self, energy_keV: ArrayLike) -> Union[float, NDArray[np.float64]]:
        """Linear attenuation coefficient of the material.

        Energies outside [1, 300] keV issue an OutOfRangeEnergyWarning, and the result is extrapolated.
        The mean free path of a photon is the reciprocal of this value.

        Args:
            energy_keV (ArrayLike): photon energy in keV, scalar or array.
        Returns:
            Union[float, NDArray[np.float64]]: linear attenuation coefficient in cm^-1.
        """
        check_energy_range(energy_keV)
        return as_output(self._mass_attenuation(energy_keV) * self.density, energy_keV)

    __call__ = evaluate

    @classmethod
    def from_composition(
        cls, composition: Dict[Union[str, int], float], density: float
    ) -> "MaterialAttenuation":
        """
        Create a MaterialAttenuation from a mapping of element to mass fraction.
        Args:
            composition (Dict[Union[str, int], float]): mass fraction by element symbol or atomic number.
            density (float): density in g/cm^3.
        Example:
            water = MaterialAttenuation.from_composition({"H": 0.111898, "O": 0.888102}, density=1.0)
        """
        elements = [atomic_number(element) for element in composition]
        return cls(elements, list(composition.values()), density)

    @classmethod
    def from_string(cls, name: str, density: float) -> "MaterialAttenuation":
        """
        Create a MaterialAttenuation from a compound string.
        Args:
            name (str): element symbols each followed by its mass fraction, e.g. "H0.111898O0.888102".
            density (float): density in g/cm^3.
        Example:
            air = MaterialAttenuation.from_string("C0.000124N0.755268O0.231781Ar0.012827", density=0.001205)
        """
        return cls.from_composition(cls._parse_compound_string(name), density)

    @staticmethod
    def _parse_compound_string(name: str) -> Dict[str, float]:
        """
        Parse a compound string like 'H0.112O0.888' -> {'H': 0.112, 'O': 0.888}

        Fractions may be integers, decimals, or use exponent notation. Repeated symbols are summed.
        """
        token = r"([A-Z][a-z]?)((?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)"
        compact = re.sub(r"\s+", "", name)
        if not compact or not re.fullmatch(f"(?:{token})+", compact):
            raise InvalidMaterialError(f"Invalid compound string: {name!r}")

        parsed: Dict[str, float] = {}
        for elem, fraction in re.findall(token, compact):
            parsed[elem] = parsed.get(elem, 0.0) + float(fraction)
        return parsed


def build_material_attenuation(
    atomic_numbers: Union[ArrayLike, List[int]],
    fractions: ArrayLike,
    density: float,
) -> MaterialAttenuation:
    """Build the attenuation function of a material.

    Args:
        atomic_numbers: atomic number of each element in the material, in [1, 100].
        fractions: mass fractions of each element. Normalized to sum to 1.
        density (float): density of the material in g/cm^3.

    Returns:
        MaterialAttenuation: callable taking photon energy in keV and returning the linear attenuation in cm^-1.
    """
    return MaterialAttenuation(atomic_numbers, fractions, density)
