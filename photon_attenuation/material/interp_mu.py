from typing import Union

import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.interpolate import PchipInterpolator

from ..exceptions import OutOfRangeEnergyWarning


class PchipTable:
    """Monotone cubic interpolation over one tabulated attenuation curve.

    Meant for curves without absorption edges, e.g. mu-vs-energy tables of a single material.
    """

    def __init__(self, energies: ArrayLike, mus: ArrayLike):
        """
        Args:
            energies (ArrayLike): strictly increasing energies of the table.
            mus (ArrayLike): attenuation values at those energies.

        Raises:
            ValueError: if the table is not one-dimensional or the lengths differ.
        """
        self.energies = np.array(energies, dtype=np.float64)
        self.mus = np.array(mus, dtype=np.float64)
        if self.energies.ndim != 1 or self.energies.shape != self.mus.shape:
            raise ValueError(
                f"energies and mus must be 1D arrays of the same length, got shapes {self.energies.shape} and {self.mus.shape}"
            )
        self._interpolant = PchipInterpolator(self.energies, self.mus, extrapolate=True)

    def __call__(self, energy: ArrayLike) -> Union[float, NDArray[np.float64]]:
        energy_arr = np.asarray(energy, dtype=np.float64)
        if np.any(energy_arr < self.energies[0]) or np.any(energy_arr > self.energies[-1]):
            warnings.warn(
                "Energy out of data range for material, extrapolation likely to be inaccurate",
                OutOfRangeEnergyWarning,
                stacklevel=2,
            )
        mu = self._interpolant(energy_arr)
        if np.ndim(energy) == 0:
            return float(mu)
        return mu


def interp_mu(
    energies: ArrayLike,
    mus: ArrayLike,
    energy: ArrayLike,
) -> Union[float, NDArray[np.float64]]:
    """
    Performs monotone cubic (pchip) interpolation of mus at the given energies.
    The interpolation does not overshoot between data points, so monotone data stays monotone.
    Energies outside the table issue an OutOfRangeEnergyWarning and are extrapolated.
    Args:
        energies: The energies of the known data points (must be a strictly increasing 1D array).
        mus: The attenuation values of the known data points (must be a 1D array).
        energy: The energies at which to interpolate (can be a single value or an array).
    Returns:
        The interpolated values at the specified energies (same type as energy).
    """
    return PchipTable(energies, mus)(energy)
