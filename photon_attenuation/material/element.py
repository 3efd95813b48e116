"""Per-element interpolation of the reference mass attenuation tables.

Interpolation is done on log-log data. A monotone cubic (pchip) interpolant
is used away from absorption edges, and linear interpolation near them: a
cubic through a jump would overshoot, a straight line between the two sides
of the jump cannot. The switch is a continuous blend, so only the physical
jump at the edge remains.
"""

from typing import Tuple, Union

import logging
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.interpolate import PchipInterpolator, make_interp_spline

from ..exceptions import OutOfRangeEnergyWarning
from .coefficient import AbsorptionEdge
from .reference_data import (
    REFERENCE_DATA,
    EDGE_THRESHOLD_Z,
    ReferenceData,
    validate_atomic_number,
)


log = logging.getLogger(__name__)

# Range (keV) over which the reference tables are reliable.
VALID_ENERGY_RANGE_KEV = (1.0, 300.0)

# The two sides of an edge are placed this many ulps of the edge energy apart from it.
EDGE_OFFSET_ULPS = 4


def check_energy_range(
    energy_keV: ArrayLike,
    valid_range: Tuple[float, float] = VALID_ENERGY_RANGE_KEV,
    stacklevel: int = 3,
) -> None:
    """Warn if any energy is outside the range covered by the reference data.

    Args:
        energy_keV (ArrayLike): photon energies in keV.
        valid_range (Tuple[float, float], optional): inclusive [low, high] range in keV. Defaults to VALID_ENERGY_RANGE_KEV.
        stacklevel (int, optional): passed to ``warnings.warn`` so the warning points at the caller. Defaults to 3.

    Raises:
        ValueError: if any energy is not positive.
    """
    energy = np.asarray(energy_keV, dtype=np.float64)
    if np.any(energy <= 0):
        raise ValueError(f"photon energy must be positive, got {energy_keV!r}")

    low, high = valid_range
    if np.any(energy < low) or np.any(energy > high):
        warnings.warn(
            f"energy is outside of the recommended range from {low} keV to {high} keV, "
            "extrapolation likely to be inaccurate",
            OutOfRangeEnergyWarning,
            stacklevel=stacklevel,
        )


def as_output(values: NDArray[np.float64], energy_keV: ArrayLike) -> Union[float, NDArray[np.float64]]:
    """Return a float for scalar energies, an array otherwise."""
    if np.ndim(energy_keV) == 0:
        return float(values)
    return values


def merge_edge_nodes(
    energy: NDArray[np.float64],
    mac: NDArray[np.float64],
    edges: Tuple[AbsorptionEdge, ...],
) -> Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Merge the absorption edges of an element into its grid data, in log-log space.

    Each edge becomes two nodes, just below and just above the edge energy, holding the
    coefficients on either side of the jump. Nodes get a ``near_edge`` flag: 1 for edge
    nodes and their immediate neighbors, 0 otherwise.

    Args:
        energy (NDArray[np.float64]): grid energies in keV.
        mac (NDArray[np.float64]): mass attenuation coefficients on the grid, in cm^2/g.
        edges (Tuple[AbsorptionEdge, ...]): the absorption edges of the element.

    Returns:
        Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]: log energy, log mac, and
            near_edge flag of the merged nodes, sorted by energy.
    """
    edge_energy = np.array([e.energy for e in edges], dtype=np.float64)
    offset = EDGE_OFFSET_ULPS * np.spacing(edge_energy)
    edge_x = np.stack([edge_energy - offset, edge_energy + offset], axis=1).ravel()
    edge_y = np.array(
        [[e.mac_below, e.mac_above] for e in edges], dtype=np.float64
    ).ravel()

    x = np.log(np.concatenate([energy, edge_x]))
    y = np.log(np.concatenate([mac, edge_y]))
    flags = np.concatenate([np.zeros(energy.size), np.ones(edge_x.size)])

    order = np.argsort(x, kind="stable")
    x, y, flags = x[order], y[order], flags[order]
    assert np.all(np.diff(x) > 0), "edge nodes coincide with grid nodes"

    # neighbors of edges are marked too
    near_edge = np.convolve(flags, np.ones(3))[1:-1] > 0
    return x, y, near_edge.astype(np.float64)


class ElementInterpolator:
    """Mass attenuation coefficient of one element as a function of photon energy.

    Elements up to Z = 10 have no absorption edges in the reference data and use the cubic
    interpolant alone. Heavier elements blend the cubic interpolant with a linear one, with a
    weight that is 1 near absorption edges and fades to 0 one grid node away from them.

    Instances are immutable once built and can be evaluated from many threads at once.
    """

    def __init__(self, z, reference: ReferenceData = REFERENCE_DATA):
        """Build the interpolants for element z.

        Args:
            z: atomic number, in [1, 100]. Near-integer values are rounded.
            reference (ReferenceData, optional): the reference tables. Defaults to REFERENCE_DATA.

        Raises:
            InvalidElementError: if z is not a tabulated element.
        """
        self.z = validate_atomic_number(z)
        energy = reference.energy_grid
        mac = reference.mac_row(self.z)

        if self.z > EDGE_THRESHOLD_Z:
            self.edges = reference.edges_for(self.z)
        else:
            self.edges = ()

        if self.edges:
            x, y, near_edge = merge_edge_nodes(energy, mac, self.edges)
        else:
            x, y, near_edge = np.log(energy), np.log(mac), np.zeros(energy.size)

        for a in (x, y, near_edge):
            a.setflags(write=False)
        self.nodes = (x, y, near_edge)

        self._cubic = PchipInterpolator(x, y, extrapolate=True)
        self._linear = make_interp_spline(x, y, k=1)
        self._weight = make_interp_spline(x, near_edge, k=1)

        log.debug(f"built interpolator for Z={self.z} with {len(self.edges)} absorption edges")

    def __repr__(self):
        return f"ElementInterpolator(z={self.z}, edges={len(self.edges)})"

    @property
    def has_edges(self) -> bool:
        return len(self.edges) > 0

    def cubic(self, log_energy: ArrayLike) -> NDArray[np.float64]:
        """Monotone cubic interpolant of log mac over log energy."""
        return self._cubic(log_energy)

    def linear(self, log_energy: ArrayLike) -> NDArray[np.float64]:
        """Piecewise linear interpolant of log mac over log energy."""
        return self._linear(log_energy)

    def edge_weight(self, log_energy: ArrayLike) -> NDArray[np.float64]:
        """Weight of the linear interpolant, in [0, 1]. Zero everywhere for elements without edges."""
        return np.clip(self._weight(log_energy), 0.0, 1.0)

    @staticmethod
    def blend(
        cubic: ArrayLike, linear: ArrayLike, weight: ArrayLike
    ) -> NDArray[np.float64]:
        return np.multiply(cubic, 1 - np.asarray(weight)) + np.multiply(linear, weight)

    def log_evaluate(self, log_energy: ArrayLike) -> NDArray[np.float64]:
        """Log of the mass attenuation coefficient at the given log energies (no range check)."""
        cubic = self.cubic(log_energy)
        if not self.has_edges:
            return cubic
        return self.blend(cubic, self.linear(log_energy), self.edge_weight(log_energy))

    def evaluate(self, energy_keV: ArrayLike) -> Union[float, NDArray[np.float64]]:
        """Interpolated mass attenuation coefficient.

        Energies outside VALID_ENERGY_RANGE_KEV issue an OutOfRangeEnergyWarning and are extrapolated.

        Args:
            energy_keV (ArrayLike): photon energy in keV, scalar or array.

        Returns:
            Union[float, NDArray[np.float64]]: mass attenuation coefficient in cm^2/g, same shape as the input.
        """
        check_energy_range(energy_keV)
        log_energy = np.log(np.asarray(energy_keV, dtype=np.float64))
        return as_output(np.exp(self.log_evaluate(log_energy)), energy_keV)

    __call__ = evaluate


def mass_attenuation(z, energy_keV: ArrayLike) -> Union[float, NDArray[np.float64]]:
    """One-off lookup of the mass attenuation coefficient (cm^2/g) of element z.

    Builds a fresh ElementInterpolator, so prefer keeping one around for repeated lookups.

    Example:
        mu_rho = mass_attenuation(26, 7.2)  # iron, just above its K edge
    """
    return ElementInterpolator(z).evaluate(energy_keV)
