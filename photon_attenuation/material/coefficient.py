from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class AbsorptionEdge:
    """
    A class to represent one absorption edge of an element.
    Attributes:
        z (int): Atomic number of the element.
        energy (float): Edge energy in keV.
        mac_below (float): Mass attenuation coefficient just below the edge in cm^2/g.
        mac_above (float): Mass attenuation coefficient just above the edge in cm^2/g.
    """

    z: int
    energy: float  # keV
    mac_below: float  # cm^2/g
    mac_above: float  # cm^2/g

    def __array__(self, dtype=None, copy=None):
        return np.array(
            [self.z, self.energy, self.mac_below, self.mac_above], dtype=dtype
        )
