import logging
import numpy as np
import pytest

from photon_attenuation import InvalidElementError
from photon_attenuation.material import REFERENCE_DATA, AbsorptionEdge, validate_atomic_number
from photon_attenuation.material.reference_data import EDGE_THRESHOLD_Z, MAC_TABLE


log = logging.getLogger(__name__)


def test_energy_grid():
    grid = REFERENCE_DATA.energy_grid
    assert grid.shape == (20,)
    assert grid[0] == 1.0
    assert grid[-1] == 300.0
    assert np.all(np.diff(grid) > 0)


def test_mac_rows_aligned_and_positive():
    for z in range(1, 101):
        row = REFERENCE_DATA.mac_row(z)
        assert row.shape == REFERENCE_DATA.energy_grid.shape
        assert np.all(row > 0)


def test_mac_row_values():
    # hydrogen and lead at 100 keV, from NIST XAAMDI
    assert REFERENCE_DATA.mac_row(1)[16] == pytest.approx(0.2944)
    assert REFERENCE_DATA.mac_row(82)[16] == pytest.approx(5.549)


def test_tables_are_read_only():
    with pytest.raises(ValueError):
        REFERENCE_DATA.energy_grid[0] = 2.0
    with pytest.raises(ValueError):
        REFERENCE_DATA.mac_row(26)[0] = 1.0


def test_store_does_not_alias_module_table():
    assert not np.shares_memory(REFERENCE_DATA.mac_row(1), MAC_TABLE)


def test_edges_only_above_threshold():
    for z in range(1, EDGE_THRESHOLD_Z + 1):
        assert REFERENCE_DATA.edges_for(z) == ()
    for z in range(EDGE_THRESHOLD_Z + 1, 56):
        assert len(REFERENCE_DATA.edges_for(z)) >= 1
    # the edge table stops at caesium
    assert REFERENCE_DATA.edges_for(82) == ()


def test_edges_sorted_and_upward():
    for z in range(1, 101):
        edges = REFERENCE_DATA.edges_for(z)
        energies = [e.energy for e in edges]
        assert energies == sorted(energies)
        for edge in edges:
            assert edge.z == z
            assert edge.mac_above > edge.mac_below


def test_iron_k_edge():
    (edge,) = REFERENCE_DATA.edges_for(26)
    assert edge == AbsorptionEdge(26, 7.112, 53.19, 407.6)
    np.testing.assert_allclose(np.array(edge), [26, 7.112, 53.19, 407.6])


def test_zinc_edges():
    energies = [e.energy for e in REFERENCE_DATA.edges_for(30)]
    np.testing.assert_allclose(energies, [1.0197, 1.0428, 1.1936, 9.6586])


@pytest.mark.parametrize(
    "z, expected",
    [(1, 1), (26, 26), (1.4, 1), (25.6, 26), (0.5, 1), (100.4, 100), (np.int64(8), 8), (np.float32(6.0), 6)],
)
def test_validate_atomic_number(z, expected):
    assert validate_atomic_number(z) == expected


@pytest.mark.parametrize("z", [0, 101, -3, 100.5, 0.49, np.nan, np.inf, "26", "Fe", None, True, [26]])
def test_validate_atomic_number_rejects(z):
    with pytest.raises(InvalidElementError):
        validate_atomic_number(z)


@pytest.mark.parametrize("z", [0, 101, "not a number"])
def test_lookups_reject_invalid_elements(z):
    with pytest.raises(InvalidElementError):
        REFERENCE_DATA.mac_row(z)
    with pytest.raises(InvalidElementError):
        REFERENCE_DATA.edges_for(z)
