import logging
import warnings
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from photon_attenuation import (
    AttenuationError,
    DegenerateCompositionError,
    ElementInterpolator,
    InvalidElementError,
    InvalidMaterialError,
    MaterialAttenuation,
    OutOfRangeEnergyWarning,
    build_material_attenuation,
)


log = logging.getLogger(__name__)

ENERGIES = [1.0, 5.0, 7.2, 10.0, 33.2, 60.0, 88.0, 150.0, 300.0]

WATER = ([1, 8], [0.111898, 0.888102])


@pytest.mark.parametrize(
    "energy, expected, rel",
    [(10.0, 0.3854, 0.11), (30.0, 0.3570, 0.06), (60.0, 0.3260, 0.06), (100.0, 0.2944, 0.06)],
)
def test_hydrogen_matches_nist(energy, expected, rel):
    hydrogen = build_material_attenuation([1], [1.0], density=1.0)
    assert hydrogen(energy) == pytest.approx(expected, rel=rel)


@pytest.mark.parametrize("energy, expected", [(25.0, 0.3628), (45.0, 0.3406)])
def test_hydrogen_between_grid_energies(energy, expected):
    # NIST XCOM total attenuation with coherent scattering, off the tabulated grid
    hydrogen = build_material_attenuation([1], [1.0], density=1.0)
    assert hydrogen(energy) == pytest.approx(expected, rel=0.03)


def test_water_matches_nist():
    # NIST XAAMDI values for liquid water
    water = build_material_attenuation(*WATER, density=1.0)
    assert water(10.0) == pytest.approx(5.329, rel=0.02)
    assert water(60.0) == pytest.approx(0.2059, rel=0.02)
    assert water(100.0) == pytest.approx(0.1707, rel=0.02)


def test_linear_in_density():
    density = 1.3
    light = build_material_attenuation([26, 6], [0.98, 0.02], density)
    heavy = build_material_attenuation([26, 6], [0.98, 0.02], density * 2)
    for energy in ENERGIES:
        assert heavy(energy) == 2 * light(energy)


def test_mass_attenuation_excludes_density():
    bone = build_material_attenuation([1, 6, 8, 20], [0.064, 0.278, 0.41, 0.248], 1.92)
    for energy in ENERGIES:
        assert bone(energy) == pytest.approx(bone.evaluate_mass_attenuation(energy) * 1.92)


@pytest.mark.parametrize("f", [0.0, 0.2, 0.5, 0.9, 1.0])
def test_linear_in_composition(f):
    a, b = ElementInterpolator(29), ElementInterpolator(50)
    mixture = build_material_attenuation([29, 50], [f, 1 - f], density=1.0)
    for energy in ENERGIES:
        expected = f * a(energy) + (1 - f) * b(energy)
        assert mixture(energy) == pytest.approx(expected, rel=1e-12)


def test_repeated_element_is_summed():
    repeated = build_material_attenuation([1, 8, 1], [0.05, 0.888102, 0.061898], 1.0)
    single = build_material_attenuation(*WATER, density=1.0)
    assert repeated.atomic_numbers == (1, 8)
    assert len(repeated.elements) == 2
    assert repeated.composition[1] == pytest.approx(0.111898)
    for energy in ENERGIES:
        assert repeated(energy) == pytest.approx(single(energy), rel=1e-12)


def test_fractions_are_normalized():
    material = build_material_attenuation([1, 8], [2, 6], 1.0)
    np.testing.assert_allclose(material.fractions, [0.25, 0.75])
    assert sum(material.composition.values()) == pytest.approx(1.0)


def test_fractions_are_read_only():
    material = build_material_attenuation(*WATER, density=1.0)
    with pytest.raises(ValueError):
        material.fractions[0] = 0.5


def test_scalar_element():
    assert build_material_attenuation(26, 1, 7.874)(50.0) == pytest.approx(
        build_material_attenuation([26], [1], 7.874)(50.0)
    )


def test_array_energies():
    water = build_material_attenuation(*WATER, density=1.0)
    energies = np.array(ENERGIES)
    values = water(energies)
    assert values.shape == energies.shape
    np.testing.assert_allclose(values, [water(e) for e in ENERGIES], rtol=1e-14)


@pytest.mark.parametrize("z", [[0], [101], ["not a number"], [8, 0], [np.nan]])
def test_invalid_element(z):
    with pytest.raises(InvalidElementError):
        build_material_attenuation(z, [1.0] * len(z), 1.0)


def test_degenerate_composition():
    with pytest.raises(DegenerateCompositionError):
        build_material_attenuation([1, 8], [0, 0], 1.0)


@pytest.mark.parametrize(
    "z, fractions, density",
    [
        ([1, 8], [0.1, 0.9], 0.0),
        ([1, 8], [0.1, 0.9], -1.0),
        ([1, 8], [0.1, 0.9], np.nan),
        ([1, 8], [0.1, 0.9], "dense"),
        ([], [], 1.0),
        ([1, 8], [1.0], 1.0),
        ([1, 8], [0.5, -0.5], 1.0),
        ([1, 8], [0.5, np.inf], 1.0),
        ([1, 8], ["a", "b"], 1.0),
    ],
)
def test_invalid_material(z, fractions, density):
    with pytest.raises(InvalidMaterialError):
        build_material_attenuation(z, fractions, density)


def test_errors_share_a_base():
    for error in (InvalidElementError, DegenerateCompositionError, InvalidMaterialError):
        assert issubclass(error, AttenuationError)
        assert issubclass(error, ValueError)


def test_out_of_range_warns():
    water = build_material_attenuation(*WATER, density=1.0)
    with pytest.warns(OutOfRangeEnergyWarning):
        value = water(300.0001)
    assert np.isfinite(value) and value > 0
    with pytest.warns(OutOfRangeEnergyWarning):
        water.evaluate_mass_attenuation(np.array([0.5, 10.0]))


def test_out_of_range_can_be_escalated():
    water = build_material_attenuation(*WATER, density=1.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error", OutOfRangeEnergyWarning)
        with pytest.raises(OutOfRangeEnergyWarning):
            water(500.0)
        water(100.0)


def test_from_composition():
    by_symbol = MaterialAttenuation.from_composition({"H": 0.111898, "O": 0.888102}, density=1.0)
    by_number = MaterialAttenuation.from_composition({1: 0.111898, 8: 0.888102}, density=1.0)
    water = build_material_attenuation(*WATER, density=1.0)
    for energy in ENERGIES:
        assert by_symbol(energy) == pytest.approx(water(energy))
        assert by_number(energy) == pytest.approx(water(energy))


def test_from_string():
    water = MaterialAttenuation.from_string("H0.111898O0.888102", density=1.0)
    assert water.atomic_numbers == (1, 8)
    np.testing.assert_allclose(water.fractions, [0.111898, 0.888102])

    air = MaterialAttenuation.from_string("C0.000124 N0.755268 O0.231781 Ar0.012827", density=0.001205)
    assert air.atomic_numbers == (6, 7, 8, 18)

    brass = MaterialAttenuation.from_string("Cu60Zn40", density=8.5)
    assert brass.atomic_numbers == (29, 30)
    np.testing.assert_allclose(brass.fractions, [0.6, 0.4])

    repeated = MaterialAttenuation.from_string("H0.05O0.888102H0.061898", density=1.0)
    assert repeated.composition[1] == pytest.approx(0.111898)


@pytest.mark.parametrize("name", ["", "water", "H0.1x", "h0.5O0.5", "H0.5O"])
def test_from_string_invalid(name):
    with pytest.raises(InvalidMaterialError):
        MaterialAttenuation.from_string(name, density=1.0)


def test_from_string_unknown_element():
    with pytest.raises(InvalidElementError):
        MaterialAttenuation.from_string("Xx0.5O0.5", density=1.0)


def test_repr():
    water = build_material_attenuation(*WATER, density=1.0)
    assert "H: 0.111898" in repr(water)
    assert "O: 0.888102" in repr(water)
    assert "density=1.0" in repr(water)


def test_concurrent_evaluation():
    tissue = build_material_attenuation([1, 6, 7, 8, 11, 15, 16, 17, 19], [0.102, 0.143, 0.034, 0.708, 0.002, 0.003, 0.003, 0.002, 0.003], 1.06)
    energies = np.geomspace(1.0, 300.0, 64)
    expected = [tissue(e) for e in energies]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(tissue, np.tile(energies, 8)))
    np.testing.assert_array_equal(results, np.tile(expected, 8))
