import warnings
import numpy as np
import pytest

from photon_attenuation import OutOfRangeEnergyWarning, interp_mu
from photon_attenuation.material import PchipTable


# water, NIST XAAMDI (keV, cm^-1)
ENERGIES = np.array([10.0, 15.0, 20.0, 30.0, 40.0, 50.0, 60.0, 80.0, 100.0])
MUS = np.array([5.329, 1.673, 0.8096, 0.3756, 0.2683, 0.2269, 0.2059, 0.1837, 0.1707])


def test_passes_through_table():
    np.testing.assert_allclose(interp_mu(ENERGIES, MUS, ENERGIES), MUS, rtol=1e-12)


def test_monotone_between_points():
    energies = np.linspace(10.0, 100.0, 500)
    mus = interp_mu(ENERGIES, MUS, energies)
    assert np.all(np.diff(mus) <= 0)
    assert mus.max() <= MUS.max() * (1 + 1e-12)
    assert mus.min() >= MUS.min() * (1 - 1e-12)


def test_scalar_returns_float():
    mu = interp_mu(ENERGIES, MUS, 25.0)
    assert isinstance(mu, float)
    assert 0.3756 < mu < 0.8096


def test_warns_outside_table():
    with pytest.warns(OutOfRangeEnergyWarning):
        mu = interp_mu(ENERGIES, MUS, 120.0)
    assert np.isfinite(mu)
    with pytest.warns(OutOfRangeEnergyWarning):
        interp_mu(ENERGIES, MUS, np.array([5.0, 50.0]))


def test_no_warning_inside_table():
    with warnings.catch_warnings():
        warnings.simplefilter("error", OutOfRangeEnergyWarning)
        interp_mu(ENERGIES, MUS, [10.0, 55.0, 100.0])


def test_table_reuse():
    table = PchipTable(ENERGIES, MUS)
    assert table(60.0) == pytest.approx(0.2059)
    assert table(45.0) == pytest.approx(interp_mu(ENERGIES, MUS, 45.0))


def test_table_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        PchipTable(ENERGIES, MUS[:-1])
    with pytest.raises(ValueError):
        interp_mu(ENERGIES[None], MUS[None], 50.0)
