import logging
import pytest

from photon_attenuation import InvalidElementError, setup_log
from photon_attenuation.material import atomic_number, symbol
from photon_attenuation.material.elements import SYMBOLS


@pytest.mark.parametrize("name, z", [("H", 1), ("O", 8), ("Fe", 26), ("Pb", 82), ("U", 92), ("Fm", 100), (" Cu ", 29)])
def test_atomic_number(name, z):
    assert atomic_number(name) == z
    assert symbol(z) == name.strip()


def test_atomic_number_passes_numbers_through():
    assert atomic_number(26) == 26
    assert atomic_number(25.9999) == 26


def test_symbol_table_covers_reference_data():
    assert len(SYMBOLS) == 100
    assert len(set(SYMBOLS)) == 100


@pytest.mark.parametrize("element", ["Xx", "fe", "", 0, 101])
def test_unknown_element(element):
    with pytest.raises(InvalidElementError):
        atomic_number(element)


def test_symbol_rejects_invalid():
    with pytest.raises(InvalidElementError):
        symbol(0)


def test_setup_log_is_idempotent():
    log = setup_log(logging.DEBUG)
    n_handlers = len(log.handlers)
    assert setup_log(logging.DEBUG) is log
    assert len(log.handlers) == n_handlers
    assert log.level == logging.DEBUG
