import warnings

import numpy as np
import pytest

from scatsig.areas import (
    A1SignalGenerator,
    A3SignalGenerator,
    A5SignalGenerator,
    A8SignalGenerator,
    A11SignalGenerator,
    A13SignalGenerator,
    missing_modes,
)
from scatsig.params import (
    LaserParticleParameters,
    Polarization,
    ScatteringMode,
    ScatteringOrderParameters,
)

LP = LaserParticleParameters(d=20.0, v=10.0, w0=10.0)
M = ScatteringMode


def orders(*modes):
    return [ScatteringOrderParameters(m, 0.5, 1.0, 0.5) for m in modes]


AREAS = [
    (A1SignalGenerator, (M.P0, M.P1, M.P31)),
    (A3SignalGenerator, (M.P0, M.P1)),
    (A5SignalGenerator, (M.P0, M.P31, M.P32)),
    (A8SignalGenerator, (M.P0, M.P21, M.P31)),
    (A11SignalGenerator, (M.P0, M.P21)),
    (A13SignalGenerator, (M.P0, M.P21, M.P22)),
]


def test_missing_modes_preserves_required_order():
    assert missing_modes(orders(M.P21), [M.P0, M.P21, M.P22]) == [M.P0, M.P22]


def test_missing_modes_empty_when_all_present():
    assert missing_modes(orders(M.P0, M.P1), [M.P1, M.P0]) == []


@pytest.mark.parametrize("cls, modes", AREAS)
def test_complete_area_does_not_warn(cls, modes):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        gen = cls(orders(*modes), LP)
    holder = gen.generate_signal(np.linspace(-3, 3, 50), Polarization.ONE)
    assert holder.modes() == list(modes)


@pytest.mark.parametrize("cls, modes", AREAS)
def test_missing_mode_warns(cls, modes):
    wrong = (M.P32,) * len(modes) if M.P32 not in modes else (M.P1,) * len(modes)
    with pytest.warns(UserWarning, match=cls.__name__) as record:
        cls(orders(*wrong), LP)
    assert len(record) == len(modes)


def test_warning_names_missing_mode():
    with pytest.warns(UserWarning, match="P22"):
        A13SignalGenerator(orders(M.P0, M.P21, M.P21), LP)


def test_area_rejects_wrong_order_count():
    with pytest.raises(ValueError):
        A11SignalGenerator(orders(M.P0, M.P21, M.P22), LP)