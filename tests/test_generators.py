import math

import numpy as np
import pytest

from scatsig.generators import (
    OneOrderSignalGenerator,
    ThreeOrdersSignalGenerator,
    TwoOrdersSignalGenerator,
)
from scatsig.params import (
    LaserParticleParameters,
    Polarization,
    ScatteringMode,
    ScatteringOrderParameters,
)

LP = LaserParticleParameters(d=20.0, v=10.0, w0=10.0)
TIME = np.linspace(-5.0, 5.0, 1001)


def order(mode, theta=0.0, amp1=2.0, amp2=0.5):
    return ScatteringOrderParameters(mode, theta, amp1, amp2)


def test_peak_value_equals_amplitude_at_zero_angle():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0), LP)
    sample = gen.sample(np.array([0.0]), Polarization.ONE)
    assert sample.t0 == 0.0
    assert sample.signal[0] == pytest.approx(2.0)


def test_second_polarization_uses_second_amplitude():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0), LP)
    sample = gen.sample(np.array([0.0]), Polarization.TWO)
    assert sample.amplitude == 0.5
    assert sample.signal[0] == pytest.approx(0.5)


def test_signal_symmetric_about_peak():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0), LP)
    signal = gen.sample(TIME, Polarization.ONE).signal
    np.testing.assert_allclose(signal, signal[::-1])
    assert signal.max() <= 2.0


def test_peak_time_shifts_with_angle():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0, theta=math.pi / 2), LP)
    sample = gen.sample(TIME, Polarization.ONE)
    assert sample.t0 == pytest.approx(1.0)
    assert TIME[np.argmax(sample.signal)] == pytest.approx(sample.t0)


def test_sigma_taken_from_laser_params():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0), LP)
    assert gen.sample(TIME, Polarization.ONE).sigma == LP.sigma


def test_one_order_holder():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P21), LP)
    holder = gen.generate_signal(TIME, Polarization.ONE)
    assert holder.modes() == [ScatteringMode.P21]
    np.testing.assert_allclose(
        holder.result_signal(), gen.sample(TIME, Polarization.ONE).signal
    )


def test_set_params_changes_mode():
    gen = OneOrderSignalGenerator(order(ScatteringMode.P0), LP)
    gen.set_params(order(ScatteringMode.P1))
    assert gen.generate_signal(TIME, Polarization.ONE).modes() == [ScatteringMode.P1]


def test_two_orders_result_is_sum_of_parts():
    params = [order(ScatteringMode.P0), order(ScatteringMode.P21, theta=1.0, amp1=0.3)]
    gen = TwoOrdersSignalGenerator(params, LP)
    holder = gen.generate_signal(TIME, Polarization.ONE)
    assert holder.modes() == [ScatteringMode.P0, ScatteringMode.P21]
    expected = holder[ScatteringMode.P0] + holder[ScatteringMode.P21]
    np.testing.assert_allclose(holder.result_signal(), expected)


def test_wrong_number_of_orders_rejected():
    with pytest.raises(ValueError):
        TwoOrdersSignalGenerator([order(ScatteringMode.P0)], LP)
    gen = ThreeOrdersSignalGenerator(
        [order(ScatteringMode.P0), order(ScatteringMode.P21), order(ScatteringMode.P22)],
        LP,
    )
    with pytest.raises(ValueError):
        gen.set_params([order(ScatteringMode.P0), order(ScatteringMode.P1)])


def test_set_laser_params_reaches_every_order():
    params = [
        order(ScatteringMode.P0, theta=1.0),
        order(ScatteringMode.P21, theta=1.0),
        order(ScatteringMode.P22, theta=1.0),
    ]
    gen = ThreeOrdersSignalGenerator(params, LP)
    before = gen.generate_signal(TIME, Polarization.ONE).time_peaks()
    gen.set_laser_params(LaserParticleParameters(d=40.0, v=10.0, w0=10.0))
    after = gen.generate_signal(TIME, Polarization.ONE).time_peaks()
    assert all(a == pytest.approx(2 * b) for a, b in zip(after, before))


def test_set_params_on_three_orders():
    gen = ThreeOrdersSignalGenerator(
        [order(ScatteringMode.P0), order(ScatteringMode.P21), order(ScatteringMode.P22)],
        LP,
    )
    new = [order(ScatteringMode.P0), order(ScatteringMode.P1), order(ScatteringMode.P31)]
    gen.set_params(new)
    assert gen.params == tuple(new)
    assert len(gen.generate_signal(TIME, Polarization.ONE)) == 3


def test_repeated_mode_keeps_first_order():
    first = order(ScatteringMode.P0, amp1=2.0)
    second = order(ScatteringMode.P0, amp1=7.0)
    holder = TwoOrdersSignalGenerator([first, second], LP).generate_signal(
        TIME, Polarization.ONE
    )
    assert len(holder) == 1
    assert holder.amplitude(ScatteringMode.P0) == 2.0