"""Gaussian signal generators for one or several scattering orders."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from .params import LaserParticleParameters, Polarization, ScatteringOrderParameters
from .signals import SignalHolder, SignalSample


class OneOrderSignalGenerator:
    """Generates the Gaussian pulse of a single scattering order."""

    def __init__(
        self,
        params: ScatteringOrderParameters,
        laser_params: LaserParticleParameters,
    ) -> None:
        self.params = params
        self.laser_params = laser_params

    def set_params(self, params: ScatteringOrderParameters) -> None:
        """Replace the scattering-order parameters."""
        self.params = params

    def set_laser_params(self, params: LaserParticleParameters) -> None:
        """Replace the laser and particle parameters."""
        self.laser_params = params

    def sample(self, time, pol: Polarization) -> SignalSample:
        """Compute the pulse over ``time`` together with its peak, width and amplitude."""
        lp = self.laser_params
        t0 = lp.d / (2.0 * lp.v) * math.sin(self.params.theta)
        sigma = lp.sigma
        amplitude = self.params.amplitude(pol)
        dt = np.asarray(time, dtype=float) - t0
        signal = amplitude * np.exp(-2.0 * dt * dt / (sigma * sigma))
        return SignalSample(signal, t0, sigma, amplitude)

    def generate_signal(self, time, pol: Polarization) -> SignalHolder:
        """Return a holder with this order's signal."""
        return SignalHolder({self.params.mode: self.sample(time, pol)})


class TwoOrdersSignalGenerator:
    """Generates signals of two scattering orders sharing laser parameters."""

    orders = 2

    def __init__(
        self,
        params: Iterable[ScatteringOrderParameters],
        laser_params: LaserParticleParameters,
    ) -> None:
        self.laser_params = laser_params
        self._generators = [
            OneOrderSignalGenerator(p, laser_params) for p in self._checked(params)
        ]

    @property
    def params(self) -> tuple[ScatteringOrderParameters, ...]:
        """Parameters of every order, in order."""
        return tuple(g.params for g in self._generators)

    def _checked(
        self, params: Iterable[ScatteringOrderParameters]
    ) -> tuple[ScatteringOrderParameters, ...]:
        params = tuple(params)
        if len(params) != self.orders:
            raise ValueError(
                f"expected {self.orders} scattering orders, got {len(params)}"
            )
        return params

    def set_params(self, params: Iterable[ScatteringOrderParameters]) -> None:
        """Replace the parameters of every order."""
        for generator, order_params in zip(self._generators, self._checked(params)):
            generator.set_params(order_params)

    def set_laser_params(self, params: LaserParticleParameters) -> None:
        """Replace the laser and particle parameters of every order."""
        self.laser_params = params
        for generator in self._generators:
            generator.set_laser_params(params)

    def generate_signal(self, time, pol: Polarization) -> SignalHolder:
        """Return a holder with every order's signal; a repeated mode keeps the first."""
        samples = {}
        for generator in self._generators:
            sample = generator.sample(time, pol)
            samples.setdefault(generator.params.mode, sample)
        return SignalHolder(samples)


class ThreeOrdersSignalGenerator(TwoOrdersSignalGenerator):
    """Generates signals of three scattering orders sharing laser parameters."""

    orders = 3

    def set_params(self, params: Iterable[ScatteringOrderParameters]) -> None:
        """Replace the parameters of all three orders."""
        super().set_params(params)

    def set_laser_params(self, params: LaserParticleParameters) -> None:
        """Replace the laser and particle parameters of all three orders."""
        super().set_laser_params(params)

    def generate_signal(self, time, pol: Polarization) -> SignalHolder:
        """Return a holder with the signals of all three orders."""
        return super().generate_signal(time, pol)