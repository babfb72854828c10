"""Laser, particle and scattering-order parameters, plus default settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ScatteringMode(Enum):
    """Scattering order of light on an opaque particle."""

    P0 = auto()
    P1 = auto()
    P21 = auto()
    P22 = auto()
    P31 = auto()
    P32 = auto()


class Polarization(Enum):
    """Polarization channel of the incident light."""

    ONE = auto()
    TWO = auto()


@dataclass(frozen=True)
class LaserParticleParameters:
    """Particle diameter and velocity, laser beam waist and pulse width.

    When ``sigma`` is not given it is derived as ``w0 / v``.
    """

    d: float
    v: float
    w0: float
    sigma: float | None = None

    def __post_init__(self) -> None:
        if self.sigma is None:
            object.__setattr__(self, "sigma", self.w0 / self.v)


@dataclass(frozen=True)
class ScatteringOrderParameters:
    """Parameters of a single scattering order at one scattering angle."""

    mode: ScatteringMode
    theta: float
    amp_p1: float
    amp_p2: float

    def amplitude(self, pol: Polarization) -> float:
        """Return the amplitude for the given polarization."""
        if pol is Polarization.ONE:
            return self.amp_p1
        return self.amp_p2


PARAMETERS_P0_PATH = "(amp)(p=0)(m=1.343).dat"
PARAMETERS_P21_P22_PATH = "(amp)(p=2.1 p=2.2)(m=1.343).dat"

THETA_SCATTERING = 165.0
T_START = -5.0
T_END = 10.0

POLARIZATION = Polarization.ONE