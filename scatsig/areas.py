"""Area-specific generators that expect particular scattering orders."""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from .generators import ThreeOrdersSignalGenerator, TwoOrdersSignalGenerator
from .params import LaserParticleParameters, ScatteringMode, ScatteringOrderParameters


def missing_modes(
    params: Iterable[ScatteringOrderParameters],
    required: Iterable[ScatteringMode],
) -> list[ScatteringMode]:
    """Return the required modes that none of ``params`` provides."""
    present = {p.mode for p in params}
    return [mode for mode in required if mode not in present]


class _RequiredModes:
    """Warns on construction when an expected scattering order is absent."""

    required_modes: tuple[ScatteringMode, ...] = ()

    def __init__(
        self,
        params: Iterable[ScatteringOrderParameters],
        laser_params: LaserParticleParameters,
    ) -> None:
        params = tuple(params)
        super().__init__(params, laser_params)
        for mode in missing_modes(params, self.required_modes):
            warnings.warn(
                f"<{type(self).__name__}>: there is no {mode.name} mode, "
                "possibly result signal is wrong!",
                UserWarning,
                stacklevel=2,
            )


class A1SignalGenerator(_RequiredModes, ThreeOrdersSignalGenerator):
    """Area 1: orders P0, P1 and P31."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P1, ScatteringMode.P31)


class A3SignalGenerator(_RequiredModes, TwoOrdersSignalGenerator):
    """Area 3: orders P0 and P1."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P1)


class A5SignalGenerator(_RequiredModes, ThreeOrdersSignalGenerator):
    """Area 5: orders P0, P31 and P32."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P31, ScatteringMode.P32)


class A8SignalGenerator(_RequiredModes, ThreeOrdersSignalGenerator):
    """Area 8: orders P0, P21 and P31."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P21, ScatteringMode.P31)


class A11SignalGenerator(_RequiredModes, TwoOrdersSignalGenerator):
    """Area 11: orders P0 and P21."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P21)


class A13SignalGenerator(_RequiredModes, ThreeOrdersSignalGenerator):
    """Area 13: orders P0, P21 and P22."""

    required_modes = (ScatteringMode.P0, ScatteringMode.P21, ScatteringMode.P22)