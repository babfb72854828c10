"""Containers for generated per-order signals."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from .params import ScatteringMode


@dataclass(eq=False)
class SignalSample:
    """One scattering order's signal with its peak time, width and amplitude."""

    signal: np.ndarray
    t0: float
    sigma: float
    amplitude: float


class SignalHolder:
    """Signals of several scattering orders, keyed by mode."""

    def __init__(self, signals: Mapping[ScatteringMode, SignalSample]) -> None:
        self._signals = dict(signals)

    def __getitem__(self, mode: ScatteringMode) -> np.ndarray:
        return self._signals[mode].signal

    def __len__(self) -> int:
        return len(self._signals)

    def time_peak(self, mode: ScatteringMode) -> float:
        """Peak time of the given order."""
        return self._signals[mode].t0

    def time_peaks(self) -> list[float]:
        """Peak times of all orders."""
        return [s.t0 for s in self._signals.values()]

    def amplitude(self, mode: ScatteringMode) -> float:
        """Amplitude of the given order."""
        return self._signals[mode].amplitude

    def amplitudes(self) -> list[float]:
        """Amplitudes of all orders."""
        return [s.amplitude for s in self._signals.values()]

    def sigma_width(self, mode: ScatteringMode) -> float:
        """Gaussian width of the given order."""
        return self._signals[mode].sigma

    def modes(self) -> list[ScatteringMode]:
        """Modes held, in insertion order."""
        return list(self._signals)

    def result_signal(self) -> np.ndarray:
        """Sum of all held signals."""
        if not self._signals:
            raise ValueError("no signals to sum")
        first, *rest = (s.signal for s in self._signals.values())
        return sum(rest, start=np.array(first, dtype=float, copy=True))