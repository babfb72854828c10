"""Simulated laser light-scattering signals of opaque particles, plus console colour helpers."""

__version__ = "0.1.0"
__all__ = ["params", "signals", "generators", "areas", "color_codes", "console", "manipulators"]