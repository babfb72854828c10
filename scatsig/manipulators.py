"""Console manipulators: callables that change a console's colours.

A manipulator takes a :class:`~scatsig.console.Console`, changes its colour
state and returns the same console, so several can be chained.
"""

from __future__ import annotations

from collections.abc import Callable

from .color_codes import BAD_COLOR, NAMES, stoc
from .console import Console

Manipulator = Callable[[Console], Console]

_FULL_NAMES = frozenset(name.replace(" ", "_") for name in NAMES.values())


def _checked(name: str) -> str:
    if stoc(name) == BAD_COLOR:
        raise ValueError(f"unknown colour name: {name!r}")
    return name


def text_manipulator(name: str) -> Manipulator:
    """Return a manipulator that sets the text colour, keeping the background."""
    name = _checked(name)

    def apply(console: Console) -> Console:
        console.set_text(name)
        return console

    apply.__name__ = name.replace(" ", "_")
    return apply


def background_manipulator(name: str) -> Manipulator:
    """Return a manipulator that sets the background, keeping the text colour."""
    name = _checked(name)

    def apply(console: Console) -> Console:
        console.set_background(name)
        return console

    apply.__name__ = "on_" + name.replace(" ", "_")
    return apply


def pair_manipulator(text: str, background: str) -> Manipulator:
    """Return a manipulator that sets both text and background colours."""
    text = _checked(text)
    background = _checked(background)

    def apply(console: Console) -> Console:
        console.set(text, background)
        return console

    apply.__name__ = f"{text}_on_{background}".replace(" ", "_")
    return apply


def _reset(console: Console) -> Console:
    console.reset()
    return console


def manipulator(name: str) -> Manipulator:
    """Look up a manipulator by name.

    Accepted names are ``reset``, a colour (``light_blue``), a background
    (``on_light_blue``) or a pair (``red_on_light_blue``), using full colour
    names with underscores.
    """
    if name == "reset":
        return _reset
    if name.startswith("on_"):
        background = name[len("on_"):]
        if background in _FULL_NAMES:
            return background_manipulator(background)
    elif "_on_" in name:
        text, _, background = name.partition("_on_")
        if text in _FULL_NAMES and background in _FULL_NAMES:
            return pair_manipulator(text, background)
    elif name in _FULL_NAMES:
        return text_manipulator(name)
    raise ValueError(f"unknown manipulator: {name!r}")