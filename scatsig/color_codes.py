"""Console colour codes: names, validation, conversion and inversion.

A colour code packs a text colour (low four bits) and a background colour
(next four bits) into one integer in ``range(256)``. Anything outside that
range is reported as :data:`BAD_COLOR`.
"""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_COLOR = 7
BAD_COLOR = -256

_NAMED = (
    ("black", "k"),
    ("blue", "b"),
    ("green", "g"),
    ("aqua", "a"),
    ("red", "r"),
    ("purple", "p"),
    ("yellow", "y"),
    ("white", "w"),
    ("grey", "e"),
    ("light blue", "lb"),
    ("light green", "lg"),
    ("light aqua", "la"),
    ("light red", "lr"),
    ("light purple", "lp"),
    ("light yellow", "ly"),
    ("bright white", "bw"),
)

CODES = MappingProxyType(
    {
        name: value
        for value, names in enumerate(_NAMED)
        for name in names
    }
)
"""Colour number for every full name and short alias."""

NAMES = MappingProxyType({value: full for value, (full, _) in enumerate(_NAMED)})
"""Full name of every colour number from 0 to 15."""

_NORMALIZE = str.maketrans({"_": " ", "-": " "})


def is_good(code: int) -> bool:
    """Return whether ``code`` is a valid packed colour code."""
    return 0 <= code < 256


def itoc(text: int, background: int | None = None) -> int:
    """Pack a text and optional background colour number into a code.

    With no background, ``text`` is taken as an already packed code.
    Returns :data:`BAD_COLOR` if the result is out of range.
    """
    code = text if background is None else text + background * 16
    return code if is_good(code) else BAD_COLOR


def _lookup(name: str) -> int:
    ascii_lower = "".join(
        chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in name
    )
    return CODES.get(ascii_lower.translate(_NORMALIZE), BAD_COLOR)


def stoc(text: str, background: str | None = None) -> int:
    """Convert a colour name, and optionally a background name, to a code.

    Names are case-insensitive and may use ``_`` or ``-`` instead of spaces.
    Unknown names give :data:`BAD_COLOR`.
    """
    if background is None:
        return _lookup(text)
    return itoc(_lookup(text), _lookup(background))


def ctos(code: int) -> str:
    """Describe a packed code as its text and background colour names."""
    if not is_good(code):
        return "BAD COLOR"
    return f"(text) {NAMES[code % 16]} + (background) {NAMES[code // 16]}"


def invert(code: int) -> int:
    """Swap the text and background colours of a packed code."""
    if not is_good(code):
        return BAD_COLOR
    return code // 16 + (code % 16) * 16