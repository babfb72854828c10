"""A console whose text and background colours are tracked and set.

The console keeps the current packed colour code (text in the low four bits,
background in the next four) and writes an ANSI escape sequence to its stream
whenever the code changes. When the current colour is unknown, reads report
:data:`~scatsig.color_codes.BAD_COLOR`, as a console that cannot be queried does.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .color_codes import BAD_COLOR, DEFAULT_COLOR, is_good, stoc

# Console colour numbers use bit 1 for blue and bit 4 for red; ANSI swaps them.
_ANSI_BASE = (0, 4, 2, 6, 1, 5, 3, 7)


def _ansi_sequence(code: int) -> str:
    text, background = code % 16, code // 16
    fg = (90 if text & 8 else 30) + _ANSI_BASE[text & 7]
    bg = (100 if background & 8 else 40) + _ANSI_BASE[background & 7]
    return f"\x1b[{fg};{bg}m"


class Console:
    """Colour state of an output stream.

    ``attribute`` is the colour code the console starts with; pass ``None``
    when it is not known.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        attribute: int | None = DEFAULT_COLOR,
    ) -> None:
        self._stream = stream
        self._attribute = attribute if attribute is not None and is_good(attribute) else None

    @property
    def stream(self) -> TextIO:
        """The stream colour changes are written to."""
        return self._stream if self._stream is not None else sys.stdout

    def get(self) -> int:
        """Current packed colour code, or ``BAD_COLOR`` if unknown."""
        return BAD_COLOR if self._attribute is None else self._attribute

    def get_text(self) -> int:
        """Current text colour number, or ``BAD_COLOR`` if unknown."""
        code = self.get()
        return code % 16 if code != BAD_COLOR else BAD_COLOR

    def get_background(self) -> int:
        """Current background colour number, or ``BAD_COLOR`` if unknown."""
        code = self.get()
        return code // 16 if code != BAD_COLOR else BAD_COLOR

    def set(self, text: int | str, background: int | str | None = None) -> None:
        """Set the colours.

        Takes a packed code, a text and background colour number, or a text
        and background colour name. An invalid result is silently ignored.
        """
        if background is None:
            if not isinstance(text, int):
                raise TypeError("a single colour must be a packed integer code")
            code = text
        elif isinstance(text, str) and isinstance(background, str):
            code = stoc(text) + stoc(background) * 16
        elif isinstance(text, int) and isinstance(background, int):
            code = text + background * 16
        else:
            raise TypeError("text and background must both be names or both numbers")
        if is_good(code):
            self._attribute = code
            self.stream.write(_ansi_sequence(code))

    def set_text(self, name: str) -> None:
        """Set the text colour by name, keeping the background."""
        self.set(stoc(name), self.get_background())

    def set_background(self, name: str) -> None:
        """Set the background colour by name, keeping the text colour."""
        self.set(self.get_text(), stoc(name))

    def reset(self) -> None:
        """Restore the default colours."""
        self.set(DEFAULT_COLOR)

    def __enter__(self) -> Console:
        self._saved = self._attribute
        return self

    def __exit__(self, *exc_info: object) -> None:
        saved = self._saved
        if saved is None:
            self.reset()
        else:
            self.set(saved)