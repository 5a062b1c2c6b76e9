"""
Terminal colours as SGR escape sequences.

We only use the 8 basic colours, which every vt100-ish terminal (and
xterm.js, and the Windows 10 console) understands.
"""

import enum


class Colour(enum.Enum):
    """A basic terminal colour. The value is the SGR foreground code."""

    DEFAULT = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @property
    def fg_code(self):
        return self.value

    @property
    def bg_code(self):
        return self.value + 10

    @classmethod
    def parse(cls, value):
        """Get a Colour from a Colour or a (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            names = ", ".join(c.name.lower() for c in cls)
            raise ValueError(f"Invalid colour {value!r}, expected one of {names}.")


def paint(text, fg=None, bg=None):
    """Wrap text in the escape codes for the given colours.

    If no colours are given, the text is returned as-is.
    """
    codes = []
    if fg is not None:
        codes.append(str(Colour.parse(fg).fg_code))
    if bg is not None:
        codes.append(str(Colour.parse(bg).bg_code))
    if not codes:
        return text
    return "\x1b[" + ";".join(codes) + "m" + text + "\x1b[0m"
