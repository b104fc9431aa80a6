"""32-bit ARGB color integers.

Colors are plain Python ints laid out as ``0xAARRGGBB``. Bitmaps store
pixels as RGBA bytes, so these helpers convert between the two.
"""
from __future__ import annotations

from typing import Tuple


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 0..255 channel values into an ARGB color int."""
    for name, v in (("alpha", a), ("red", r), ("green", g), ("blue", b)):
        if not 0 <= v <= 255:
            raise ValueError(f"{name} must be in 0..255, got {v}")
    return (a << 24) | (r << 16) | (g << 8) | b


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def to_rgba(color: int) -> Tuple[int, int, int, int]:
    """Unpack an ARGB color int into an ``(r, g, b, a)`` tuple."""
    color &= 0xFFFFFFFF
    return red(color), green(color), blue(color), alpha(color)


def from_rgba(r: int, g: int, b: int, a: int = 255) -> int:
    return argb(int(a), int(r), int(g), int(b))


def parse_color(text: str) -> int:
    """Parse ``#RRGGBB`` or ``#AARRGGBB`` (leading ``#`` optional).

    Parameters
    ----------
    text : str
        Hex color string. Six digits are treated as fully opaque.

    Returns
    -------
    int
        The ARGB color int.
    """
    s = text.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) not in (6, 8):
        raise ValueError(f"Invalid color: {text!r}")
    try:
        value = int(s, 16)
    except ValueError:
        raise ValueError(f"Invalid color: {text!r}") from None
    if len(s) == 6:
        value |= 0xFF000000
    return value


def to_hex(color: int) -> str:
    """Format a color int as ``#AARRGGBB``."""
    return f"#{color & 0xFFFFFFFF:08X}"
