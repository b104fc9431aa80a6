"""Color filters applied to bitmaps while they are being drawn.

A color filter maps an RGBA bitmap array to a new array of the same shape,
one pixel at a time. Any callable with that signature works with
``Canvas.draw_bitmap``; the classes here cover the common cases:

- PorterDuffColorFilter : blend a single color onto every pixel using a
  Porter-Duff rule (``BlendMode``). SRC_ATOP is the monochrome tint.
- ColorMatrixColorFilter: 4x5 affine transform of the RGBA channels.
- LightingColorFilter   : per-channel multiply then add on RGB.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Sequence, Union

import numpy as np

from .utils.pixels import check_bitmap, premultiply, unpremultiply
from .color import to_rgba

Array = np.ndarray


class BlendMode(Enum):
    """Porter-Duff rules with S the filter color and D the pixel."""

    CLEAR = "clear"
    SRC = "src"
    DST = "dst"
    SRC_OVER = "src_over"
    DST_OVER = "dst_over"
    SRC_IN = "src_in"
    DST_IN = "dst_in"
    SRC_OUT = "src_out"
    DST_OUT = "dst_out"
    SRC_ATOP = "src_atop"
    DST_ATOP = "dst_atop"
    XOR = "xor"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    ADD = "add"


# Premultiplied formulas; sa/da are the alpha columns of s/d.
_BLEND: Dict[BlendMode, Callable[[Array, Array, Array, Array], Array]] = {
    BlendMode.CLEAR: lambda s, sa, d, da: np.zeros_like(d),
    BlendMode.SRC: lambda s, sa, d, da: np.broadcast_to(s, d.shape).copy(),
    BlendMode.DST: lambda s, sa, d, da: d.copy(),
    BlendMode.SRC_OVER: lambda s, sa, d, da: s + d * (1.0 - sa),
    BlendMode.DST_OVER: lambda s, sa, d, da: d + s * (1.0 - da),
    BlendMode.SRC_IN: lambda s, sa, d, da: s * da,
    BlendMode.DST_IN: lambda s, sa, d, da: d * sa,
    BlendMode.SRC_OUT: lambda s, sa, d, da: s * (1.0 - da),
    BlendMode.DST_OUT: lambda s, sa, d, da: d * (1.0 - sa),
    BlendMode.SRC_ATOP: lambda s, sa, d, da: s * da + d * (1.0 - sa),
    BlendMode.DST_ATOP: lambda s, sa, d, da: d * sa + s * (1.0 - da),
    BlendMode.XOR: lambda s, sa, d, da: s * (1.0 - da) + d * (1.0 - sa),
    BlendMode.MULTIPLY: lambda s, sa, d, da: s * d,
    BlendMode.SCREEN: lambda s, sa, d, da: s + d - s * d,
    BlendMode.ADD: lambda s, sa, d, da: s + d,
}


class ColorFilter(ABC):
    """Base class for per-pixel color transforms."""

    def __call__(self, bitmap: Array) -> Array:
        check_bitmap(bitmap)
        return self.filter(bitmap)

    @abstractmethod
    def filter(self, bitmap: Array) -> Array:
        """Return a new RGBA array holding the filtered pixels."""


class PorterDuffColorFilter(ColorFilter):
    """Blend a constant color onto each pixel with a Porter-Duff rule.

    With ``BlendMode.SRC_ATOP`` the color only lands where the pixel already
    has coverage, and the pixel's alpha is kept, so the filter recolors the
    silhouette of the image without growing it.
    """

    def __init__(self, color: int, mode: BlendMode = BlendMode.SRC_ATOP) -> None:
        if not isinstance(mode, BlendMode):
            raise TypeError(f"mode must be a BlendMode, got {mode!r}")
        self.color = color
        self.mode = mode

    def filter(self, bitmap: Array) -> Array:
        d = premultiply(bitmap)
        s = premultiply(np.array(to_rgba(self.color), dtype=np.uint8))
        out = _BLEND[self.mode](s, s[3:4], d, d[..., 3:4])
        return unpremultiply(out)

    def __repr__(self) -> str:
        return f"PorterDuffColorFilter(color=0x{self.color & 0xFFFFFFFF:08X}, mode={self.mode.name})"


class ColorMatrixColorFilter(ColorFilter):
    """Transform straight RGBA values with a 4x5 matrix.

    Row ``i`` produces channel ``i`` (R, G, B, A) as
    ``m[i,0]*R + m[i,1]*G + m[i,2]*B + m[i,3]*A + m[i,4]``, on 0..255 values.
    """

    def __init__(self, matrix: Union[Sequence[float], Array]) -> None:
        m = np.asarray(matrix, dtype=np.float32)
        if m.size != 20:
            raise ValueError("matrix must have 20 entries (4 rows x 5 columns)")
        self.matrix = m.reshape(4, 5)

    @classmethod
    def saturation(cls, value: float) -> "ColorMatrixColorFilter":
        """Matrix that scales saturation; 0 gives grayscale, 1 is identity."""
        lr, lg, lb = 0.213, 0.715, 0.072
        inv = 1.0 - value
        return cls([
            lr * inv + value, lg * inv, lb * inv, 0, 0,
            lr * inv, lg * inv + value, lb * inv, 0, 0,
            lr * inv, lg * inv, lb * inv + value, 0, 0,
            0, 0, 0, 1, 0,
        ])

    def filter(self, bitmap: Array) -> Array:
        f = bitmap.astype(np.float32)
        out = f @ self.matrix[:, :4].T + self.matrix[:, 4]
        return np.clip(np.rint(out), 0, 255).astype(np.uint8)


class LightingColorFilter(ColorFilter):
    """Multiply RGB by ``mul`` then add ``add``; both are RGB colors, alpha ignored."""

    def __init__(self, mul: int, add: int) -> None:
        self.mul = mul
        self.add = add

    def filter(self, bitmap: Array) -> Array:
        mul = np.array(to_rgba(self.mul)[:3], dtype=np.float32) / 255.0
        add = np.array(to_rgba(self.add)[:3], dtype=np.float32)
        out = bitmap.copy()
        rgb = bitmap[..., :3].astype(np.float32) * mul + add
        out[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
        return out
