"""Raster primitives for RGBA bitmaps held in NumPy arrays.

A bitmap is an array of shape (H, W, 4), dtype=uint8, RGBA order with
straight (non-premultiplied) alpha. Compositing happens in premultiplied
float space and is converted back on write.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from .color import to_rgba, from_rgba
from .utils.pixels import PIXEL_CHANNELS, check_bitmap, premultiply, unpremultiply  # noqa: F401
from .utils.resize import resize_bilinear, resize_nearest

logger = logging.getLogger(__name__)

Array = np.ndarray


def create_bitmap(width: int, height: int) -> Array:
    """Allocate a fully transparent bitmap.

    Parameters
    ----------
    width : int
        Width in pixels (>=1).
    height : int
        Height in pixels (>=1).

    Returns
    -------
    np.ndarray
        Zero-filled array of shape (height, width, 4), dtype=uint8.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be > 0, got {width}x{height}")
    return np.zeros((height, width, PIXEL_CHANNELS), dtype=np.uint8)


def get_pixel(bitmap: Array, x: int, y: int) -> int:
    """Return the pixel at column ``x``, row ``y`` as an ARGB color int."""
    check_bitmap(bitmap)
    h, w = bitmap.shape[:2]
    if not (0 <= x < w and 0 <= y < h):
        raise IndexError(f"pixel ({x}, {y}) outside {w}x{h} bitmap")
    r, g, b, a = bitmap[y, x]
    return from_rgba(r, g, b, a)


def blend_src_over(src: Array, dst: Array) -> Array:
    """Porter-Duff source-over on premultiplied arrays."""
    return src + dst * (1.0 - src[..., 3:4])


class Canvas:
    """Drawing surface that writes straight into a caller-owned bitmap."""

    def __init__(self, bitmap: Array) -> None:
        check_bitmap(bitmap)
        self.bitmap = bitmap

    @property
    def width(self) -> int:
        return self.bitmap.shape[1]

    @property
    def height(self) -> int:
        return self.bitmap.shape[0]

    def draw_bitmap(
        self,
        source: Array,
        left: int = 0,
        top: int = 0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        color_filter: Optional[Callable[[Array], Array]] = None,
        filter_bitmap: bool = True,
    ) -> None:
        """Draw ``source`` scaled about its top-left corner, placed at (left, top).

        Parameters
        ----------
        source : np.ndarray
            RGBA bitmap to draw. May be this canvas's own bitmap.
        left, top : int
            Destination offset of the scaled source.
        scale_x, scale_y : float
            Scale factors applied before placement.
        color_filter : callable | None
            Applied to the scaled pixels before compositing.
        filter_bitmap : bool
            Bilinear resampling when True, nearest-neighbor otherwise.
        """
        check_bitmap(source)
        h, w = source.shape[:2]
        dst_w = int(round(w * scale_x))
        dst_h = int(round(h * scale_y))
        if dst_w <= 0 or dst_h <= 0:
            return

        if (dst_w, dst_h) != (w, h):
            resample = resize_bilinear if filter_bitmap else resize_nearest
            layer = resample(source, dst_h, dst_w)
        else:
            layer = source.copy()

        if color_filter is not None:
            expected = layer.shape
            layer = color_filter(layer)
            check_bitmap(layer)
            if layer.shape != expected:
                raise ValueError(
                    f"color filter changed the layer shape from {expected} to {layer.shape}"
                )

        self._composite(layer, left, top)

    def draw_rect(self, left: int, top: int, right: int, bottom: int, color: int) -> None:
        """Fill the rectangle [left, right) x [top, bottom) with ``color``."""
        if right <= left or bottom <= top:
            return
        layer = np.empty((bottom - top, right - left, PIXEL_CHANNELS), dtype=np.uint8)
        layer[...] = to_rgba(color)
        self._composite(layer, left, top)

    def draw_color(self, color: int) -> None:
        self.draw_rect(0, 0, self.width, self.height, color)

    def _composite(self, layer: Array, left: int, top: int) -> None:
        lh, lw = layer.shape[:2]
        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + lw, self.width), min(top + lh, self.height)
        if x0 >= x1 or y0 >= y1:
            logger.debug("layer at (%d, %d) lies outside the canvas", left, top)
            return

        src = layer[y0 - top:y1 - top, x0 - left:x1 - left]
        dst = self.bitmap[y0:y1, x0:x1]
        out = blend_src_over(premultiply(src), premultiply(dst))
        self.bitmap[y0:y1, x0:x1] = unpremultiply(out)
