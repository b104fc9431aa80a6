"""Pixel format helpers shared by the canvas, resamplers and file IO.

Bitmaps are (H, W, 4) uint8 arrays in RGBA order with straight alpha.
Blending and resampling work on premultiplied float32 copies instead.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray

PIXEL_CHANNELS = 4


def check_bitmap(bitmap: Array) -> None:
    """Raise if ``bitmap`` is not an RGBA uint8 array of shape (H, W, 4)."""
    if not isinstance(bitmap, np.ndarray):
        raise TypeError("bitmap must be a NumPy array")
    if bitmap.dtype != np.uint8:
        raise TypeError("bitmap must have dtype=uint8")
    if bitmap.ndim != 3 or bitmap.shape[2] != PIXEL_CHANNELS:
        raise ValueError("bitmap must be an RGBA array with shape (H, W, 4)")


def premultiply(bitmap: Array) -> Array:
    """Convert straight RGBA uint8 to premultiplied float32 in [0, 1]."""
    p = bitmap.astype(np.float32) / 255.0
    p[..., :3] *= p[..., 3:4]
    return p


def unpremultiply(p: Array) -> Array:
    """Convert premultiplied float RGBA back to straight uint8."""
    p = np.clip(p, 0.0, 1.0)
    a = p[..., 3:4]
    color = np.divide(p[..., :3], a, out=np.zeros_like(p[..., :3]), where=a > 0)
    out = np.concatenate([color, a], axis=-1)
    return np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)
