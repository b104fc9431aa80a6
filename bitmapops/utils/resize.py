"""Resampling utilities for RGBA bitmap arrays.

Two flavors are provided: a bilinear resampler backed by Pillow, whose
filter support widens when downscaling so every source pixel contributes,
and a plain NumPy nearest-neighbor resampler for crisp scaling.
"""
from __future__ import annotations

import numpy as np
from PIL import Image

from .pixels import check_bitmap, premultiply, unpremultiply

Array = np.ndarray


def resize_bilinear(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGBA image to (new_h, new_w) with bilinear filtering.

    Each premultiplied channel is resampled as a 32-bit float ("F") Pillow
    image, so translucent colors are not rounded through 8-bit
    premultiplied storage and a uniform bitmap keeps its exact color.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 4), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image.
    """
    check_bitmap(arr)
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    H, W, C = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    p = premultiply(arr)
    out = np.empty((new_h, new_w, C), dtype=np.float32)
    for c in range(C):
        plane = Image.fromarray(np.ascontiguousarray(p[..., c]))
        out[..., c] = np.asarray(
            plane.resize((new_w, new_h), resample=Image.Resampling.BILINEAR),
            dtype=np.float32,
        )
    return unpremultiply(out)


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGBA image to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 4), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image.
    """
    check_bitmap(arr)
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    # Sample the source pixel under each output pixel center
    y = (np.arange(new_h) + 0.5) * (H / new_h)
    x = (np.arange(new_w) + 0.5) * (W / new_w)
    yi = np.clip(np.floor(y), 0, H - 1).astype(np.int64)
    xi = np.clip(np.floor(x), 0, W - 1).astype(np.int64)

    out = arr[yi[:, None], xi[None, :], :]
    return out.astype(np.uint8)
