"""Utility functions for bitmapops.

Modules:
- loader: Load/save Pillow <-> NumPy RGBA conversion utilities.
- resize: Bilinear and nearest-neighbor resampling of RGBA arrays.
"""
from .loader import load_bitmap, save_bitmap
from .resize import resize_bilinear, resize_nearest

__all__ = [
    "load_bitmap",
    "save_bitmap",
    "resize_bilinear",
    "resize_nearest",
]
