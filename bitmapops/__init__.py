from __future__ import annotations

# Public API: re-export the bitmap operations and their building blocks.
from .ops import (  # noqa: F401
    drawable_to_bitmap,
    resize_bitmap,
    apply_color_filter,
    apply_tint,
    get_dominant_color,
)
from .canvas import Canvas, create_bitmap, get_pixel  # noqa: F401
from .drawables import Drawable, BitmapDrawable, ColorDrawable  # noqa: F401
from .filters import (  # noqa: F401
    BlendMode,
    ColorFilter,
    PorterDuffColorFilter,
    ColorMatrixColorFilter,
    LightingColorFilter,
)
from .utils.loader import load_bitmap, save_bitmap  # noqa: F401

__all__ = [
    "drawable_to_bitmap",
    "resize_bitmap",
    "apply_color_filter",
    "apply_tint",
    "get_dominant_color",
    "Canvas",
    "create_bitmap",
    "get_pixel",
    "Drawable",
    "BitmapDrawable",
    "ColorDrawable",
    "BlendMode",
    "ColorFilter",
    "PorterDuffColorFilter",
    "ColorMatrixColorFilter",
    "LightingColorFilter",
    "load_bitmap",
    "save_bitmap",
]
