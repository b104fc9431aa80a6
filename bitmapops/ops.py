"""Bitmap helper operations.

Four independent, stateless operations on RGBA bitmap arrays:

- drawable_to_bitmap : rasterize a drawable at its intrinsic size
- resize_bitmap      : scale to an exact width/height with bilinear filtering
- apply_color_filter : filter a bitmap in place (or tint it with a color)
- get_dominant_color : average color via a 1x1 downscale
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import numpy as np

from .canvas import Canvas, create_bitmap, get_pixel
from .utils.pixels import PIXEL_CHANNELS, check_bitmap
from .drawables import Drawable
from .filters import BlendMode, PorterDuffColorFilter

logger = logging.getLogger(__name__)

Array = np.ndarray
Filter = Callable[[Array], Array]


def drawable_to_bitmap(drawable: Optional[Drawable]) -> Optional[Array]:
    """Rasterize ``drawable`` into a new bitmap of its intrinsic size.

    This is best effort: any failure while allocating or drawing is logged
    and ``None`` is returned instead of raising.

    Parameters
    ----------
    drawable : Drawable | None
        The drawable to paint. Its bounds are reset to the full bitmap.

    Returns
    -------
    np.ndarray | None
        A (H, W, 4) uint8 bitmap, or None if there is no drawable, it has
        no usable intrinsic size, or drawing failed.
    """
    if drawable is None:
        return None

    try:
        bitmap = create_bitmap(drawable.intrinsic_width, drawable.intrinsic_height)
        canvas = Canvas(bitmap)
        drawable.set_bounds(0, 0, canvas.width, canvas.height)
        drawable.draw(canvas)
        return bitmap
    except Exception as e:
        logger.debug(f"Could not convert {drawable!r} to a bitmap: {e}")
        return None


def resize_bitmap(bitmap: Array, new_width: int, new_height: int) -> Array:
    """Scale ``bitmap`` to exactly ``new_width`` x ``new_height``.

    Each axis is scaled independently about the top-left corner, so the
    aspect ratio is not preserved. Bilinear filtering widens with the
    downscale factor, which makes a 1x1 target an average of the source.

    Parameters
    ----------
    bitmap : np.ndarray
        Source RGBA bitmap; left unmodified.
    new_width : int
        Target width (>=0).
    new_height : int
        Target height (>=0).

    Returns
    -------
    np.ndarray
        New bitmap of shape (new_height, new_width, 4). Empty if either
        dimension is zero.
    """
    check_bitmap(bitmap)
    if new_width < 0 or new_height < 0:
        raise ValueError(f"new size must be >= 0, got {new_width}x{new_height}")
    if new_width == 0 or new_height == 0:
        return np.zeros((new_height, new_width, PIXEL_CHANNELS), dtype=np.uint8)

    resized = create_bitmap(new_width, new_height)
    h, w = bitmap.shape[:2]
    if w == 0 or h == 0:
        return resized

    scale_x = new_width / float(w)
    scale_y = new_height / float(h)

    canvas = Canvas(resized)
    canvas.draw_bitmap(bitmap, scale_x=scale_x, scale_y=scale_y, filter_bitmap=True)
    return resized


def apply_color_filter(bitmap: Array, color_filter: Union[Filter, int]) -> Array:
    """Draw ``bitmap`` onto itself through ``color_filter``.

    The filtered pixels are composited source-over onto the existing ones,
    and the same array object is returned. Passing an ``int`` color tints
    the bitmap (see ``apply_tint``).

    Parameters
    ----------
    bitmap : np.ndarray
        RGBA bitmap, modified in place.
    color_filter : callable | int
        A ``ColorFilter`` (or any array -> array callable), or an ARGB color.

    Returns
    -------
    np.ndarray
        ``bitmap`` itself.
    """
    if isinstance(color_filter, (bool, np.bool_)):
        raise TypeError("color_filter must be a color int or a filter, not a bool")
    if isinstance(color_filter, (int, np.integer)):
        return apply_tint(bitmap, int(color_filter))

    canvas = Canvas(bitmap)
    canvas.draw_bitmap(bitmap, color_filter=color_filter, filter_bitmap=True)
    return bitmap


def apply_tint(bitmap: Array, color: int) -> Array:
    """Recolor the visible shape of ``bitmap`` with ``color`` (source-atop), in place."""
    return apply_color_filter(bitmap, PorterDuffColorFilter(color, BlendMode.SRC_ATOP))


def get_dominant_color(bitmap: Array) -> int:
    """Return the representative ARGB color of ``bitmap``.

    The bitmap is resized to a single pixel; the bilinear kernel averages
    the whole source into it. The scratch bitmap is dropped before returning.
    """
    scratch = resize_bitmap(bitmap, 1, 1)
    try:
        return get_pixel(scratch, 0, 0)
    finally:
        del scratch
