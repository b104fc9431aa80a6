"""Paintable assets that know how to draw themselves onto a ``Canvas``.

A drawable has an optional intrinsic size (``-1`` when it has none) and a
bounds rectangle that ``draw`` fills.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from .canvas import Canvas
from .utils.pixels import check_bitmap

Array = np.ndarray

Bounds = Tuple[int, int, int, int]


class Drawable(ABC):
    """Base class for anything that can paint itself into a bounds rectangle."""

    def __init__(self) -> None:
        self.bounds: Bounds = (0, 0, 0, 0)

    @property
    def intrinsic_width(self) -> int:
        return -1

    @property
    def intrinsic_height(self) -> int:
        return -1

    def set_bounds(self, left: int, top: int, right: int, bottom: int) -> None:
        self.bounds = (left, top, right, bottom)

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Paint into ``self.bounds`` on ``canvas``."""


class BitmapDrawable(Drawable):
    """Draws a bitmap stretched to its bounds.

    Parameters
    ----------
    bitmap : np.ndarray
        RGBA array of shape (H, W, 4). Its size is the intrinsic size.
    filter_bitmap : bool
        Bilinear resampling when stretched (default) or nearest-neighbor.
    """

    def __init__(self, bitmap: Array, filter_bitmap: bool = True) -> None:
        super().__init__()
        check_bitmap(bitmap)
        self.bitmap = bitmap
        self.filter_bitmap = filter_bitmap

    @property
    def intrinsic_width(self) -> int:
        return self.bitmap.shape[1]

    @property
    def intrinsic_height(self) -> int:
        return self.bitmap.shape[0]

    def draw(self, canvas: Canvas) -> None:
        left, top, right, bottom = self.bounds
        h, w = self.bitmap.shape[:2]
        if w == 0 or h == 0:
            return
        canvas.draw_bitmap(
            self.bitmap,
            left=left,
            top=top,
            scale_x=(right - left) / float(w),
            scale_y=(bottom - top) / float(h),
            filter_bitmap=self.filter_bitmap,
        )


class ColorDrawable(Drawable):
    """Fills its bounds with one color. Has no intrinsic size unless given one."""

    def __init__(self, color: int, width: int = -1, height: int = -1) -> None:
        super().__init__()
        self.color = color
        self._width = width
        self._height = height

    @property
    def intrinsic_width(self) -> int:
        return self._width

    @property
    def intrinsic_height(self) -> int:
        return self._height

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_rect(*self.bounds, self.color)
