"""Read and write bitmaps as image files.

Files are decoded by Pillow and always come back as straight-alpha RGBA,
whatever mode they were stored in. Writing to a format that cannot carry
alpha drops the alpha channel.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .pixels import check_bitmap

Array = np.ndarray

# Extensions whose Pillow writers reject RGBA input.
OPAQUE_FORMATS = (".jpg", ".jpeg", ".bmp")


def load_bitmap(path: Union[str, Path]) -> Array:
    """Decode ``path`` into a (H, W, 4) uint8 RGBA bitmap."""
    with Image.open(Path(path)) as im:
        return np.array(im.convert("RGBA"), dtype=np.uint8)


def save_bitmap(bitmap: Array, path: Union[str, Path]) -> None:
    """Encode ``bitmap`` to ``path``; the format follows the file extension.

    Parameters
    ----------
    bitmap : np.ndarray
        RGBA bitmap of shape (H, W, 4), dtype=uint8.
    path : str | Path
        Destination file. For JPEG and BMP the bitmap is written as RGB.
    """
    check_bitmap(bitmap)

    p = Path(path)
    im = Image.fromarray(np.ascontiguousarray(bitmap))
    if p.suffix.lower() in OPAQUE_FORMATS:
        im = im.convert("RGB")
    im.save(p)
