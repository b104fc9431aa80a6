"""Command-line entry point for bitmapops.

This tool loads an image as an RGBA bitmap, optionally resizes it,
optionally tints its visible shape with a single color, saves the result,
and can print the bitmap's dominant color.

All processing occurs on NumPy arrays; Pillow is used for resampling,
loading and saving.

Usage example:
    python -m bitmapops.main -i icon.png -o tinted.png --width 48 --height 48 --tint "#FF2196F3"
    python -m bitmapops.main -i photo.jpg --dominant
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .color import parse_color, to_hex
from .ops import apply_tint, get_dominant_color, resize_bitmap
from .utils.loader import load_bitmap, save_bitmap


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="bitmapops",
        description=(
            "Resize, tint, and sample the dominant color of images. "
            "Bitmaps are processed as RGBA NumPy arrays."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", default=None, help="Path to output image file")

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Target width in pixels. If only one of --width/--height is set, "
        "the other follows the aspect ratio.",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Target height in pixels.",
    )
    parser.add_argument(
        "--tint",
        type=str,
        default=None,
        help="Tint color as #RRGGBB or #AARRGGBB, drawn source-atop over the image.",
    )
    parser.add_argument(
        "--dominant",
        action="store_true",
        help="Print the dominant color of the (processed) image as #AARRGGBB.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.width is not None and ns.width < 1:
        raise ValueError("--width must be an integer >= 1")
    if ns.height is not None and ns.height < 1:
        raise ValueError("--height must be an integer >= 1")
    if ns.tint is not None:
        parse_color(ns.tint)
    if ns.output is None and not ns.dominant:
        raise ValueError("nothing to do: pass --output and/or --dominant")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def _target_size(w: int, h: int, width: Optional[int], height: Optional[int]) -> tuple[int, int]:
    if width is not None and height is not None:
        return width, height
    if width is not None:
        return width, max(1, int(round(h * width / w)))
    if height is not None:
        return max(1, int(round(w * height / h))), height
    return w, h


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> NumPy RGBA uint8)
    bitmap = load_bitmap(args.input)
    h, w = bitmap.shape[:2]

    # 2) Resize if a target size was requested
    new_w, new_h = _target_size(w, h, args.width, args.height)
    if (new_w, new_h) != (w, h):
        bitmap = resize_bitmap(bitmap, new_w, new_h)

    # 3) Tint in place
    if args.tint is not None:
        apply_tint(bitmap, parse_color(args.tint))

    # 4) Save (NumPy -> Pillow)
    if args.output is not None:
        save_bitmap(bitmap, args.output)

    if args.dominant:
        print(to_hex(get_dominant_color(bitmap)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
