"""
Tests for the canvas, drawables and resamplers
"""

import numpy as np
import pytest

from bitmapops.canvas import Canvas, create_bitmap, get_pixel
from bitmapops.drawables import BitmapDrawable, ColorDrawable
from bitmapops.utils.resize import resize_bilinear, resize_nearest


class TestCanvas:
    """Test drawing onto a bitmap"""

    def test_create_bitmap(self):
        """New bitmaps are transparent"""
        bitmap = create_bitmap(3, 2)
        assert bitmap.shape == (2, 3, 4)
        assert (bitmap == 0).all()

    @pytest.mark.parametrize("size", [(0, 1), (1, 0), (-1, 5)])
    def test_create_bitmap_invalid(self, size):
        """Non-positive sizes are rejected"""
        with pytest.raises(ValueError):
            create_bitmap(*size)

    def test_get_pixel(self):
        """Pixels come back as ARGB ints"""
        bitmap = create_bitmap(2, 2)
        bitmap[1, 0] = (0x11, 0x22, 0x33, 0x44)
        assert get_pixel(bitmap, 0, 1) == 0x44112233

    def test_get_pixel_out_of_range(self):
        """Reading outside the bitmap fails"""
        with pytest.raises(IndexError):
            get_pixel(create_bitmap(2, 2), 2, 0)

    def test_draw_rect_clips(self):
        """Rectangles are clipped to the canvas"""
        bitmap = create_bitmap(4, 4)
        Canvas(bitmap).draw_rect(2, 2, 10, 10, 0xFFFF0000)

        assert (bitmap[2:, 2:] == (255, 0, 0, 255)).all()
        assert (bitmap[:2] == 0).all()
        assert (bitmap[:, :2] == 0).all()

    def test_draw_translucent_over_opaque(self, solid):
        """Source-over blends a translucent color"""
        bitmap = solid(1, 1, (0, 0, 0, 255))
        Canvas(bitmap).draw_color(0x80FFFFFF)

        r, g, b, a = bitmap[0, 0]
        assert 126 <= r <= 130
        assert r == g == b
        assert a == 255

    def test_draw_bitmap_offset(self, red_bitmap):
        """Bitmaps are placed at the given offset"""
        bitmap = create_bitmap(6, 6)
        Canvas(bitmap).draw_bitmap(red_bitmap, left=4, top=4)

        assert (bitmap[4:, 4:] == (255, 0, 0, 255)).all()
        assert (bitmap[:4] == 0).all()

    def test_draw_bitmap_outside(self, red_bitmap):
        """Drawing fully off canvas changes nothing"""
        bitmap = create_bitmap(2, 2)
        Canvas(bitmap).draw_bitmap(red_bitmap, left=5, top=5)
        assert (bitmap == 0).all()

    def test_draw_bitmap_nearest(self, red_blue_bitmap):
        """Nearest-neighbor scaling keeps hard edges"""
        bitmap = create_bitmap(8, 8)
        Canvas(bitmap).draw_bitmap(red_blue_bitmap, scale_x=2.0, scale_y=2.0, filter_bitmap=False)

        assert (bitmap[:, :4] == (255, 0, 0, 255)).all()
        assert (bitmap[:, 4:] == (0, 0, 255, 255)).all()

    def test_filter_must_keep_shape(self, red_bitmap):
        """A filter that changes the layer size is an error"""
        bitmap = create_bitmap(4, 4)

        with pytest.raises(ValueError):
            Canvas(bitmap).draw_bitmap(red_bitmap, color_filter=lambda arr: arr[:2].copy())
        assert (bitmap == 0).all()


class TestDrawables:
    """Test drawable painting"""

    def test_color_drawable_intrinsic_size(self):
        """Color drawables have no size unless given one"""
        assert ColorDrawable(0xFF000000).intrinsic_width == -1
        assert ColorDrawable(0xFF000000, 3, 4).intrinsic_height == 4

    def test_bitmap_drawable_stretches(self, red_bitmap):
        """Bitmap drawables fill their bounds"""
        bitmap = create_bitmap(8, 2)
        drawable = BitmapDrawable(red_bitmap)
        drawable.set_bounds(0, 0, 8, 2)
        drawable.draw(Canvas(bitmap))

        assert (bitmap == (255, 0, 0, 255)).all()

    def test_bitmap_drawable_rejects_rgb(self):
        """Bitmap drawables need RGBA arrays"""
        with pytest.raises(ValueError):
            BitmapDrawable(np.zeros((2, 2, 3), dtype=np.uint8))


class TestResize:
    """Test the resampling helpers"""

    def test_bilinear_averages(self, red_blue_bitmap):
        """Bilinear downscale mixes neighboring colors"""
        out = resize_bilinear(red_blue_bitmap, 1, 2)

        assert out.shape == (1, 2, 4)
        assert out[0, 0, 0] > out[0, 1, 0]
        assert out[0, 1, 2] > out[0, 0, 2]

    def test_nearest_same_size_copies(self, noise_bitmap):
        """Same size returns an equal copy"""
        out = resize_nearest(noise_bitmap, 6, 5)
        assert out is not noise_bitmap
        np.testing.assert_array_equal(out, noise_bitmap)

    def test_invalid_size(self, red_bitmap):
        """Sizes below one are rejected"""
        with pytest.raises(ValueError):
            resize_bilinear(red_bitmap, 0, 2)
        with pytest.raises(ValueError):
            resize_nearest(red_bitmap, 2, 0)
