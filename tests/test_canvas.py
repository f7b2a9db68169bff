"""Unit tests for the Taichi-backed canvas."""

import numpy as np
import pytest

from raytracer.core.color import BLACK, RED, Color
from raytracer.preview.canvas import Canvas, CanvasBoundsError


class TestCanvas:
    """Tests for creating, writing and reading the canvas."""

    def test_create(self):
        """A new canvas is black everywhere."""
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert np.allclose(canvas.to_numpy(), 0.0)

    def test_background(self):
        """A background color fills every pixel."""
        canvas = Canvas(3, 2, background=Color(0.25, 0.5, 0.75))
        assert canvas.pixel_at(2, 1) == Color(0.25, 0.5, 0.75)

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 2)])
    def test_rejects_non_positive_size(self, width, height):
        """Both dimensions must be positive."""
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_write_and_read_pixel(self):
        """A written pixel reads back the same color."""
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, RED)
        assert canvas.pixel_at(2, 3) == RED
        assert canvas.pixel_at(3, 2) == BLACK

    def test_fill(self):
        """fill overwrites every pixel."""
        canvas = Canvas(4, 4)
        canvas.write_pixel(1, 1, RED)
        canvas.fill(Color(0.1, 0.2, 0.3))
        assert canvas.pixel_at(1, 1) == Color(0.1, 0.2, 0.3)

    @pytest.mark.parametrize("x, y", [(10, 0), (0, 20), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, x, y):
        """Coordinates outside the canvas raise CanvasBoundsError."""
        canvas = Canvas(10, 20)
        with pytest.raises(CanvasBoundsError):
            canvas.write_pixel(x, y, RED)
        with pytest.raises(IndexError):
            canvas.pixel_at(x, y)

    def test_to_numpy_is_row_major(self):
        """to_numpy returns (height, width, 3) with rows first."""
        canvas = Canvas(3, 2)
        canvas.write_pixel(2, 1, RED)
        image = canvas.to_numpy()
        assert image.shape == (2, 3, 3)
        assert image.dtype == np.float32
        assert np.allclose(image[1, 2], [1.0, 0.0, 0.0])

    def test_rows(self):
        """rows() lists colors top row first."""
        canvas = Canvas(2, 2)
        canvas.write_pixel(1, 0, RED)
        assert canvas.rows() == [[BLACK, RED], [BLACK, BLACK]]

    def test_to_rgb8_scales_and_clamps(self):
        """Colors are scaled to bytes, rounded and clamped."""
        canvas = Canvas(3, 1)
        canvas.write_pixel(0, 0, Color(1.5, 0, 0))
        canvas.write_pixel(1, 0, Color(0, 0.5, 0))
        canvas.write_pixel(2, 0, Color(-0.5, 0, 1))
        pixels = canvas.to_rgb8()
        assert pixels.shape == (1, 3, 3)
        assert pixels.dtype == np.uint8
        assert pixels[0].tolist() == [[255, 0, 0], [0, 128, 0], [0, 0, 255]]

    def test_to_rgb8_matches_color_to_255(self):
        """Kernel quantisation agrees with Color.to_255."""
        color = Color(0.2, 0.4, 0.6)
        canvas = Canvas(1, 1, background=color)
        assert tuple(canvas.to_rgb8()[0, 0].tolist()) == color.to_255()

    def test_to_rgb8_reflects_later_writes(self):
        """Repeated exports see pixels written in between."""
        canvas = Canvas(2, 1)
        first = canvas.to_rgb8()
        canvas.write_pixel(1, 0, RED)
        second = canvas.to_rgb8()
        assert first[0, 1].tolist() == [0, 0, 0]
        assert second[0, 1].tolist() == [255, 0, 0]

    def test_to_rgb8_reuses_output_field(self):
        """Exporting does not allocate a new Taichi field each time."""
        canvas = Canvas(2, 2)
        out = canvas._rgb8
        canvas.to_rgb8()
        canvas.to_rgb8()
        assert canvas._rgb8 is out


class TestLoadNumpy:
    """Tests for bulk loading pixels from an array."""

    def test_load_row_major_image(self):
        """Array rows map to canvas rows, top first."""
        canvas = Canvas(3, 2)
        image = np.zeros((2, 3, 3), dtype=np.float32)
        image[1, 2] = [0.25, 0.5, 0.75]
        canvas.load_numpy(image)
        assert canvas.pixel_at(2, 1) == Color(0.25, 0.5, 0.75)
        assert canvas.pixel_at(1, 1) == BLACK

    def test_round_trips_to_numpy(self):
        """load_numpy and to_numpy use the same layout."""
        canvas = Canvas(4, 3)
        image = np.linspace(0.0, 1.0, 4 * 3 * 3, dtype=np.float32).reshape(3, 4, 3)
        canvas.load_numpy(image)
        assert np.allclose(canvas.to_numpy(), image)

    def test_accepts_float64(self):
        """Double precision input is converted."""
        canvas = Canvas(1, 1)
        canvas.load_numpy(np.full((1, 1, 3), 0.5))
        assert canvas.pixel_at(0, 0) == Color(0.5, 0.5, 0.5)

    @pytest.mark.parametrize("shape", [(3, 2, 3), (2, 3), (2, 3, 4)])
    def test_rejects_wrong_shape(self, shape):
        """The array must be (height, width, 3)."""
        canvas = Canvas(3, 2)
        with pytest.raises(ValueError, match="shape"):
            canvas.load_numpy(np.zeros(shape, dtype=np.float32))


class TestKernels:
    """Tests for the Taichi kernels used by the canvas."""

    def test_fill_kernel(self):
        """_fill writes the same color into every cell of a field."""
        import taichi as ti

        from raytracer.preview.canvas import _fill

        pixels = ti.Vector.field(3, dtype=ti.f32, shape=(2, 3))
        _fill(pixels, 0.5, 0.25, 1.0)
        assert np.allclose(pixels.to_numpy(), [0.5, 0.25, 1.0])

    def test_quantize_kernel(self):
        """_quantize scales, rounds, clamps and transposes to [row, column]."""
        import taichi as ti

        from raytracer.preview.canvas import _quantize

        pixels = ti.Vector.field(3, dtype=ti.f32, shape=(2, 1))
        pixels[1, 0] = (2.0, 0.5, -1.0)
        out = ti.field(dtype=ti.u8, shape=(1, 2, 3))
        _quantize(pixels, out)
        assert out.to_numpy()[0].tolist() == [[0, 0, 0], [255, 128, 0]]
