"""Tests for canvas export to PPM and PNG."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from raytracer.core.color import Color
from raytracer.preview.canvas import Canvas
from raytracer.preview.export import (
    PPM_MAX_LINE_LENGTH,
    canvas_to_ppm,
    save_canvas,
    save_png,
    save_ppm,
)


class TestCanvasToPPM:
    """Tests for plain PPM serialisation."""

    def test_header(self):
        """The header names the format, size and maximum value."""
        ppm = canvas_to_ppm(Canvas(5, 3))
        assert ppm.splitlines()[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        """Each row of pixels is written on its own line."""
        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, Color(1.5, 0, 0))
        canvas.write_pixel(2, 1, Color(0, 0.5, 0))
        canvas.write_pixel(4, 2, Color(-0.5, 0, 1))
        lines = canvas_to_ppm(canvas).splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_splits_long_lines(self):
        """No line is longer than 70 characters."""
        canvas = Canvas(10, 2, background=Color(1, 0.8, 0.6))
        lines = canvas_to_ppm(canvas).splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= PPM_MAX_LINE_LENGTH for line in lines)

    def test_ends_with_newline(self):
        """The document is terminated by a newline."""
        assert canvas_to_ppm(Canvas(5, 3)).endswith("\n")


class TestSave:
    """Tests for writing image files."""

    def test_save_ppm(self, tmp_path: Path) -> None:
        """save_ppm writes the PPM text."""
        canvas = Canvas(2, 2, background=Color(1, 0, 0))
        output_path = tmp_path / "image.ppm"
        save_ppm(canvas, output_path)
        assert output_path.read_text(encoding="ascii") == canvas_to_ppm(canvas)

    def test_save_png(self, tmp_path: Path) -> None:
        """save_png writes an 8-bit RGB image."""
        canvas = Canvas(4, 3)
        canvas.write_pixel(3, 2, Color(0, 0, 1))
        output_path = tmp_path / "image.png"
        save_png(canvas, output_path)

        with PILImage.open(output_path) as image:
            assert image.size == (4, 3)
            assert image.mode == "RGB"
            assert image.getpixel((3, 2)) == (0, 0, 255)
            assert image.getpixel((0, 0)) == (0, 0, 0)

    def test_png_matches_canvas(self, tmp_path: Path) -> None:
        """The saved PNG holds exactly the quantised canvas."""
        canvas = Canvas(3, 2, background=Color(0.2, 0.4, 0.6))
        output_path = tmp_path / "image.png"
        save_png(canvas, output_path)
        with PILImage.open(output_path) as image:
            assert np.array_equal(np.asarray(image), canvas.to_rgb8())

    @pytest.mark.parametrize("suffix, magic", [(".png", b"\x89PNG"), (".ppm", b"P3"), (".PPM", b"P3")])
    def test_save_canvas_uses_suffix(self, tmp_path: Path, suffix: str, magic: bytes) -> None:
        """The format is taken from the file suffix."""
        output_path = save_canvas(Canvas(2, 2), tmp_path / f"image{suffix}")
        assert output_path.read_bytes().startswith(magic)

    def test_save_canvas_explicit_format(self, tmp_path: Path) -> None:
        """An explicit format overrides the suffix."""
        output_path = save_canvas(Canvas(2, 2), tmp_path / "image.out", image_format="ppm")
        assert output_path == tmp_path / "image.out"
        assert output_path.read_text(encoding="ascii").startswith("P3\n")

    def test_save_canvas_unknown_format(self, tmp_path: Path) -> None:
        """Unknown formats raise ValueError."""
        with pytest.raises(ValueError, match="Unknown image format"):
            save_canvas(Canvas(2, 2), tmp_path / "image.jpg")
