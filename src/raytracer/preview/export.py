"""Image export utilities for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)
    - PPM (plain-text P3, 8-bit)

Colors are clamped to [0, 1] and scaled to [0, 255]; no tone mapping or
gamma correction is applied.

Example:
    >>> from raytracer.preview.export import save_canvas
    >>> canvas = camera.render(world)
    >>> save_canvas(canvas, "world.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from PIL import Image as PILImage

if TYPE_CHECKING:
    from raytracer.preview.canvas import Canvas

logger = logging.getLogger(__name__)

ImageFormat = Literal["png", "ppm"]

# Plain PPM readers may reject longer lines
PPM_MAX_LINE_LENGTH = 70


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialise the canvas as a plain (P3) PPM document.

    Each image row starts a new line and no line exceeds 70 characters. The
    document ends with a newline.

    Args:
        canvas: The canvas to serialise.

    Returns:
        The PPM text.
    """
    header = f"P3\n{canvas.width} {canvas.height}\n255\n"
    lines: list[str] = []
    for row in canvas.to_rgb8():
        line = ""
        for value in row.ravel():
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)
    return header + "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write the canvas to filepath as a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Write the canvas to filepath as an 8-bit RGB PNG."""
    pil_image = PILImage.fromarray(canvas.to_rgb8())
    pil_image.save(filepath, format="PNG")


def save_canvas(
    canvas: Canvas,
    filepath: str | Path,
    *,
    image_format: ImageFormat | None = None,
) -> Path:
    """Save the canvas, choosing the format from image_format or the file suffix.

    Args:
        canvas: The canvas to save.
        filepath: Output path.
        image_format: "png" or "ppm". Defaults to the suffix of filepath.

    Returns:
        The path written.

    Raises:
        ValueError: If the format is unknown.
    """
    path = Path(filepath)
    chosen = image_format or path.suffix.lstrip(".").lower()
    if chosen == "png":
        save_png(canvas, path)
    elif chosen == "ppm":
        save_ppm(canvas, path)
    else:
        raise ValueError(f"Unknown image format: {chosen!r} (expected 'png' or 'ppm')")
    logger.info("Saved %dx%d %s image to %s", canvas.width, canvas.height, chosen, path)
    return path
