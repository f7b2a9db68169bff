#!/usr/bin/env python3
"""Render the three-spheres-in-a-room scene.

This script demonstrates end-to-end rendering: it builds the scene and camera,
renders every pixel with Phong shading and hard shadows, and writes the
result as PNG or PPM.

Usage:
    python -m examples.render_first_world [options]

Options:
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --fov DEGREES       Field of view in degrees (default: 60)
    --output OUTPUT     Output file path (default: first_world.png)
    --format FORMAT     Output format, png or ppm (default: from the suffix)
    --workers N         Worker processes for rendering (default: 1)
    --arch ARCH         Taichi backend for the canvas, cpu or gpu (default: cpu)
    --quiet             Suppress progress output

Example:
    python -m examples.render_first_world --width 200 --height 100 --output world.ppm
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the three-spheres-in-a-room scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="first_world.png",
        help="Output file path (default: first_world.png)",
    )
    parser.add_argument(
        "--format",
        choices=("png", "ppm"),
        default=None,
        help="Output format (default: taken from the output suffix)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for rendering (default: 1)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend for the canvas (default: cpu)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_first_world(
    width: int = 400,
    height: int = 200,
    fov_degrees: float = 60.0,
    output_path: str = "first_world.png",
    image_format: str | None = None,
    workers: int = 1,
    quiet: bool = False,
) -> Path:
    """Render the scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        output_path: Output file path.
        image_format: "png" or "ppm"; None picks from the suffix.
        workers: Number of worker processes.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialised before any canvas exists
    from raytracer.preview.export import save_canvas
    from raytracer.scene.first_world import create_first_world_scene

    if not quiet:
        print(f"Creating scene ({width}x{height})...")

    world, camera = create_first_world_scene(width, height, math.radians(fov_degrees))

    start_time = time.time()

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / total) * 100 if total > 0 else 0
            rows_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{total} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, workers=workers, progress=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = save_canvas(canvas, output_path, image_format=image_format)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    ti.init(arch=ti.gpu if args.arch == "gpu" else ti.cpu)

    try:
        render_first_world(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            image_format=args.format,
            workers=args.workers,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
