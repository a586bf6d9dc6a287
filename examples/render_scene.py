#!/usr/bin/env python3
"""Render the demo scene.

This script demonstrates end-to-end rendering: it builds the demo scene
(floor, back wall and three spheres under one point light), renders it with
the chosen backend and writes the image as PPM or PNG.

Usage:
    python examples/render_scene.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --output OUTPUT     Output file path, .ppm or .png (default: scene.ppm)
    --backend BACKEND   Render backend, python or taichi (default: python)
    --threads THREADS   CPU threads for the taichi backend (default: all)
    --quiet             Suppress progress output

Example:
    python examples/render_scene.py --width 400 --height 200 --backend taichi --output scene.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from whitted.config import DEFAULT_BACKEND, init_taichi, is_taichi_initialized
from whitted.preview.export import save_png, save_ppm
from whitted.scene.demo import create_demo_scene

SUPPORTED_SUFFIXES = (".ppm", ".png")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=200,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.ppm",
        help="Output file path, .ppm or .png (default: scene.ppm)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default=DEFAULT_BACKEND,
        help=f"Render backend (default: {DEFAULT_BACKEND})",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="CPU threads for the taichi backend (default: all)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    width: int = 200,
    height: int = 100,
    output_path: str = "scene.ppm",
    backend: str = DEFAULT_BACKEND,
    threads: int | None = None,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.ppm or .png).
        backend: "python" or "taichi".
        threads: Optional CPU thread cap for the taichi backend.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.

    Raises:
        ValueError: If the output suffix is not supported.
    """
    output_file = Path(output_path)
    suffix = output_file.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported output format {suffix!r}, expected one of {SUPPORTED_SUFFIXES}")

    if backend == "taichi":
        already_initialized = is_taichi_initialized()
        init_taichi(max_threads=threads)
        if threads is not None and already_initialized:
            print(
                f"Warning: Taichi is already initialized; --threads {threads} has no effect",
                file=sys.stderr,
            )
        elif not quiet:
            print(f"Using taichi backend (threads: {threads or 'all'})")
    elif threads is not None:
        print(
            f"Warning: --threads only applies to the taichi backend; ignoring {threads}",
            file=sys.stderr,
        )

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")
    world, camera = create_demo_scene(width, height)

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            rows_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, backend=backend, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    if suffix == ".png":
        save_png(canvas, output_file)
    else:
        save_ppm(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        render_scene(
            width=args.width,
            height=args.height,
            output_path=args.output,
            backend=args.backend,
            threads=args.threads,
            quiet=args.quiet,
        )
        return 0
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
