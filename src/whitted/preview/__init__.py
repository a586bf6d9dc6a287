"""Preview module for image output.

Components:
    export: PPM and PNG export utilities

Features:
    - Plain-text PPM (P3) serialization with 70-column wrapping
    - 8-bit PNG export via Pillow, with optional gamma encoding
    - RMSE comparison between renders

Example:
    >>> from whitted.preview import save_png, save_ppm
    >>> save_ppm(canvas, "scene.ppm")
    >>> save_png(canvas, "scene.png", gamma=2.2)
"""

from whitted.preview.export import (
    canvas_to_ppm,
    canvas_to_uint8,
    compute_rmse,
    save_png,
    save_ppm,
)

__all__ = [
    "canvas_to_ppm",
    "save_ppm",
    "canvas_to_uint8",
    "save_png",
    "compute_rmse",
]
