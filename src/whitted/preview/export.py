"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain-text P3, 8-bit per channel)
    - PNG (8-bit via Pillow)

Canvas colors are linear and unbounded. Every exporter clamps each
channel to [0, 1] and maps it to 0..255 with round-half-up, so a channel
of 0.5 becomes 128.

Example:
    >>> from whitted.core.canvas import Canvas
    >>> from whitted.preview.export import canvas_to_ppm
    >>> print(canvas_to_ppm(Canvas(2, 1)), end="")
    P3
    2 1
    255
    0 0 0 0 0 0
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.canvas import Canvas

# Maximum color value written to PPM headers
PPM_MAX_COLOR = 255

# Plain PPM readers are only required to handle lines this long
PPM_MAX_LINE_LENGTH = 70


def canvas_to_uint8(canvas: Canvas, gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit (height, width, 3) array.

    Args:
        canvas: Canvas with linear colors.
        gamma: Gamma encoding exponent; 1.0 leaves values linear and 2.2
            approximates sRGB.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")

    image = np.clip(canvas.to_array(), 0.0, 1.0)
    if gamma != 1.0:
        image = np.power(image, 1.0 / gamma)

    return np.floor(image * PPM_MAX_COLOR + 0.5).astype(np.uint8)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain PPM (P3) text.

    The header is "P3", the dimensions and the maximum color value, each on
    its own line. Pixel rows follow in row-major order; each canvas row
    starts a new line and lines are wrapped so none exceeds 70 characters.
    The text always ends with a newline.
    """
    values = canvas_to_uint8(canvas)

    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_COLOR)]
    for row in values:
        line = ""
        for token in map(str, row.ravel().tolist()):
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path, gamma: float = 1.0) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: Canvas to save.
        filepath: Output file path (should end in .png).
        gamma: Gamma encoding exponent, see canvas_to_uint8().
    """
    image_uint8 = canvas_to_uint8(canvas, gamma=gamma)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(str(filepath))


def compute_rmse(
    image_a: Canvas | npt.ArrayLike,
    image_b: Canvas | npt.ArrayLike,
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First canvas or image array.
        image_b: Second canvas or image array (must have the same shape).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    a = image_a.to_array() if isinstance(image_a, Canvas) else np.asarray(image_a, dtype=np.float64)
    b = image_b.to_array() if isinstance(image_b, Canvas) else np.asarray(image_b, dtype=np.float64)

    if a.shape != b.shape:
        raise ValueError(f"Image shapes must match: {a.shape} vs {b.shape}")

    diff = a - b
    return float(np.sqrt(np.mean(diff**2)))
