"""Canvas: the pixel buffer a render writes into.

The buffer is a row-major float64 NumPy array of shape (height, width, 3),
initialized to black. Values are stored exactly as written; clamping to a
displayable range happens in whitted.preview.export.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.config import EPSILON
from whitted.core.color import Color
from whitted.errors import CanvasBoundsError


class Canvas:
    """A width x height grid of colors.

    Attributes:
        width: Number of columns (x ranges over [0, width)).
        height: Number of rows (y ranges over [0, height)).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.float64)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Canvas:
        """Build a canvas from a (height, width, 3) array of linear colors."""
        data = np.asarray(array, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (height, width, 3), got {data.shape}")
        canvas = cls(data.shape[1], data.shape[0])
        canvas._pixels[...] = data
        return canvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise CanvasBoundsError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store color at column x, row y.

        Raises:
            CanvasBoundsError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.r, color.g, color.b)

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the color at column x, row y.

        Raises:
            CanvasBoundsError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(r, g, b)

    def fill(self, color: Color) -> None:
        self._pixels[...] = (color.r, color.g, color.b)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixel buffer, shape (height, width, 3)."""
        return self._pixels.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        if (self._width, self._height) != (other._width, other._height):
            return False
        return bool(np.all(np.abs(self._pixels - other._pixels) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
