"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space looking down -z, with a
virtual canvas one unit in front of it. Its transform is a view transform
(see whitted.core.transform.view_transform) mapping world space into camera
space; rays are generated in camera space and carried back into the world
through the inverse of that transform.

Canvas geometry is derived once at construction:

    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize
    aspect >= 1: half_width = half_view,          half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view
    pixel_size = 2 * half_width / hsize

Example:
    >>> from math import pi
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.scene.world import default_world
    >>> camera = Camera(160, 120, pi / 3)
    >>> canvas = camera.render(default_world())
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from whitted.config import DEFAULT_BACKEND, Backend
from whitted.core.canvas import Canvas
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import point

if TYPE_CHECKING:
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera producing one ray per pixel center.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Horizontal (or vertical, for tall canvases) angle of
            view in radians.
        transform: World-to-camera view transform.
        half_width: Half the width of the canvas one unit in front of the eye.
        half_height: Half the height of that canvas.
        pixel_size: World-space size of one pixel on that canvas.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"field_of_view must be in (0, pi), got {field_of_view}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self.transform = transform if transform is not None else IDENTITY

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = (self._half_width * 2.0) / hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        inverse = matrix.inverse()
        self._transform = matrix
        self._inverse = inverse

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Build the world-space ray through the center of pixel (px, py).

        Args:
            px: Column index, 0 at the left edge.
            py: Row index, 0 at the top edge.

        Returns:
            A ray from the camera origin with a normalized direction.
        """
        # Offset from the canvas edge to the pixel's center
        xoffset = (px + 0.5) * self._pixel_size
        yoffset = (py + 0.5) * self._pixel_size

        # The camera looks toward -z, so +x is to the *left*
        world_x = self._half_width - xoffset
        world_y = self._half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalize()

        return Ray(origin, direction)

    def render(
        self,
        world: World,
        *,
        backend: Backend = DEFAULT_BACKEND,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world into a new canvas.

        Args:
            world: Scene to render.
            backend: "python" runs the reference loop one pixel at a time;
                "taichi" packs the scene and runs the parallel CPU kernel.
            callback: Optional callback(rows_done, rows_total). The python
                backend calls it after each row; the taichi backend calls
                it once when the kernel finishes.

        Returns:
            A canvas of hsize x vsize pixels.

        Raises:
            ValueError: If backend is not recognized.
        """
        if backend not in ("python", "taichi"):
            raise ValueError(f"Unknown render backend: {backend!r}")

        logger.debug(
            "Rendering %dx%d with %s backend (%d shapes, %d lights)",
            self._hsize,
            self._vsize,
            backend,
            len(world.shapes),
            len(world.lights),
        )
        start = time.perf_counter()

        if backend == "taichi":
            # Imported lazily so the Python path never touches the Taichi runtime
            from whitted.core.integrator import get_integrator

            canvas = get_integrator().render(world, self)
            if callback is not None:
                callback(self._vsize, self._vsize)
        else:
            canvas = Canvas(self._hsize, self._vsize)
            for y in range(self._vsize):
                for x in range(self._hsize):
                    canvas.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))
                if callback is not None:
                    callback(y + 1, self._vsize)

        logger.debug("Render finished in %.3fs", time.perf_counter() - start)
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view}, transform={self._transform!r})"
        )
