"""Infinite plane primitive.

In object space the plane is the xz-plane through the origin, with its
normal pointing along +y. Transforms tilt and move it into place.
"""

from __future__ import annotations

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, vector
from whitted.geometry.shape import Shape, ShapeKind

_PLANE_NORMAL = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The object-space xz-plane (y = 0)."""

    kind = ShapeKind.PLANE

    def local_intersect(self, local_ray: Ray) -> list[float]:
        # Rays parallel to the plane (including rays lying in it) never hit
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return _PLANE_NORMAL
