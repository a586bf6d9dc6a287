"""Ray data structure.

A ray is an origin point and a direction vector. Shapes intersect rays in
their own object space, so rays are routinely carried through a shape's
inverse transform with Ray.transform().

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5) == point(4.5, 3.0, 4.0)
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not normalized
            automatically: transforming a ray into a scaled object's space
            changes its length, and intersection t values rely on that.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction multiplied by matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None  # type: ignore[assignment]


def position(ray: Ray, t: float) -> Tuple:
    return ray.position(t)
