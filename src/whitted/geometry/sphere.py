"""Unit sphere primitive with robust ray-sphere intersection.

In object space the sphere has radius 1 and sits at the origin; any other
size or position comes from its transform.

The intersection uses the robust quadratic formula from Ray Tracing Gems
to avoid catastrophic cancellation when b^2 is nearly equal to 4ac.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import ORIGIN, Tuple
from whitted.geometry.shape import Shape, ShapeKind


def solve_quadratic_robust(a: float, h: float, c: float) -> list[float]:
    """Solve a*t^2 + 2*h*t + c = 0 using a numerically stable method.

    Args:
        a: Quadratic coefficient (must be positive).
        h: Half of the linear coefficient.
        c: Constant term.

    Returns:
        [] when the discriminant is negative, otherwise [t0, t1] with
        t0 <= t1. A tangent hit yields two equal roots.
    """
    discriminant = h * h - a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)

    # Use sign of h to avoid catastrophic cancellation
    # q = -(h + sign(h) * sqrt(discriminant))
    sign_h = -1.0 if h < 0.0 else 1.0
    q = -(h + sign_h * sqrt_d)

    if abs(q) < 1e-12:
        # Fall back to standard formula for edge cases
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0
    return [t0, t1]


class Sphere(Shape):
    """A unit sphere centered at the object-space origin."""

    kind = ShapeKind.SPHERE

    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Solve |O + tD|^2 = 1 for t.

        Expanding gives a*t^2 + 2*h*t + c = 0 with:
            a = dot(D, D)
            h = dot(D, O - origin)   (half of the traditional b)
            c = dot(O - origin, O - origin) - 1
        """
        sphere_to_ray = local_ray.origin - ORIGIN
        direction = local_ray.direction

        a = direction.dot(direction)
        if a < EPSILON * EPSILON:
            # Degenerate direction: the ray goes nowhere
            return []
        h = direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        return solve_quadratic_robust(a, h, c)

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        # Outward normal: from center to the surface point
        return local_point - ORIGIN
