"""Precomputed shading state for a single hit.

prepare_computations() turns an Intersection plus the ray that produced it
into everything shade_hit() needs: the world-space point, the eye and
normal vectors, whether the eye is inside the object, and the over_point
used as the origin of shadow rays.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.shape import Intersection, Shape


@dataclass(frozen=True)
class Computations:
    """Shading inputs derived from an intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: Shape that was hit.
        point: World-space hit point.
        eyev: Unit vector from the point back toward the eye.
        normalv: Unit surface normal, flipped to face the eye when inside.
        inside: True when the eye is inside the object.
        over_point: point nudged along normalv by EPSILON.
    """

    t: float
    object: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    """Compute shading state for an intersection.

    Args:
        intersection: The hit being shaded.
        ray: The ray that produced it.

    Returns:
        A Computations record.
    """
    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.object.normal_at(point)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    over_point = point + normalv * EPSILON

    return Computations(
        t=intersection.t,
        object=intersection.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=over_point,
    )
