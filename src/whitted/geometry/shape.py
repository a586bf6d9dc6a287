"""Shared shape contract: transforms, intersections and normals.

Every shape lives in its own object space (a unit sphere at the origin, the
xz-plane, ...) and carries a transform that places it in the world. The
Shape base class does the world/object conversion once for all variants:

    intersect(world_ray):
        local_ray = world_ray transformed by inverse(transform)
        ts = local_intersect(local_ray)          # variant-specific
        return sorted Intersection(t, shape) list

    normal_at(world_point):
        local_point = inverse(transform) @ world_point
        local_normal = local_normal_at(local_point)  # variant-specific
        world_normal = transpose(inverse(transform)) @ local_normal
        return normalize(world_normal with w = 0)

Using the transpose of the inverse keeps normals perpendicular to the
surface under non-uniform scaling. Both matrices are computed once, when
the transform is assigned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.materials.phong import Material


class ShapeKind(IntEnum):
    """Enumeration of supported shape variants.

    Used by the Taichi integrator to dispatch to the right local
    intersection routine.
    """

    SPHERE = 0
    PLANE = 1


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray parameter t at which a ray meets a shape.

    Attributes:
        t: Distance along the ray, in units of the ray direction.
        object: The shape that was hit.
    """

    t: float
    object: Shape

    def __lt__(self, other: Intersection) -> bool:
        return self.t < other.t

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.object is other.object and self.t == other.t

    __hash__ = None  # type: ignore[assignment]


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by ascending t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection: the smallest non-negative t.

    Intersections with t < 0 lie behind the ray origin and are ignored.

    Args:
        xs: Intersections in any order.

    Returns:
        The hit, or None if every intersection is behind the origin.
    """
    best = None
    for i in xs:
        if i.t >= 0.0 and (best is None or i.t < best.t):
            best = i
    return best


class Shape(ABC):
    """Base class for all shapes.

    Subclasses implement local_intersect() and local_normal_at() in object
    space; everything involving the transform is handled here.

    Attributes:
        transform: Object-to-world matrix. Assigning it recomputes the
            cached inverse and normal matrix.
        material: Surface material, owned by value.
    """

    kind: ClassVar[ShapeKind]

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.transform = transform if transform is not None else IDENTITY
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        # Raises SingularMatrixError before any state is replaced
        inverse = matrix.inverse()
        self._transform = matrix
        self._inverse = inverse
        self._normal_matrix = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @property
    def normal_matrix(self) -> Matrix:
        """Transpose of the inverse transform."""
        return self._normal_matrix

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections sorted by ascending t; possibly empty.
        """
        local_ray = ray.transform(self._inverse)
        return [Intersection(t, self) for t in sorted(self.local_intersect(local_ray))]

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a world-space point on the shape."""
        local_point = self._inverse @ world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._normal_matrix @ local_normal
        # The normal matrix can leave garbage in w when the transform
        # translates; a normal is always a vector
        return Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Return the t values where an object-space ray meets the shape."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Return the object-space normal at an object-space point."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r}, material={self.material!r})"
