"""Homogeneous tuples: points, vectors and their arithmetic.

A Tuple carries four components (x, y, z, w). Points have w = 1 and
vectors have w = 0, which lets a single 4x4 matrix translate points while
leaving directions untouched.

The arithmetic operators enforce the affine rules:

    point - point   -> vector
    point + vector  -> point
    point - vector  -> point
    vector +/- vector -> vector

Anything else (point + point, vector - point, or a vector-only operation
such as magnitude applied to a point) raises InvalidTupleOperationError.

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(3.0, 2.0, 1.0)
    >>> v = vector(5.0, 6.0, 7.0)
    >>> p - v
    Tuple(x=-2.0, y=-4.0, z=-6.0, w=1.0)
    >>> vector(4.0, 0.0, 0.0).normalize()
    Tuple(x=1.0, y=0.0, z=0.0, w=0.0)
"""

from __future__ import annotations

import math

from whitted.config import EPSILON
from whitted.errors import InvalidTupleOperationError


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Compare two floats with an absolute tolerance."""
    return abs(a - b) < epsilon


class Tuple:
    """An immutable homogeneous 4-tuple.

    Equality is approximate (within EPSILON per component), so tuples are
    deliberately unhashable.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: 1.0 for points, 0.0 for vectors.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def is_point(self) -> bool:
        return approx_equal(self.w, 1.0)

    @property
    def is_vector(self) -> bool:
        return approx_equal(self.w, 0.0)

    def _require_vector(self, operation: str) -> None:
        if not self.is_vector:
            raise InvalidTupleOperationError(f"{operation} is only defined for vectors, got {self!r}")

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        if self.is_point and other.is_point:
            raise InvalidTupleOperationError("Cannot add two points")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        if self.is_vector and other.is_point:
            raise InvalidTupleOperationError("Cannot subtract a point from a vector")
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        self._require_vector("Negation")
        return Tuple(-self.x, -self.y, -self.z, 0.0)

    def __mul__(self, scalar: float) -> Tuple:
        if isinstance(scalar, Tuple):
            return NotImplemented
        self._require_vector("Scalar multiplication")
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, 0.0)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if isinstance(scalar, Tuple):
            return NotImplemented
        self._require_vector("Scalar division")
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"

    # -------------------------------------------------------------------------
    # Vector operations
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """Euclidean length of a vector."""
        self._require_vector("Magnitude")
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple:
        """Return a unit vector in the same direction.

        A vector shorter than EPSILON cannot be given a direction and is
        returned unchanged as a zero vector.
        """
        length = self.magnitude()
        if length < EPSILON:
            return Tuple(0.0, 0.0, 0.0, 0.0)
        return Tuple(self.x / length, self.y / length, self.z / length, 0.0)

    def dot(self, other: Tuple) -> float:
        """Dot product of two vectors."""
        self._require_vector("Dot product")
        other._require_vector("Dot product")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors."""
        self._require_vector("Cross product")
        other._require_vector("Cross product")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a (unit) normal: v - n * 2 * dot(v, n)."""
        return self - normal * 2.0 * self.dot(normal)


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)


# Module-level helpers mirroring the method forms


def magnitude(v: Tuple) -> float:
    return v.magnitude()


def normalize(v: Tuple) -> Tuple:
    return v.normalize()


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)


def reflect(incident: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident.reflect(normal)


ORIGIN = point(0.0, 0.0, 0.0)
