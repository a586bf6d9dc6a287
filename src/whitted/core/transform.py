"""Builders for the standard 4x4 affine transformations.

All rotations take radians and follow the left-handed convention used
throughout the package: looking down an axis toward the origin, a
positive rotation turns clockwise.

Transforms compose by matrix multiplication, with the rightmost applied
first:

    >>> from whitted.core.transform import rotation_x, scaling, translation
    >>> import math
    >>> transform = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
"""

from __future__ import annotations

import math

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale points and vectors per axis. A negative factor reflects."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear: each component moves in proportion to the other two.

    Args:
        xy: x moved in proportion to y.
        xz: x moved in proportion to z.
        yx: y moved in proportion to x.
        yz: y moved in proportion to z.
        zx: z moved in proportion to x.
        zy: z moved in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def radians(degrees: float) -> float:
    return degrees / 180.0 * math.pi


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the look-at matrix that orients the world relative to an eye.

    The returned matrix maps world space into camera space, where the eye
    sits at the origin looking down -z with +y up.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye is looking at.
        up: Approximate up direction; it need not be exactly orthogonal
            to the view direction.

    Returns:
        The 4x4 view transformation.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
