"""Geometry module for shape primitives.

This module provides geometric primitives and intersection algorithms:

Components:
    shape: Shape base class, Intersection records and hit selection
    sphere: Unit sphere with robust ray-sphere intersection
    plane: Infinite xz-plane

Ray-object intersection follows the pattern:
    xs = shape.intersect(world_ray)   # sorted Intersection list
    i = hit(xs)                        # nearest non-negative t, or None
"""

from .plane import Plane
from .shape import Intersection, Shape, ShapeKind, hit, intersections
from .sphere import Sphere, solve_quadratic_robust

__all__ = [
    "Shape",
    "ShapeKind",
    "Intersection",
    "intersections",
    "hit",
    "Sphere",
    "solve_quadratic_robust",
    "Plane",
]
