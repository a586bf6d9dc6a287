"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Homogeneous points and vectors with affine arithmetic
    color: RGB color triples
    matrix: Square matrices, determinants and inverses
    transform: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure
    canvas: Pixel buffer written by the renderer
    integrator: Taichi kernel that renders a whole world in parallel

The Python-side classes are the reference implementation of every
algorithm; the integrator re-expresses the same shading model as Taichi
functions for data-parallel execution on the CPU.
"""

from .canvas import Canvas
from .color import BLACK, WHITE, Color
from .matrix import IDENTITY, Matrix, identity
from .ray import Ray, position
from .transform import (
    radians,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import (
    ORIGIN,
    Tuple,
    approx_equal,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

__all__ = [
    # Algebra
    "Tuple",
    "point",
    "vector",
    "approx_equal",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "reflect",
    "ORIGIN",
    "Color",
    "BLACK",
    "WHITE",
    # Matrices and transforms
    "Matrix",
    "identity",
    "IDENTITY",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "radians",
    "view_transform",
    # Rays and output
    "Ray",
    "position",
    "Canvas",
]
