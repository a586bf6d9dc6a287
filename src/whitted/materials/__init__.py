"""Materials module for surface shading.

Components:
    phong: Material parameters and the Phong lighting computation
    light: Point light sources

Only the local Phong model is provided: reflection, refraction and other
recursive material effects are not part of this renderer.
"""

from .light import PointLight
from .phong import (
    DEFAULT_AMBIENT,
    DEFAULT_DIFFUSE,
    DEFAULT_SHININESS,
    DEFAULT_SPECULAR,
    Material,
    lighting,
)

__all__ = [
    "Material",
    "lighting",
    "PointLight",
    "DEFAULT_AMBIENT",
    "DEFAULT_DIFFUSE",
    "DEFAULT_SPECULAR",
    "DEFAULT_SHININESS",
]
