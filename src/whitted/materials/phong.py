"""Phong reflection model.

The Phong model approximates the light leaving a surface point as the sum
of three terms:

    ambient:  a constant fraction of the surface color, standing in for
              light bounced around the scene
    diffuse:  light scattered equally in all directions, proportional to
              the cosine between the light direction and the normal
    specular: a highlight around the mirror reflection of the light,
              falling off as (reflect . eye) ** shininess

When the point is in shadow only the ambient term survives.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.materials.light import PointLight
    >>> from whitted.materials.phong import Material, lighting
    >>> light = PointLight(point(0.0, 0.0, -10.0), Color(1.0, 1.0, 1.0))
    >>> lighting(Material(), light, point(0.0, 0.0, 0.0),
    ...          vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0))
    Color(r=1.9, g=1.9, b=1.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.tuples import Tuple
from whitted.materials.light import PointLight

# Phong weights for an unconfigured material
DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0


@dataclass(frozen=True, eq=False)
class Material:
    """Surface parameters for the Phong model.

    Materials are immutable; derive variants with dataclasses.replace().

    Attributes:
        color: Surface color.
        ambient: Fraction of the light that is ambient (>= 0).
        diffuse: Strength of the diffuse term (>= 0).
        specular: Strength of the specular highlight (>= 0).
        shininess: Specular exponent; larger values give tighter
            highlights (>= 0).
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = DEFAULT_AMBIENT
    diffuse: float = DEFAULT_DIFFUSE
    specular: float = DEFAULT_SPECULAR
    shininess: float = DEFAULT_SHININESS

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and abs(self.ambient - other.ambient) < 1e-9
            and abs(self.diffuse - other.diffuse) < 1e-9
            and abs(self.specular - other.specular) < 1e-9
            and abs(self.shininess - other.shininess) < 1e-9
        )

    __hash__ = None  # type: ignore[assignment]


def lighting(
    material: Material,
    light: PointLight,
    point: Tuple,
    eyev: Tuple,
    normalv: Tuple,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point lit by a single point light.

    Args:
        material: Surface material at the point.
        light: The light source.
        point: The surface point being shaded (world space).
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: When True, only the ambient contribution is returned.

    Returns:
        The reflected color. Not clamped.
    """
    # Combine the surface color with the light's color/intensity
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()

    # Cosine between light and normal; negative means the light is on the
    # other side of the surface
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    # Cosine between reflection and eye; negative means the light reflects
    # away from the eye
    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
