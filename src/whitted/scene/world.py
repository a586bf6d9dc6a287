"""World container: shapes, lights and the per-ray shading pipeline.

The world owns its shapes and lights; shapes never refer back to it. A
primary ray is resolved in three steps:

    xs = world.intersect(ray)               # every shape, sorted by t
    comps = prepare_computations(hit, ray)  # point, eye, normal, over_point
    color = world.shade_hit(comps)          # Phong per light, with shadows

color_at() chains the three and returns black on a miss.
"""

from __future__ import annotations

from dataclasses import replace

from whitted.core.color import BLACK, Color
from whitted.core.ray import Ray
from whitted.core.transform import scaling
from whitted.core.tuples import Tuple, point
from whitted.geometry.shape import Intersection, Shape, hit
from whitted.geometry.sphere import Sphere
from whitted.materials.light import PointLight
from whitted.materials.phong import Material, lighting
from whitted.scene.computations import Computations, prepare_computations


class World:
    """A collection of shapes and point lights.

    Attributes:
        shapes: Shapes in the scene, in insertion order.
        lights: Point lights. shade_hit() sums their contributions.
    """

    def __init__(
        self,
        shapes: list[Shape] | None = None,
        lights: list[PointLight] | None = None,
    ) -> None:
        self.shapes: list[Shape] = list(shapes) if shapes else []
        self.lights: list[PointLight] = list(lights) if lights else []

    @property
    def light(self) -> PointLight | None:
        """The first light, or None for an unlit world."""
        return self.lights[0] if self.lights else None

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def add_light(self, light: PointLight) -> None:
        self.lights.append(light)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape.

        Returns:
            All intersections, merged and sorted by ascending t.
        """
        xs: list[Intersection] = []
        for shape in self.shapes:
            xs.extend(shape.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed(self, point: Tuple, light: PointLight | None = None) -> bool:
        """Check whether something blocks the path from point to a light.

        Args:
            point: World-space point, normally a Computations.over_point.
            light: Light to test against; defaults to the first light.

        Returns:
            True if a hit lies strictly between the point and the light.

        Raises:
            ValueError: If no light is given and the world has none.
        """
        if light is None:
            if not self.lights:
                raise ValueError("World has no light to cast shadows from")
            light = self.lights[0]

        v = light.position - point
        distance = v.magnitude()
        direction = v.normalize()

        h = hit(self.intersect(Ray(point, direction)))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations) -> Color:
        """Shade a prepared hit, summing every light's Phong contribution."""
        color = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            color = color + lighting(
                comps.object.material,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                shadowed,
            )
        return color

    def color_at(self, ray: Ray) -> Color:
        """Color seen along a ray; black when nothing is hit."""
        h = hit(self.intersect(ray))
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray))

    def __repr__(self) -> str:
        return f"World(shapes={len(self.shapes)}, lights={len(self.lights)})"


def default_world() -> World:
    """Build the standard two-sphere test world.

    One white light at (-10, 10, -10); an outer unit sphere with color
    (0.8, 1.0, 0.6), diffuse 0.7 and specular 0.2; an inner sphere with the
    default material scaled by 0.5.
    """
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))

    outer = Sphere(
        material=replace(Material(), color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    )
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World(shapes=[outer, inner], lights=[light])
