"""Demo scene configuration.

This module provides a factory for a small showcase scene: a floor, a back
wall, and three spheres of different sizes and colors lit by a single point
light. It exercises every feature of the renderer (both shape kinds,
non-uniform transforms, Phong highlights and hard shadows) and is what
examples/render_scene.py draws.

Example:
    >>> from whitted.scene.demo import create_demo_scene
    >>> world, camera = create_demo_scene(200, 100)
    >>> canvas = camera.render(world)
"""

from dataclasses import dataclass, replace
from math import pi

from whitted.camera.pinhole import Camera
from whitted.core.color import Color
from whitted.core.transform import rotation_x, scaling, translation, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.light import PointLight
from whitted.materials.phong import Material
from whitted.scene.world import World

# =============================================================================
# Demo Scene Parameters
# =============================================================================


@dataclass
class DemoSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        light_position: World-space position of the point light.
        light_color: RGB intensity of the light.
        floor_color: RGB color of the floor and back wall.
        middle_color: RGB color of the large center sphere.
        right_color: RGB color of the half-size right sphere.
        left_color: RGB color of the small left sphere.
        field_of_view: Camera field of view in radians.

    Example:
        >>> params = DemoSceneParams(light_color=(1.0, 0.9, 0.8))  # Warm light
        >>> world, camera = create_demo_scene(100, 50, params)
    """

    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    floor_color: tuple[float, float, float] = (1.0, 0.9, 0.9)
    middle_color: tuple[float, float, float] = (0.1, 1.0, 0.5)
    right_color: tuple[float, float, float] = (0.5, 1.0, 0.1)
    left_color: tuple[float, float, float] = (1.0, 0.8, 0.1)
    field_of_view: float = pi / 3.0


# =============================================================================
# Demo Scene Constants
# =============================================================================

# Distance from the origin to the back wall along +z
BACK_WALL_DISTANCE = 10.0

# Camera placement
CAMERA_FROM = (0.0, 1.5, -5.0)
CAMERA_TO = (0.0, 1.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)


# =============================================================================
# Demo Scene Factory
# =============================================================================


def create_demo_scene(
    width: int,
    height: int,
    params: DemoSceneParams | None = None,
) -> tuple[World, Camera]:
    """Create the demo scene and a camera looking at it.

    Args:
        width: Horizontal resolution of the camera in pixels.
        height: Vertical resolution of the camera in pixels.
        params: Optional scene customization. Defaults to DemoSceneParams().

    Returns:
        Tuple of (world, camera).
    """
    if params is None:
        params = DemoSceneParams()

    world = World()

    # Matte floor and back wall share one material
    wall_material = replace(Material(), color=Color(*params.floor_color), specular=0.0)

    floor = Plane(material=wall_material)
    world.add_shape(floor)

    back_wall = Plane(
        transform=translation(0.0, 0.0, BACK_WALL_DISTANCE) @ rotation_x(pi / 2.0),
        material=wall_material,
    )
    world.add_shape(back_wall)

    # Large sphere in the middle, resting on the floor
    middle = Sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=replace(
            Material(), color=Color(*params.middle_color), diffuse=0.7, specular=0.3
        ),
    )
    world.add_shape(middle)

    # Half-size sphere on the right
    right = Sphere(
        transform=translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        material=replace(
            Material(), color=Color(*params.right_color), diffuse=0.7, specular=0.3
        ),
    )
    world.add_shape(right)

    # Small sphere on the left
    left = Sphere(
        transform=translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        material=replace(
            Material(), color=Color(*params.left_color), diffuse=0.7, specular=0.3
        ),
    )
    world.add_shape(left)

    world.add_light(PointLight(point(*params.light_position), Color(*params.light_color)))

    camera = Camera(
        width,
        height,
        params.field_of_view,
        transform=view_transform(point(*CAMERA_FROM), point(*CAMERA_TO), vector(*CAMERA_UP)),
    )

    return world, camera
