"""Taichi render backend for the Whitted-style ray tracer.

This module runs the same per-pixel pipeline as World.color_at(), but as a
single Taichi kernel parallelized over every pixel on the CPU:

    primary ray -> nearest hit -> normal -> over_point -> per-light
    shadow test + Phong lighting -> color buffer

The world and camera are packed into Structure-of-Arrays Taichi fields
before each render:

    shape kind, inverse transform, normal matrix     (per shape)
    material color, (ambient, diffuse, specular, shininess)  (per shape)
    light position, light intensity                  (per light)
    camera inverse, half width/height, pixel size    (scalars)

Every pixel writes only its own cell of the color buffer, so the kernel
needs no synchronization. Arithmetic is float64 (see
whitted.config.init_taichi) so results match the Python loop to within
rounding.

Example:
    >>> from math import pi
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.integrator import get_integrator
    >>> from whitted.scene.world import default_world
    >>> canvas = get_integrator().render(default_world(), Camera(64, 48, pi / 3))
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti
import taichi.math as tm

from whitted.config import EPSILON, init_taichi
from whitted.core.canvas import Canvas
from whitted.geometry.shape import ShapeKind

if TYPE_CHECKING:
    from whitted.camera.pinhole import Camera
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for 3D vectors (float64 once init_taichi has run)
vec3 = tm.vec3
vec4 = tm.vec4

# =============================================================================
# Backend Limits
# =============================================================================

# Maximum shapes and lights (preallocated to avoid kernel recompilation)
MAX_SHAPES = 256
MAX_LIGHTS = 16

# Maximum supported image dimensions
MAX_IMAGE_WIDTH = 2048
MAX_IMAGE_HEIGHT = 2048

# Sentinel for "no hit yet"
T_MAX = 1e300

# Below this |q| the robust quadratic falls back to the textbook formula
QUADRATIC_EPSILON = 1e-12


@ti.data_oriented
class TaichiIntegrator:
    """Parallel CPU renderer backed by Taichi fields.

    Fields are allocated once per instance and reused across renders;
    use get_integrator() to share one instance per process. An instance
    is not safe to use from several Python threads at once.
    """

    def __init__(self) -> None:
        init_taichi()

        # Shape storage: Structure of Arrays layout
        self._num_shapes = ti.field(dtype=ti.i32, shape=())
        self._kind = ti.field(dtype=ti.i32, shape=MAX_SHAPES)
        self._inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=MAX_SHAPES)
        self._normal_matrix = ti.Matrix.field(4, 4, dtype=ti.f64, shape=MAX_SHAPES)
        self._color = ti.Vector.field(3, dtype=ti.f64, shape=MAX_SHAPES)
        # (ambient, diffuse, specular, shininess)
        self._params = ti.Vector.field(4, dtype=ti.f64, shape=MAX_SHAPES)

        # Light storage
        self._num_lights = ti.field(dtype=ti.i32, shape=())
        self._light_position = ti.Vector.field(3, dtype=ti.f64, shape=MAX_LIGHTS)
        self._light_intensity = ti.Vector.field(3, dtype=ti.f64, shape=MAX_LIGHTS)

        # Camera state
        self._camera_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=())
        self._half_width = ti.field(dtype=ti.f64, shape=())
        self._half_height = ti.field(dtype=ti.f64, shape=())
        self._pixel_size = ti.field(dtype=ti.f64, shape=())

        # Color buffer indexed [x, y] (preallocated to max size)
        self._color_buffer = ti.Vector.field(
            3, dtype=ti.f64, shape=(MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT)
        )

    # =========================================================================
    # Scene Packing (Python-side)
    # =========================================================================

    def load_world(self, world: "World") -> None:
        """Pack the world's shapes and lights into Taichi fields.

        Raises:
            ValueError: If the world exceeds MAX_SHAPES or MAX_LIGHTS, or
                contains a shape the kernel cannot intersect.
        """
        num_shapes = len(world.shapes)
        num_lights = len(world.lights)
        if num_shapes > MAX_SHAPES:
            raise ValueError(f"World has {num_shapes} shapes, maximum supported is {MAX_SHAPES}")
        if num_lights > MAX_LIGHTS:
            raise ValueError(f"World has {num_lights} lights, maximum supported is {MAX_LIGHTS}")

        kinds = np.zeros(MAX_SHAPES, dtype=np.int32)
        inverses = np.zeros((MAX_SHAPES, 4, 4), dtype=np.float64)
        normals = np.zeros((MAX_SHAPES, 4, 4), dtype=np.float64)
        colors = np.zeros((MAX_SHAPES, 3), dtype=np.float64)
        params = np.zeros((MAX_SHAPES, 4), dtype=np.float64)

        for i, shape in enumerate(world.shapes):
            kind = getattr(type(shape), "kind", None)
            if not isinstance(kind, ShapeKind):
                raise ValueError(
                    f"Shape type {type(shape).__name__} is not supported by the taichi backend"
                )
            material = shape.material
            kinds[i] = int(kind)
            inverses[i] = shape.inverse.to_numpy()
            normals[i] = shape.normal_matrix.to_numpy()
            colors[i] = material.color.as_tuple()
            params[i] = (material.ambient, material.diffuse, material.specular, material.shininess)

        positions = np.zeros((MAX_LIGHTS, 3), dtype=np.float64)
        intensities = np.zeros((MAX_LIGHTS, 3), dtype=np.float64)
        for i, light in enumerate(world.lights):
            positions[i] = (light.position.x, light.position.y, light.position.z)
            intensities[i] = light.intensity.as_tuple()

        self._kind.from_numpy(kinds)
        self._inverse.from_numpy(inverses)
        self._normal_matrix.from_numpy(normals)
        self._color.from_numpy(colors)
        self._params.from_numpy(params)
        self._num_shapes[None] = num_shapes

        self._light_position.from_numpy(positions)
        self._light_intensity.from_numpy(intensities)
        self._num_lights[None] = num_lights

        logger.debug("Loaded %d shapes and %d lights", num_shapes, num_lights)

    def load_camera(self, camera: "Camera") -> None:
        """Copy the camera's inverse transform and canvas geometry.

        Raises:
            ValueError: If the camera resolution exceeds the color buffer.
        """
        if camera.hsize > MAX_IMAGE_WIDTH or camera.vsize > MAX_IMAGE_HEIGHT:
            raise ValueError(
                f"Image dimensions ({camera.hsize}x{camera.vsize}) exceed maximum supported "
                f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
            )

        self._camera_inverse[None] = camera.inverse.to_list()
        self._half_width[None] = camera.half_width
        self._half_height[None] = camera.half_height
        self._pixel_size[None] = camera.pixel_size

    # =========================================================================
    # Ray-Shape Intersection
    # =========================================================================

    @ti.func
    def _normalize(self, v: vec3) -> vec3:
        """Normalize v; vectors shorter than EPSILON become zero."""
        length = v.norm()
        result = vec3(0.0, 0.0, 0.0)
        if length >= EPSILON:
            result = v / length
        return result

    @ti.func
    def _intersect_shape(self, s: ti.i32, origin: vec3, direction: vec3):
        """Intersect a world-space ray with shape s.

        Returns:
            A tuple of (count, t0, t1) where count is the number of valid
            roots (0, 1 or 2) and t0 <= t1 when count == 2.
        """
        inv = self._inverse[s]
        o = inv @ vec4(origin[0], origin[1], origin[2], 1.0)
        d = inv @ vec4(direction[0], direction[1], direction[2], 0.0)
        local_origin = vec3(o[0], o[1], o[2])
        local_direction = vec3(d[0], d[1], d[2])

        count = 0
        t0 = 0.0
        t1 = 0.0
        kind = self._kind[s]

        if kind == int(ShapeKind.SPHERE):
            a = local_direction.dot(local_direction)
            h = local_direction.dot(local_origin)
            c = local_origin.dot(local_origin) - 1.0
            discriminant = h * h - a * c
            if a >= EPSILON * EPSILON and discriminant >= 0.0:
                sqrt_d = tm.sqrt(discriminant)
                sign_h = 1.0
                if h < 0.0:
                    sign_h = -1.0
                q = -(h + sign_h * sqrt_d)
                if ti.abs(q) < QUADRATIC_EPSILON:
                    t0 = (-h - sqrt_d) / a
                    t1 = (-h + sqrt_d) / a
                else:
                    t0 = q / a
                    t1 = c / q
                if t0 > t1:
                    tmp = t0
                    t0 = t1
                    t1 = tmp
                count = 2

        elif kind == int(ShapeKind.PLANE):
            if ti.abs(local_direction[1]) >= EPSILON:
                t0 = -local_origin[1] / local_direction[1]
                t1 = t0
                count = 1

        return count, t0, t1

    @ti.func
    def _hit(self, origin: vec3, direction: vec3):
        """Find the nearest non-negative intersection over all shapes.

        Returns:
            A tuple of (shape_index, t); shape_index is -1 on a miss.
        """
        best_s = -1
        best_t = T_MAX
        for s in range(self._num_shapes[None]):
            count, t0, t1 = self._intersect_shape(s, origin, direction)
            if count >= 1 and t0 >= 0.0 and t0 < best_t:
                best_s = s
                best_t = t0
            if count >= 2 and t1 >= 0.0 and t1 < best_t:
                best_s = s
                best_t = t1
        return best_s, best_t

    @ti.func
    def _normal_at(self, s: ti.i32, world_point: vec3) -> vec3:
        p = self._inverse[s] @ vec4(world_point[0], world_point[1], world_point[2], 1.0)
        local_normal = vec3(0.0, 1.0, 0.0)
        if self._kind[s] == int(ShapeKind.SPHERE):
            local_normal = vec3(p[0], p[1], p[2])
        n = self._normal_matrix[s] @ vec4(local_normal[0], local_normal[1], local_normal[2], 0.0)
        return self._normalize(vec3(n[0], n[1], n[2]))

    # =========================================================================
    # Shading
    # =========================================================================

    @ti.func
    def _is_shadowed(self, point: vec3, light: ti.i32) -> ti.i32:
        v = self._light_position[light] - point
        distance = v.norm()
        direction = self._normalize(v)
        s, t = self._hit(point, direction)
        shadowed = 0
        if s >= 0 and t < distance:
            shadowed = 1
        return shadowed

    @ti.func
    def _lighting(
        self, s: ti.i32, light: ti.i32, point: vec3, eyev: vec3, normalv: vec3, in_shadow: ti.i32
    ) -> vec3:
        """Phong reflection of one light off shape s at point."""
        params = self._params[s]
        intensity = self._light_intensity[light]
        effective_color = self._color[s] * intensity
        ambient = effective_color * params[0]
        diffuse = vec3(0.0, 0.0, 0.0)
        specular = vec3(0.0, 0.0, 0.0)

        if in_shadow == 0:
            lightv = self._normalize(self._light_position[light] - point)
            light_dot_normal = lightv.dot(normalv)
            if light_dot_normal >= 0.0:
                diffuse = effective_color * params[1] * light_dot_normal
                # reflect(-lightv, normalv)
                reflectv = -lightv - normalv * 2.0 * (-lightv).dot(normalv)
                reflect_dot_eye = reflectv.dot(eyev)
                if reflect_dot_eye > 0.0:
                    factor = tm.pow(reflect_dot_eye, params[3])
                    specular = intensity * params[2] * factor

        return ambient + diffuse + specular

    @ti.func
    def _color_at(self, origin: vec3, direction: vec3) -> vec3:
        color = vec3(0.0, 0.0, 0.0)
        s, t = self._hit(origin, direction)
        if s >= 0:
            point = origin + direction * t
            eyev = -direction
            normalv = self._normal_at(s, point)
            # Eye inside the object: flip the normal toward the eye
            if normalv.dot(eyev) < 0.0:
                normalv = -normalv
            over_point = point + normalv * EPSILON
            for light in range(self._num_lights[None]):
                shadowed = self._is_shadowed(over_point, light)
                color += self._lighting(s, light, over_point, eyev, normalv, shadowed)
        return color

    # =========================================================================
    # Camera Rays and Kernel
    # =========================================================================

    @ti.func
    def _ray_for_pixel(self, px: ti.i32, py: ti.i32):
        xoffset = (px + 0.5) * self._pixel_size[None]
        yoffset = (py + 0.5) * self._pixel_size[None]
        world_x = self._half_width[None] - xoffset
        world_y = self._half_height[None] - yoffset

        inv = self._camera_inverse[None]
        pixel = inv @ vec4(world_x, world_y, -1.0, 1.0)
        o = inv @ vec4(0.0, 0.0, 0.0, 1.0)
        origin = vec3(o[0], o[1], o[2])
        direction = self._normalize(vec3(pixel[0], pixel[1], pixel[2]) - origin)
        return origin, direction

    @ti.kernel
    def _render_kernel(self, width: ti.i32, height: ti.i32):
        for x, y in ti.ndrange(width, height):
            origin, direction = self._ray_for_pixel(x, y)
            self._color_buffer[x, y] = self._color_at(origin, direction)

    # =========================================================================
    # Public Rendering API
    # =========================================================================

    def render(self, world: "World", camera: "Camera") -> Canvas:
        """Render a world through a camera.

        Args:
            world: Scene to render.
            camera: Camera defining resolution and view.

        Returns:
            A canvas of camera.hsize x camera.vsize pixels.

        Raises:
            ValueError: If the scene or resolution exceeds backend limits.
        """
        self.load_world(world)
        self.load_camera(camera)

        width, height = camera.hsize, camera.vsize
        self._render_kernel(width, height)

        # Extract active region and go from [x, y] to (height, width, 3)
        image = self._color_buffer.to_numpy()[:width, :height, :]
        return Canvas.from_array(np.transpose(image, (1, 0, 2)))


_integrator: TaichiIntegrator | None = None


def get_integrator() -> TaichiIntegrator:
    """Return the process-wide integrator, creating it on first use."""
    global _integrator
    if _integrator is None:
        _integrator = TaichiIntegrator()
    return _integrator
