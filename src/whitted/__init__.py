"""A Whitted-style ray tracer with a Taichi-accelerated render backend.

This package renders scenes of spheres and planes lit by point lights,
using Phong shading and hard shadows. A pure-Python reference loop and a
parallel Taichi CPU kernel produce the same image.

Subpackages:
    core: Tuples, colors, matrices, transforms, rays, canvas and the Taichi integrator
    geometry: Shape primitives and intersection algorithms
    materials: Phong material model and point lights
    scene: World container, shading pipeline and demo scene
    camera: Pinhole camera with ray generation and the render loop
    preview: PPM and PNG export
"""

__version__ = "0.1.0"
