"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Goes through whitted.config.init_taichi() so that the integrator's own
    init call is a no-op and never re-initializes the runtime.
    """
    from whitted.config import init_taichi

    init_taichi()
    yield


@pytest.fixture
def default_world():
    """The standard two-sphere world."""
    from whitted.scene.world import default_world as make_default_world

    return make_default_world()


@pytest.fixture
def golden_camera():
    """11x11 camera looking at the origin from (0, 0, -5)."""
    from math import pi

    from whitted.camera.pinhole import Camera
    from whitted.core.transform import view_transform
    from whitted.core.tuples import point, vector

    return Camera(
        11,
        11,
        pi / 2,
        transform=view_transform(point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)),
    )
