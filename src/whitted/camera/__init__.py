"""Camera module for primary ray generation and rendering.

Components:
    pinhole: Pinhole camera with a view transform and the render loop
"""

from .pinhole import Camera, ProgressCallback

__all__ = ["Camera", "ProgressCallback"]
