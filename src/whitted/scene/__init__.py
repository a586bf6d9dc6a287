"""Scene module for world management.

Components:
    world: World container, shadow tests and per-ray shading
    computations: Precomputed shading state for a hit
    demo: Demo scene factory used by the example script
"""

from .computations import Computations, prepare_computations
from .world import World, default_world

__all__ = [
    "World",
    "default_world",
    "Computations",
    "prepare_computations",
]
