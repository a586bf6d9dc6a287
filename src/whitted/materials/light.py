"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.tuples import Tuple


@dataclass(frozen=True, eq=False)
class PointLight:
    """A light with no size, emitting equally in all directions.

    Attributes:
        position: Location of the light in world space (a point).
        intensity: Color and brightness of the emitted light.
    """

    position: Tuple
    intensity: Color

    def __post_init__(self) -> None:
        if not self.position.is_point:
            raise ValueError(f"Light position must be a point, got {self.position!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None  # type: ignore[assignment]
