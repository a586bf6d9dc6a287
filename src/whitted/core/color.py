"""RGB color values.

Colors are plain additive/multiplicative triples. They are never clamped
here: lighting can legitimately push a channel above 1.0 (a specular
highlight on a bright surface) and clamping to a displayable range is the
job of the export adapters in whitted.preview.export.
"""

from __future__ import annotations

from whitted.config import EPSILON


class Color:
    """An immutable (r, g, b) triple with approximate equality.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.
    """

    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float) -> None:
        object.__setattr__(self, "r", float(r))
        object.__setattr__(self, "g", float(g))
        object.__setattr__(self, "b", float(b))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Color is immutable")

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the Hadamard (component-wise) product
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            abs(self.r - other.r) < EPSILON
            and abs(self.g - other.g) < EPSILON
            and abs(self.b - other.b) < EPSILON
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
