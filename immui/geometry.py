"""Basic value types: vectors, rectangles and colours."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

__all__ = [
    "Vector2f",
    "Rect",
    "Color",
    "v2",
    "v2xx",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "TRANSPARENT",
]


@dataclass(frozen=True)
class Vector2f:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)


def v2(x: float, y: float) -> Vector2f:
    """Build a vector from its two components."""
    return Vector2f(x, y)


def v2xx(x: float) -> Vector2f:
    """Build a vector with both components set to ``x``."""
    return Vector2f(x, x)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def has_point(self, point: Vector2f) -> bool:
        """Return whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {field.name}={value} is outside 0..255")

    def with_alpha(self, alpha: int) -> Color:
        """Return a copy of this colour with a different alpha channel."""
        return replace(self, a=alpha)


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)