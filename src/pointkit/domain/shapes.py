"""Shapes reported by the geometry engine.

Both types are produced only by the engine adapter; nothing in pointkit
computes them directly.
"""

from dataclasses import dataclass
from typing import Any

from pointkit.domain.point import Point


@dataclass(frozen=True, slots=True)
class Ellipse:
    """A rotated ellipse.

    Attributes:
        center: Center of the ellipse
        width: Full length of the first axis
        height: Full length of the second axis
        angle: Rotation of the first axis in degrees
    """

    center: Point[float]
    width: float
    height: float
    angle: float

    @property
    def semi_axes(self) -> tuple[float, float]:
        """Half axis lengths as (a, b)."""
        return (self.width / 2.0, self.height / 2.0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "center": self.center.to_dict(),
            "width": self.width,
            "height": self.height,
            "angle": self.angle,
        }


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned integer rectangle.

    Attributes:
        x: Left edge
        y: Top edge in image coordinates (minimum y)
        width: Horizontal extent
        height: Vertical extent
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, point: Point[Any]) -> bool:
        """Check whether a point lies inside or on the rectangle boundary."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
