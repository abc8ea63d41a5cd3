"""Line segment type built from two points.

A segment doubles as the supporting line through its endpoints: the
interpolator evaluates that line to recover y for an arbitrary x.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic

from pointkit.domain.point import N, Point
from pointkit.exceptions import InvalidArgumentError, UndefinedInterpolationError


@dataclass(frozen=True, slots=True)
class LineSegment(Generic[N]):
    """A line segment between two points.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point[N]
    end: Point[N]

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def direction(self) -> tuple[float, float]:
        """Unit vector pointing from start to end.

        Raises:
            InvalidArgumentError: If the segment has zero length
        """
        length = self.length
        if length == 0.0:
            raise InvalidArgumentError(
                "Zero-length segment has no direction", segment=self
            )
        return (
            (self.end.x - self.start.x) / length,
            (self.end.y - self.start.y) / length,
        )

    def y_by_x(self, x: float) -> float:
        """Evaluate the supporting line at the given x coordinate.

        Points outside the segment's x range are extrapolated along the
        same line.

        Args:
            x: X coordinate to evaluate

        Returns:
            Y coordinate on the supporting line

        Raises:
            UndefinedInterpolationError: If the segment is vertical

        Examples:
            >>> LineSegment(Point(0.0, 0.0), Point(10.0, 10.0)).y_by_x(5.0)
            5.0
        """
        x0, y0 = self.start.x, self.start.y
        x1, y1 = self.end.x, self.end.y
        if x0 == x1:
            raise UndefinedInterpolationError(x, self)
        return y0 + (y1 - y0) * (x - x0) / (x1 - x0)

    def x_by_y(self, y: float) -> float:
        """Evaluate the supporting line at the given y coordinate.

        Raises:
            UndefinedInterpolationError: If the segment is horizontal
        """
        x0, y0 = self.start.x, self.start.y
        x1, y1 = self.end.x, self.end.y
        if y0 == y1:
            raise UndefinedInterpolationError(y, self)
        return x0 + (x1 - x0) * (y - y0) / (y1 - y0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with start and end point dictionaries
        """
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineSegment[Any]":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with start and end fields

        Returns:
            LineSegment instance
        """
        return cls(
            start=Point.from_dict(data["start"]),
            end=Point.from_dict(data["end"]),
        )
