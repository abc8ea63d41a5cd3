"""Core point types.

This module defines the fundamental types used throughout pointkit:
- Point: An immutable 2D point, generic over its coordinate type
- Orientation: Enum for convex hull winding
- DistanceType: Enum for robust line-fitting metrics
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, TypeVar

N = TypeVar("N", int, float)


class Orientation(Enum):
    """Winding direction requested for convex hull output.

    Assumes the X axis pointing right and the Y axis pointing up.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class DistanceType(str, Enum):
    """Robust distance metric used for line fitting.

    - L1: least absolute deviation
    - L2: least squares
    - L12, FAIR, WELSCH, HUBER: M-estimators
    """

    L1 = "l1"
    L2 = "l2"
    L12 = "l12"
    FAIR = "fair"
    WELSCH = "welsch"
    HUBER = "huber"


@dataclass(frozen=True, slots=True)
class Point(Generic[N]):
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. The coordinate type is
    either ``int`` or ``float``; integer points come from pixel data.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: N
    y: N

    def to_tuple(self) -> tuple[N, N]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point[Any]":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])
