"""Domain models for pointkit.

This module contains the value types representing points, segments and the
shapes reported by the geometry engine. All models are:

- Immutable (frozen dataclasses)
- Constructed per call, with no identity beyond their values

Key classes:
- Point: A 2D point, generic over int or float coordinates
- LineSegment: Two endpoints and their supporting line
- Ellipse: Rotated ellipse from ellipse fitting
- Rectangle: Axis-aligned bounding rectangle
"""

from pointkit.domain.point import DistanceType, Orientation, Point
from pointkit.domain.segment import LineSegment
from pointkit.domain.shapes import Ellipse, Rectangle

__all__: list[str] = [
    # Enums
    "DistanceType",
    "Orientation",
    # Core types
    "Point",
    "LineSegment",
    "Ellipse",
    "Rectangle",
]
