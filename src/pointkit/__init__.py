"""pointkit - Interpolation, polylines and engine-backed fitting for 2D points.

pointkit recovers y values from sorted samples by first degree
interpolation, turns point sequences into connected line segments, and
forwards point sets to OpenCV for line fitting, ellipse fitting, convex
hulls and bounding rectangles.

Example:
    >>> from pointkit import Point, interpolate
    >>> interpolate([Point(0.0, 0.0), Point(10.0, 10.0), Point(20.0, 5.0)], 15.0)
    7.5
"""

__version__ = "0.1.0"

from pointkit.core import (
    GeometryEngine,
    bounding_rectangle,
    build_polyline,
    convex_hull,
    fit_ellipse,
    fit_line,
    interpolate,
    interpolate_all,
    locate,
)
from pointkit.domain import (
    DistanceType,
    Ellipse,
    LineSegment,
    Orientation,
    Point,
    Rectangle,
)

__all__ = [
    "__version__",
    "DistanceType",
    "Ellipse",
    "GeometryEngine",
    "LineSegment",
    "Orientation",
    "Point",
    "Rectangle",
    "bounding_rectangle",
    "build_polyline",
    "convex_hull",
    "fit_ellipse",
    "fit_line",
    "interpolate",
    "interpolate_all",
    "locate",
]
