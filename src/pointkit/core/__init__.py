"""Core point-processing algorithms for pointkit.

This module contains:

- Ordered search (binary search keyed by a coordinate)
- First degree interpolation (scalar and batched)
- Polyline construction (open or closed)
- The geometry engine adapter (line/ellipse fitting, convex hull,
  bounding rectangle)

All functions are pure and never mutate the points they are given.

Key functions:
- ordered_search: Binary search over a sequence ordered by a key
- locate: Search points by x coordinate
- interpolate: Piecewise-linear y for a single x
- interpolate_all: Piecewise-linear y for many x
- build_polyline: Connect points into line segments

Key classes:
- GeometryEngine: Forwards point sets to OpenCV
- PointBuffer: Scoped float32 buffer handed to the engine
"""

from pointkit.core.engine import (
    GeometryEngine,
    PointBuffer,
    bounding_rectangle,
    convex_hull,
    fit_ellipse,
    fit_line,
)
from pointkit.core.interpolation import bracketing_segment, interpolate, interpolate_all
from pointkit.core.polyline import build_polyline
from pointkit.core.search import (
    ExactIndex,
    InsertionPoint,
    SearchResult,
    locate,
    ordered_search,
)

__all__ = [
    # Search
    "ExactIndex",
    "InsertionPoint",
    "SearchResult",
    "locate",
    "ordered_search",
    # Interpolation
    "bracketing_segment",
    "interpolate",
    "interpolate_all",
    # Polyline
    "build_polyline",
    # Engine
    "GeometryEngine",
    "PointBuffer",
    "bounding_rectangle",
    "convex_hull",
    "fit_ellipse",
    "fit_line",
]
