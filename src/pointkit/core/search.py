"""Ordered search over point sequences.

This module provides a binary search over any sequence ordered by a single
extracted key, and ``locate`` which applies it to points ordered by x.

The search reports either an exact hit or the insertion point that keeps
the sequence ordered, so callers can tell "on a sample" apart from
"between samples" without a second comparison.
"""

from bisect import bisect_left
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from pointkit.domain import Point

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ExactIndex:
    """An element whose key equals the target exists at ``index``."""

    index: int


@dataclass(frozen=True, slots=True)
class InsertionPoint:
    """No element matches; inserting the target at ``index`` keeps order.

    ``index`` ranges over ``0..len(items)`` inclusive.
    """

    index: int


SearchResult = ExactIndex | InsertionPoint


def ordered_search(
    items: Sequence[T],
    target: Any,
    key: Callable[[T], Any],
) -> SearchResult:
    """Binary search a sequence ordered ascending by ``key``.

    Only the extracted key takes part in comparisons. When several elements
    share the target key, the leftmost one is reported.

    Args:
        items: Sequence sorted ascending by ``key`` (not checked)
        target: Key value to look for
        key: Extracts the comparison key from an element

    Returns:
        ExactIndex on a match, InsertionPoint otherwise

    Examples:
        >>> ordered_search([1, 3, 5], 3, key=lambda v: v)
        ExactIndex(index=1)
        >>> ordered_search([1, 3, 5], 4, key=lambda v: v)
        InsertionPoint(index=2)
    """
    index = bisect_left(items, target, key=key)
    if index < len(items) and key(items[index]) == target:
        return ExactIndex(index)
    return InsertionPoint(index)


def _x_of(point: Point[Any]) -> Any:
    return point.x


def locate(points: Sequence[Point[Any]], query_x: float) -> SearchResult:
    """Locate ``query_x`` among points sorted ascending by x.

    The y coordinate is ignored.

    Args:
        points: Points sorted by x (not checked)
        query_x: X coordinate to locate

    Returns:
        ExactIndex of a point with that x, or the InsertionPoint for it
    """
    return ordered_search(points, query_x, key=_x_of)
