"""Unit tests for first degree interpolation.

Tests cover:
- Exact hits returning the sample's y unmodified
- Interior queries using the segment left of the insertion point
- Extrapolation along the first and last segments
- Degenerate inputs (too few points, vertical bracketing segments)
- Batched evaluation
"""

import math

import numpy as np
import pytest

from pointkit.core.interpolation import bracketing_segment, interpolate, interpolate_all
from pointkit.domain import LineSegment, Point
from pointkit.exceptions import InvalidArgumentError, UndefinedInterpolationError


@pytest.fixture
def peak() -> list[Point[float]]:
    """Rising then falling samples."""
    return [Point(0.0, 0.0), Point(10.0, 10.0), Point(20.0, 5.0)]


@pytest.fixture
def zigzag() -> list[Point[float]]:
    return [Point(0.0, 0.0), Point(1.0, 10.0), Point(2.0, 0.0), Point(3.0, 10.0)]


class TestScenario:
    """The reference scenario over three samples."""

    def test_rising_segment(self, peak):
        assert interpolate(peak, 5.0) == 5.0

    def test_falling_segment(self, peak):
        assert interpolate(peak, 15.0) == 7.5

    def test_extrapolate_below(self, peak):
        assert interpolate(peak, -5.0) == -5.0

    def test_extrapolate_above(self, peak):
        assert interpolate(peak, 25.0) == 2.5


class TestExactHits:
    """Queries equal to a sample's x."""

    def test_every_sample(self, zigzag):
        for p in zigzag:
            assert interpolate(zigzag, p.x) == p.y

    def test_two_point_endpoints(self):
        pts = [Point(1.0, 3.25), Point(4.0, -7.5)]
        assert interpolate(pts, 1.0) == 3.25
        assert interpolate(pts, 4.0) == -7.5

    def test_exact_hit_on_integer_points(self):
        pts = [Point(0, 7), Point(5, 9)]
        result = interpolate(pts, 5)
        assert result == 9.0
        assert type(result) is float


class TestBracketing:
    """Choice of the bracketing segment."""

    def test_interior_uses_segment_left_of_insertion(self, zigzag):
        assert interpolate(zigzag, 1.5) == 5.0
        assert interpolate(zigzag, 2.25) == 2.5

    def test_below_range_uses_first_segment(self, zigzag):
        assert interpolate(zigzag, -1.0) == -10.0

    def test_above_range_uses_last_segment(self, zigzag):
        assert interpolate(zigzag, 4.0) == 20.0

    def test_bracketing_segment_indices(self, zigzag):
        n = len(zigzag)
        assert bracketing_segment(zigzag, 0) == LineSegment(zigzag[0], zigzag[1])
        assert bracketing_segment(zigzag, 2) == LineSegment(zigzag[1], zigzag[2])
        assert bracketing_segment(zigzag, n) == LineSegment(zigzag[n - 2], zigzag[n - 1])

    def test_two_points_extrapolate_both_ways(self):
        pts = [Point(0.0, 1.0), Point(2.0, 5.0)]
        assert interpolate(pts, -1.0) == -1.0
        assert interpolate(pts, 3.0) == 7.0

    @pytest.mark.parametrize("x", [0.5, 3.0, 7.25, 9.999])
    def test_interior_matches_formula_and_stays_between(self, peak, x):
        (x0, y0), (x1, y1) = peak[0].to_tuple(), peak[1].to_tuple()
        expected = y0 + (y1 - y0) * (x - x0) / (x1 - x0)
        result = interpolate(peak, x)
        assert result == expected
        assert min(y0, y1) <= result <= max(y0, y1)

    def test_integer_points_give_float(self):
        pts = [Point(0, 0), Point(10, 10)]
        assert interpolate(pts, 5) == 5.0


class TestDegenerateInput:
    """Precondition violations."""

    def test_empty_points(self):
        with pytest.raises(InvalidArgumentError):
            interpolate([], 1.0)

    def test_single_point(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            interpolate([Point(1.0, 1.0)], 1.0)
        assert exc_info.value.context["point_count"] == 1

    def test_vertical_first_segment(self):
        pts = [Point(0.0, 0.0), Point(0.0, 5.0), Point(1.0, 1.0)]
        with pytest.raises(UndefinedInterpolationError):
            interpolate(pts, -1.0)

    def test_vertical_last_segment(self):
        pts = [Point(0.0, 0.0), Point(1.0, 1.0), Point(1.0, 4.0)]
        with pytest.raises(UndefinedInterpolationError):
            interpolate(pts, 2.0)

    def test_nan_query(self):
        pts = [Point(0.0, 0.0), Point(10.0, 10.0)]
        with pytest.raises(InvalidArgumentError) as exc_info:
            interpolate(pts, math.nan)
        assert math.isnan(exc_info.value.context["query_x"])

    @pytest.mark.parametrize("x", [math.inf, -math.inf])
    def test_infinite_query_over_flat_segment(self, x):
        pts = [Point(0.0, 1.0), Point(10.0, 1.0)]
        with pytest.raises(InvalidArgumentError) as exc_info:
            interpolate(pts, x)
        assert exc_info.value.context["query_x"] == x

    def test_non_finite_query_in_batch(self, peak):
        with pytest.raises(InvalidArgumentError):
            interpolate_all(peak, [5.0, math.nan])

    def test_duplicate_x_still_interpolates_beside_it(self):
        pts = [Point(0.0, 0.0), Point(0.0, 5.0), Point(1.0, 1.0)]
        assert interpolate(pts, 0.5) == 3.0

    def test_does_not_mutate_input(self, peak):
        snapshot = list(peak)
        interpolate(peak, 12.0)
        assert peak == snapshot


class TestInterpolateAll:
    """Batched interpolation."""

    def test_matches_scalar(self, peak):
        queries = [25.0, -5.0, 10.0, 15.0, 5.0]
        results = interpolate_all(peak, queries)
        assert len(results) == len(queries)
        assert results == [interpolate(peak, x) for x in queries]

    def test_preserves_order(self, peak):
        assert interpolate_all(peak, [15.0, 5.0]) == [7.5, 5.0]

    def test_empty_queries(self, peak):
        assert interpolate_all(peak, []) == []

    def test_accepts_numpy_array(self, peak):
        results = interpolate_all(peak, np.array([5.0, 15.0]))
        assert results == [5.0, 7.5]
        assert all(type(v) is float for v in results)

    def test_idempotent(self, peak):
        queries = [1.0, 11.0, 21.0]
        assert interpolate_all(peak, queries) == interpolate_all(peak, queries)

    def test_propagates_errors(self):
        with pytest.raises(InvalidArgumentError):
            interpolate_all([Point(0.0, 0.0)], [1.0])
