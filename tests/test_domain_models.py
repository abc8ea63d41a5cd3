"""Tests for domain models to verify they work correctly."""

import math

import pytest

from pointkit.domain import (
    DistanceType,
    Ellipse,
    LineSegment,
    Orientation,
    Point,
    Rectangle,
)
from pointkit.exceptions import InvalidArgumentError, UndefinedInterpolationError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_integer_point_keeps_type(self) -> None:
        """Integer coordinates are stored as given."""
        p = Point(3, 4)
        assert isinstance(p.x, int)
        assert isinstance(p.y, int)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(1.5, -2.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestLineSegment:
    """Tests for LineSegment class."""

    def test_y_by_x_inside(self) -> None:
        segment = LineSegment(Point(10.0, 10.0), Point(20.0, 5.0))
        assert segment.y_by_x(15.0) == 7.5

    def test_y_by_x_extrapolates(self) -> None:
        segment = LineSegment(Point(0.0, 0.0), Point(10.0, 10.0))
        assert segment.y_by_x(-5.0) == -5.0
        assert segment.y_by_x(30.0) == 30.0

    def test_y_by_x_vertical_raises(self) -> None:
        segment = LineSegment(Point(1.0, 0.0), Point(1.0, 5.0))
        with pytest.raises(UndefinedInterpolationError) as exc_info:
            segment.y_by_x(1.0)
        assert exc_info.value.segment == segment
        assert exc_info.value.value == 1.0

    def test_x_by_y(self) -> None:
        segment = LineSegment(Point(0.0, 0.0), Point(10.0, 20.0))
        assert segment.x_by_y(10.0) == 5.0

    def test_x_by_y_horizontal_raises(self) -> None:
        segment = LineSegment(Point(0.0, 3.0), Point(10.0, 3.0))
        with pytest.raises(UndefinedInterpolationError):
            segment.x_by_y(3.0)

    def test_length(self) -> None:
        segment = LineSegment(Point(0, 0), Point(3, 4))
        assert segment.length == 5.0

    def test_direction_is_unit_vector(self) -> None:
        dx, dy = LineSegment(Point(0.0, 0.0), Point(3.0, 4.0)).direction
        assert dx == pytest.approx(0.6)
        assert dy == pytest.approx(0.8)
        assert math.hypot(dx, dy) == pytest.approx(1.0)

    def test_direction_of_zero_length_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            _ = LineSegment(Point(1.0, 1.0), Point(1.0, 1.0)).direction

    def test_segment_serialization(self) -> None:
        s1 = LineSegment(Point(0, 0), Point(1, 1))
        s2 = LineSegment.from_dict(s1.to_dict())
        assert s2 == s1


class TestShapes:
    """Tests for engine result shapes."""

    def test_ellipse_semi_axes(self) -> None:
        ellipse = Ellipse(center=Point(0.0, 0.0), width=20.0, height=10.0, angle=0.0)
        assert ellipse.semi_axes == (10.0, 5.0)

    def test_ellipse_to_dict(self) -> None:
        ellipse = Ellipse(center=Point(1.0, 2.0), width=4.0, height=3.0, angle=45.0)
        assert ellipse.to_dict() == {
            "center": {"x": 1.0, "y": 2.0},
            "width": 4.0,
            "height": 3.0,
            "angle": 45.0,
        }

    def test_rectangle_edges(self) -> None:
        rect = Rectangle(x=2, y=3, width=10, height=5)
        assert rect.right == 12
        assert rect.bottom == 8
        assert rect.area == 50

    def test_rectangle_contains(self) -> None:
        rect = Rectangle(x=0, y=0, width=10, height=10)
        assert rect.contains(Point(5, 5))
        assert rect.contains(Point(10, 10))
        assert not rect.contains(Point(11.0, 5.0))


class TestEnums:
    """Tests for enumerations."""

    def test_distance_type_from_string(self) -> None:
        assert DistanceType("huber") is DistanceType.HUBER

    def test_orientation_members(self) -> None:
        assert {o.name for o in Orientation} == {"CLOCKWISE", "COUNTER_CLOCKWISE"}
