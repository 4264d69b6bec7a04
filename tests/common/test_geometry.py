"""Tests for the 2D geometry helpers."""

import pytest

from bfl.common.geometry import (
    LineSegment,
    Point2D,
    determine_line_intersection,
    determine_segment_intersection,
)
from bfl.core.exceptions import InvalidArgumentError


class TestLineSegment:
    """Test line segment construction."""

    def test_identical_points_raise(self) -> None:
        """Test that a segment needs two distinct points."""
        with pytest.raises(InvalidArgumentError):
            LineSegment(Point2D(1.0, 2.0), Point2D(1.0, 2.0))

    def test_point_nan(self) -> None:
        """Test the NaN sentinel point."""
        assert Point2D.nan().is_nan()
        assert not Point2D(0.0, 0.0).is_nan()


class TestLineIntersection:
    """Test intersections of lines within their bounding box."""

    def test_crossing_lines(self) -> None:
        """Test two diagonals of a square cross in its center."""
        result = determine_line_intersection(Point2D(0, 0), Point2D(2, 2), Point2D(0, 2), Point2D(2, 0))

        assert result.x == pytest.approx(1.0)
        assert result.y == pytest.approx(1.0)

    def test_parallel_lines_give_nan(self) -> None:
        """Test that parallel lines have no intersection."""
        result = determine_line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(0, 1), Point2D(1, 2))

        assert result.is_nan()

    def test_coincident_lines_give_nan(self) -> None:
        """Test that overlapping lines have no single intersection."""
        result = determine_line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(0.5, 0.5), Point2D(2, 2))

        assert result.is_nan()

    def test_crossing_outside_bounding_box_gives_nan(self) -> None:
        """Test that the infinite lines crossing outside the points is rejected."""
        # Lines y = x and y = -x + 10 cross at (5, 5), outside [0, 2] x [0, 10]
        result = determine_line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(0, 10), Point2D(2, 8))

        assert result.is_nan()

    def test_crossing_on_bounding_box_edge_gives_nan(self) -> None:
        """Test that an intersection on the bounding box edge is rejected."""
        # Segments share the end point (1, 1)
        result = determine_line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(0, 2), Point2D(1, 1))

        assert result.is_nan()

    def test_segment_intersection_delegates(self) -> None:
        """Test the segment based convenience function."""
        continued = LineSegment(Point2D(0, 100), Point2D(10, 40))
        aborted = LineSegment(Point2D(0, 50), Point2D(10, 70))

        result = determine_segment_intersection(continued, aborted)

        # 100 - 6x = 50 + 2x
        assert result.x == pytest.approx(6.25)
        assert result.y == pytest.approx(62.5)

    def test_segment_intersection_none_raises(self) -> None:
        """Test that missing segments are rejected."""
        segment = LineSegment(Point2D(0, 0), Point2D(1, 1))

        with pytest.raises(InvalidArgumentError):
            determine_segment_intersection(None, segment)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            determine_segment_intersection(segment, None)  # type: ignore[arg-type]
