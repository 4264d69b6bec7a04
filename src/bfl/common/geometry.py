"""2D geometry primitives used to find where two piecewise-linear curves cross.

Typical usage example:
    from bfl.common.geometry import LineSegment, Point2D, determine_segment_intersection

    continued = LineSegment(Point2D(0, 100), Point2D(10, 90))
    aborted = LineSegment(Point2D(0, 50), Point2D(10, 70))
    crossing = determine_segment_intersection(continued, aborted)
    if not crossing.is_nan():
        print(crossing.x, crossing.y)
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from bfl.core.exceptions import InvalidArgumentError

INTERSECTION_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Point2D:
    """Point in a 2D plane.

    Attributes:
        x: X coordinate.
        y: Y coordinate.
    """

    x: float
    y: float

    @classmethod
    def nan(cls) -> "Point2D":
        """Sentinel point returned when there is no intersection."""
        return cls(math.nan, math.nan)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class LineSegment:
    """Line segment between two distinct points.

    Raises:
        InvalidArgumentError: If start and end point are equal.
    """

    start_point: Point2D
    end_point: Point2D

    def __post_init__(self) -> None:
        if self.start_point == self.end_point:
            raise InvalidArgumentError("A line must consist of two distinct points.")


def determine_line_intersection(p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D) -> Point2D:
    """Determine the intersection of the lines through (p1, p2) and (p3, p4).

    The intersection of the two infinite lines is only accepted when it lies
    strictly inside the bounding box spanned by all four points on both axes.
    Intersections exactly on the bounding box edge are rejected.

    Args:
        p1: Start point of the first line.
        p2: End point of the first line.
        p3: Start point of the second line.
        p4: End point of the second line.

    Returns:
        The intersection point, or a NaN point when the lines are parallel,
        coincident, or cross outside the bounding box.

    Examples:
        >>> determine_line_intersection(Point2D(0, 0), Point2D(2, 2), Point2D(0, 2), Point2D(2, 0))
        Point2D(x=1.0, y=1.0)
    """
    determinant = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)

    # Parallel or coincident lines
    if abs(determinant) <= INTERSECTION_TOLERANCE:
        return Point2D.nan()

    cross_first = p1.x * p2.y - p1.y * p2.x
    cross_second = p3.x * p4.y - p3.y * p4.x

    x = (cross_first * (p3.x - p4.x) - (p1.x - p2.x) * cross_second) / determinant
    y = (cross_first * (p3.y - p4.y) - (p1.y - p2.y) * cross_second) / determinant

    points = np.array([p.to_array() for p in (p1, p2, p3, p4)])
    x_min, y_min = points.min(axis=0)
    x_max, y_max = points.max(axis=0)

    if x_min < x < x_max and y_min < y < y_max:
        return Point2D(float(x), float(y))

    return Point2D.nan()


def determine_segment_intersection(line1: LineSegment, line2: LineSegment) -> Point2D:
    """Determine the intersection of two line segments.

    See ``determine_line_intersection`` for the acceptance rules.

    Raises:
        InvalidArgumentError: If either segment is None.
    """
    if line1 is None:
        raise InvalidArgumentError("line1 is required and cannot be None.")
    if line2 is None:
        raise InvalidArgumentError("line2 is required and cannot be None.")

    return determine_line_intersection(line1.start_point, line1.end_point, line2.start_point, line2.end_point)
