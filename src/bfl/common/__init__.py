"""Common value types and helpers shared by the simulator.

This package provides:
- Angle: range-validated angle with degree and radian representation
- Point2D / LineSegment: 2D geometry for curve crossing detection
"""

from bfl.common.angle import Angle
from bfl.common.geometry import LineSegment, Point2D, determine_line_intersection

__all__ = ["Angle", "LineSegment", "Point2D", "determine_line_intersection"]
