"""
Implicit line equations.

A line is stored as a normal vector and a distance to the origin, so that a
point P lies on the line when ``dot(P, normal_vector) == origin_distance``.
"""

from dataclasses import dataclass
from enum import Enum

from .point import Line, Point


class LineSide(Enum):
    """
    Side of a directed line.

    Seen from ``start`` facing ``end``: ``LEFT`` is counter-clockwise,
    ``RIGHT`` clockwise.
    """

    LEFT = "Left"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LinearEquation:
    """
    Linear equation of the infinite line through a segment.

    Attributes:
        normal_vector (Point): Vector perpendicular to the line. It is the
            segment's direction rotated by 90°, so it is scaled by the segment
            length instead of being a unit vector.
        origin_distance (int): Distance from the origin, scaled by the length
            of the normal vector.
    """

    normal_vector: Point
    origin_distance: int

    @classmethod
    def from_line(cls, line: Line) -> "LinearEquation":
        """
        Create the linear equation of a line.

        Args:
            line: Directed segment

        Returns:
            Equation oriented so that points to the left of the segment's
            direction have a non-negative distance

        Example:
            >>> eq = LinearEquation.from_line(Line(Point(0, 0), Point(10, 0)))
            >>> eq.normal_vector, eq.origin_distance
            (Point(x=0, y=-10), 0)
        """
        normal_vector = line.delta().rotate_90()
        origin_distance = line.start.dot_product(normal_vector)
        return cls(normal_vector, origin_distance)

    def distance(self, point: Point) -> int:
        """
        Signed distance between the line and a point.

        Positive on the left side, negative on the right side, zero on the
        line. The magnitude is scaled by the normal vector's length, so only
        the sign and comparisons against the same equation carry meaning.
        """
        return point.dot_product(self.normal_vector) - self.origin_distance

    def check_side(self, point: Point, side: LineSide) -> bool:
        """
        Check if a point is on the given side of the line.

        Points on the line count as being on both sides.
        """
        distance = self.distance(point)

        if side is LineSide.RIGHT:
            return distance <= 0
        return distance >= 0
