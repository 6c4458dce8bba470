"""
Integer point and line primitives.

This module provides the integer-only vector arithmetic shared by the linear
equation and intersection code. A Point doubles as a 2-D coordinate and as a
2-D vector; callers keep track of which role applies.
"""

from dataclasses import dataclass
from typing import Tuple


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Integer division that rounds toward zero.

    Python's ``//`` rounds toward negative infinity, which differs from the
    fixed-width integer division drawing code is usually written against.

    Args:
        numerator: Dividend
        denominator: Divisor (must not be zero)

    Returns:
        Quotient truncated toward zero

    Raises:
        ZeroDivisionError: If denominator is zero

    Example:
        >>> div_toward_zero(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class Point:
    """Point or vector with signed integer coordinates."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def div_toward_zero(self, divisor: int) -> "Point":
        """Divide both components by an integer, truncating toward zero."""
        return Point(div_toward_zero(self.x, divisor), div_toward_zero(self.y, divisor))

    def rotate_90(self) -> "Point":
        """Return the vector rotated by 90° relative to the origin."""
        return Point(self.y, -self.x)

    def dot_product(self, other: "Point") -> int:
        return self.x * other.x + self.y * other.y

    def determinant(self, other: "Point") -> int:
        """
        Determinant of the 2x2 matrix formed by this and another point.

        ::

                     | self.x   self.y  |
            result = |                  |
                     | other.x  other.y |
        """
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> int:
        """Squared length of the vector from (0, 0) to (x, y)."""
        return self.x ** 2 + self.y ** 2

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    """
    Directed line segment from ``start`` to ``end``.

    Swapping the endpoints reverses the direction, which changes the sign
    conventions derived from it (left/right, outer side) but not whether two
    lines are parallel.

    Attributes:
        start (Point): First endpoint
        end (Point): Second endpoint
    """

    start: Point
    end: Point

    def delta(self) -> Point:
        """Direction vector ``end - start``."""
        return self.end - self.start

    def contains_bounding_box(self, point: Point) -> bool:
        """
        Check if a point lies within the segment's axis-aligned bounding box.

        Intersection results refer to the infinite lines through the
        segments. Combined with a colinearity check, this bounds such a
        result to the segment itself.

        Args:
            point: Point to test

        Returns:
            True if the point is inside or on the bounding box
        """
        x_min, x_max = sorted((self.start.x, self.end.x))
        y_min, y_max = sorted((self.start.y, self.end.y))
        return x_min <= point.x <= x_max and y_min <= point.y <= y_max

    def reversed(self) -> "Line":
        return Line(self.end, self.start)
