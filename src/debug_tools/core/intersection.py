"""
Integer-only line intersection.

Computes where the infinite lines through two directed segments cross,
which side of the joint holds the reflex angle, and falls back to an
approximate point when the lines are almost parallel. Only integer
arithmetic is used.

Both segments are turned into implicit line equations and the resulting
2x2 system is solved with Cramer's rule.
"""

from dataclasses import dataclass
from typing import Union

from .linear_equation import LinearEquation, LineSide
from .point import Line, Point, div_toward_zero


@dataclass(frozen=True)
class Colinear:
    """No intersection: the lines are colinear or parallel."""


COLINEAR = Colinear()


@dataclass(frozen=True)
class IntersectionPoint:
    """
    Intersection of two lines at a point.

    Attributes:
        point (Point): Intersection of the infinite lines. It is not
            guaranteed to lie on either segment.
        outer_side (LineSide): Side of the joint holding the reflex angle;
            a stroke's miter is built on this side.
        is_special_case (bool): True if the lines were almost parallel and
            ``point`` is the average of the two inner endpoints instead of the
            solved intersection.
    """

    point: Point
    outer_side: LineSide
    is_special_case: bool = False


Intersection = Union[Colinear, IntersectionPoint]


def _round_numerator(numerator: int, offset: int) -> int:
    # Moves the numerator away from zero so truncating division rounds.
    if numerator < 0:
        return numerator - offset
    return numerator + offset


def intersect(line_a: Line, line_b: Line) -> Intersection:
    """
    Intersect the infinite lines through two directed segments.

    Args:
        line_a: First segment; its ``end`` is the joint side
        line_b: Second segment; its ``start`` is the joint side

    Returns:
        COLINEAR if the lines are parallel (colinear or offset), otherwise an
        IntersectionPoint. Segments that do not overlap still produce a point
        when their extensions cross.

    Example:
        >>> intersect(Line(Point(0, 0), Point(10, 0)),
        ...           Line(Point(5, -5), Point(5, 5)))
        IntersectionPoint(point=Point(x=5, y=0), outer_side=<LineSide.RIGHT: 'Right'>, is_special_case=False)
    """
    line1 = LinearEquation.from_line(line_a)
    line2 = LinearEquation.from_line(line_b)

    # Cramer's rule denominator
    denominator = line1.normal_vector.determinant(line2.normal_vector)

    # Parallel or colinear
    if denominator == 0:
        return COLINEAR

    outer_side = LineSide.RIGHT if denominator > 0 else LineSide.LEFT

    # Near-parallel lines: approximate with the midpoint of the inner endpoints
    if denominator ** 2 < line_a.delta().dot_product(line_b.delta()):
        return IntersectionPoint(
            point=(line_a.end + line_b.start).div_toward_zero(2),
            outer_side=outer_side,
            is_special_case=True,
        )

    # Round to nearest instead of truncating
    offset = abs(denominator) // 2

    origin_distances = Point(line1.origin_distance, line2.origin_distance)

    x_numerator = _round_numerator(
        origin_distances.determinant(Point(line1.normal_vector.y, line2.normal_vector.y)),
        offset,
    )
    y_numerator = _round_numerator(
        Point(line1.normal_vector.x, line2.normal_vector.x).determinant(origin_distances),
        offset,
    )

    return IntersectionPoint(
        point=Point(
            div_toward_zero(x_numerator, denominator),
            div_toward_zero(y_numerator, denominator),
        ),
        outer_side=outer_side,
        is_special_case=False,
    )
