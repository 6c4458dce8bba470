"""
Line intersection debugger.

Draws two editable lines and the result of intersecting them: a circle at
the intersection point (spring green for solved intersections, tomato for
the near-parallel approximation) and a text label describing the result.
"""

from typing import List, Tuple

from .base import DebugApp
from .parameter import Parameter
from ..core.intersection import Intersection, IntersectionPoint, intersect
from ..core.point import Line, Point
from ..utils.visualization import draw_line, draw_circle, draw_text


LABEL_POSITION = (12, 40)
MARKER_DIAMETER = 3


def describe_intersection(result: Intersection) -> str:
    """
    Format an intersection result as a one-line label.

    Args:
        result: Result of intersect()

    Returns:
        'colinear', or 'Point: (x, y), Side' with ' (special case)' appended
        when the near-parallel approximation was used

    Example:
        >>> describe_intersection(intersect(Line(Point(0, 0), Point(10, 0)),
        ...                                 Line(Point(5, -5), Point(5, 5))))
        'Point: (5, 0), Right'
    """
    if not isinstance(result, IntersectionPoint):
        return "colinear"

    text = f"Point: ({result.point.x}, {result.point.y}), {result.outer_side}"
    if result.is_special_case:
        text += " (special case)"
    return text


class LineIntersectionDebug(DebugApp):
    """Two editable lines and their intersection."""

    TITLE = "Line intersection debugger"

    def _initialize_app(self) -> None:
        self.l1_start = Point(150, 170)
        self.l1_end = Point(170, 200)
        self.l2_start = Point(120, 130)
        self.l2_end = Point(145, 169)

    def parameters(self) -> List[Parameter]:
        return [
            Parameter("l1_start", self),
            Parameter("l1_end", self),
            Parameter("l2_start", self),
            Parameter("l2_end", self),
        ]

    @property
    def line1(self) -> Line:
        return Line(self.l1_start, self.l1_end)

    @property
    def line2(self) -> Line:
        return Line(self.l2_start, self.l2_end)

    def intersection(self) -> Intersection:
        """Intersect the two lines with their current endpoints."""
        return intersect(self.line1, self.line2)

    def describe(self) -> str:
        return describe_intersection(self.intersection())

    def draw(self, ax) -> None:
        draw_line(ax, self.l1_start, self.l1_end, 'steelblue')
        draw_line(ax, self.l2_start, self.l2_end, 'skyblue')

        result = self.intersection()
        if isinstance(result, IntersectionPoint):
            color = 'tomato' if result.is_special_case else 'springgreen'
            draw_circle(ax, result.point, MARKER_DIAMETER, color)

        draw_text(ax, describe_intersection(result), LABEL_POSITION, 'white')

    def scene_points(self) -> List[Tuple[int, int]]:
        points = [p.as_tuple() for p in (self.l1_start, self.l1_end, self.l2_start, self.l2_end)]

        result = self.intersection()
        if isinstance(result, IntersectionPoint):
            points.append(result.point.as_tuple())
        return points
