"""
Polyline debugger.

Draws a polyline through up to five editable vertices. The ``points``
parameter selects how many of them are used.
"""

from typing import List, Tuple

from .base import DebugApp
from .parameter import Parameter, ValueKind
from ..core.point import Point
from ..utils.visualization import draw_polyline


class PolylineDebug(DebugApp):
    """Polyline through the first ``points`` of five editable vertices."""

    TITLE = "Polyline debugger"

    def _initialize_app(self) -> None:
        self.points = 5
        self.p1 = Point(65, 130)
        self.p2 = Point(120, 80)
        self.p3 = Point(190, 120)
        self.p4 = Point(190, 70)
        self.p5 = Point(220, 50)
        self.stroke_width = 10

    def parameters(self) -> List[Parameter]:
        return [
            Parameter("points", self, kind=ValueKind.U32),
            Parameter("p1", self),
            Parameter("p2", self),
            Parameter("p3", self),
            Parameter("p4", self),
            Parameter("p5", self),
            Parameter("stroke", self, "stroke_width", ValueKind.U32),
        ]

    def vertices(self) -> List[Point]:
        """Vertices in use, clamped to the available five."""
        vertices = [self.p1, self.p2, self.p3, self.p4, self.p5]
        return vertices[:min(self.points, len(vertices))]

    def draw(self, ax) -> None:
        if self.stroke_width > 0:
            draw_polyline(ax, self.vertices(), 'lime', self.stroke_width)

    def scene_points(self) -> List[Tuple[int, int]]:
        return [p.as_tuple() for p in self.vertices()]
