"""
Line debugger.

Draws a single line with an adjustable stroke width.
"""

from typing import List, Tuple

from .base import DebugApp
from .parameter import Parameter, ValueKind
from ..core.point import Point
from ..utils.visualization import draw_line


class LineDebug(DebugApp):
    """Single line between two editable endpoints."""

    TITLE = "Line debugger"

    def _initialize_app(self) -> None:
        self.start = Point(128, 128)
        self.end = Point(150, 170)
        self.stroke_width = 1

    def parameters(self) -> List[Parameter]:
        return [
            Parameter("start", self),
            Parameter("end", self),
            Parameter("stroke", self, "stroke_width", ValueKind.U32),
        ]

    def draw(self, ax) -> None:
        if self.stroke_width > 0:
            draw_line(ax, self.start, self.end, 'lime', self.stroke_width)

    def scene_points(self) -> List[Tuple[int, int]]:
        return [self.start.as_tuple(), self.end.as_tuple()]
