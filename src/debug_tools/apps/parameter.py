"""
Editable debug parameters.

A Parameter is a named handle onto one attribute of a debug app. Reading and
writing go through accessors, which validate the value against the
parameter's kind and keep it inside the range of the fixed-width integer
types used by the drawing code.
"""

import re
from enum import Enum
from collections.abc import Sequence
from typing import Any, Optional

from ..core.point import Point


I32_MIN = -2 ** 31
I32_MAX = 2 ** 31 - 1
U32_MAX = 2 ** 32 - 1

_POINT_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?$")


class ValueKind(Enum):
    """Type of value a parameter holds."""

    U32 = "u32"
    I32 = "i32"
    POINT = "point"

    @property
    def bounds(self):
        """(min, max) of a scalar value or of each point component."""
        if self is ValueKind.U32:
            return (0, U32_MAX)
        return (I32_MIN, I32_MAX)


def _saturate(value: int, bounds) -> int:
    low, high = bounds
    return max(low, min(high, value))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Parameter:
    """
    Named, typed handle onto an attribute of an object.

    Attributes:
        name (str): Name shown next to the value
        owner: Object holding the value
        attribute (str): Attribute name on ``owner``
        kind (ValueKind): Type of the value
    """

    def __init__(self, name: str, owner: Any, attribute: Optional[str] = None,
                 kind: Optional[ValueKind] = None):
        """
        Create a parameter.

        Args:
            name: Display name
            owner: Object holding the value
            attribute: Attribute name on ``owner`` (default: ``name``)
            kind: Value type; inferred from the current value if omitted.
                Plain integers are inferred as I32.

        Example:
            >>> app.stroke_width = 1
            >>> Parameter("stroke", app, "stroke_width", ValueKind.U32)
            Parameter(stroke=1)
        """
        self.name = name
        self.owner = owner
        self.attribute = attribute or name
        self.kind = kind or self._infer_kind(getattr(owner, self.attribute))

    @staticmethod
    def _infer_kind(value: Any) -> ValueKind:
        if isinstance(value, Point):
            return ValueKind.POINT
        if _is_int(value):
            return ValueKind.I32
        raise ValueError(f"Unsupported parameter value: {value!r}")

    @property
    def value(self):
        return getattr(self.owner, self.attribute)

    @value.setter
    def value(self, new_value):
        setattr(self.owner, self.attribute, self._coerce(new_value))

    def _coerce(self, value: Any):
        low, high = self.kind.bounds

        if self.kind is ValueKind.POINT:
            if isinstance(value, Point):
                components = (value.x, value.y)
            elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
                components = tuple(value)
            else:
                raise ValueError(f"Parameter '{self.name}' expects a point (x, y), got {value!r}")

            for component in components:
                if not _is_int(component):
                    raise ValueError(f"Parameter '{self.name}' expects integer coordinates, "
                                     f"got {value!r}")
                if not low <= component <= high:
                    raise ValueError(f"Parameter '{self.name}' coordinate {component} "
                                     f"out of range [{low}, {high}]")
            return Point(*components)

        if not _is_int(value):
            raise ValueError(f"Parameter '{self.name}' expects an integer, got {value!r}")
        if not low <= value <= high:
            raise ValueError(f"Parameter '{self.name}' value {value} out of range [{low}, {high}]")
        return value

    def adjust(self, dx: int, dy: int = 0) -> None:
        """
        Nudge the value with saturating arithmetic.

        Scalars change by ``dx``; points move by ``(dx, dy)``. Results are
        clamped to the range of the parameter's kind instead of wrapping.
        The CLI's ``--nudge NAME=DX[,DY]`` steps go through here.

        Args:
            dx: Change of a scalar value, or of a point's x coordinate
            dy: Change of a point's y coordinate (ignored for scalars)
        """
        bounds = self.kind.bounds
        current = self.value

        if self.kind is ValueKind.POINT:
            self.value = Point(_saturate(current.x + dx, bounds),
                               _saturate(current.y + dy, bounds))
        else:
            self.value = _saturate(current + dx, bounds)

    def assign(self, text: str) -> None:
        """
        Set the value from its textual form.

        Args:
            text: Integer literal for scalars, ``"x,y"`` or ``"(x, y)"`` for points

        Raises:
            ValueError: If the text cannot be parsed or is out of range
        """
        text = text.strip()

        if self.kind is ValueKind.POINT:
            match = _POINT_PATTERN.match(text)
            if match is None:
                raise ValueError(f"Parameter '{self.name}' expects 'x,y', got '{text}'")
            self.value = Point(int(match.group(1)), int(match.group(2)))
        else:
            try:
                parsed = int(text)
            except ValueError:
                raise ValueError(f"Parameter '{self.name}' expects an integer, got '{text}'") from None
            self.value = parsed

    def format_value(self) -> str:
        """Value as displayed in the parameter panel."""
        value = self.value
        if self.kind is ValueKind.POINT:
            return f"({value.x}, {value.y})"
        return str(value)

    def __repr__(self) -> str:
        return f"Parameter({self.name}={self.format_value()})"
