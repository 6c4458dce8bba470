"""Integer geometry core: points, linear equations and line intersection."""

from .point import Point, Line, div_toward_zero
from .linear_equation import LineSide, LinearEquation
from .intersection import COLINEAR, Colinear, Intersection, IntersectionPoint, intersect
