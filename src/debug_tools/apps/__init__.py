"""Debug programs and their editable parameters."""

from .parameter import Parameter, ValueKind
from .base import DebugApp
from .line import LineDebug
from .polyline import PolylineDebug
from .line_intersection import LineIntersectionDebug, describe_intersection
