"""planegeo: planar lines, segments and polygons with intersection and inset."""

__version__ = "0.1.0"

from .errors import GeometryError, BrokenEdgeChainError
from .geometry import (
    Point,
    Rect,
    EdgeInsets,
    Line,
    RegularLine,
    VerticalLine,
    LineSegment,
    Polygon,
    AffineTransform,
)

__all__ = [
    "GeometryError",
    "BrokenEdgeChainError",
    "Point",
    "Rect",
    "EdgeInsets",
    "Line",
    "RegularLine",
    "VerticalLine",
    "LineSegment",
    "Polygon",
    "AffineTransform",
]
