"""Geometry primitives for planegeo."""

from .types import Point, Rect, EdgeInsets, ORIGIN, cross
from .line import Line, RegularLine, VerticalLine
from .segment import LineSegment
from .polygon import Polygon, cyclic_pairs, check_edge_chain
from .transform import AffineTransform

__all__ = [
    "Point",
    "Rect",
    "EdgeInsets",
    "ORIGIN",
    "cross",
    "Line",
    "RegularLine",
    "VerticalLine",
    "LineSegment",
    "Polygon",
    "cyclic_pairs",
    "check_edge_chain",
    "AffineTransform",
]
