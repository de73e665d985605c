"""Infinite lines.

A line is either regular (y = slope * x + intercept) or vertical (x = k).
Keeping vertical lines as their own type means no line ever carries an
infinite slope.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .types import Point

logger = logging.getLogger(__name__)


class Line(ABC):
    """Base class for the two line variants."""

    __slots__ = ()

    @staticmethod
    def from_segment(segment) -> "Line":
        """Infinite line through both ends of a segment."""
        a, b = segment.a, segment.b
        dx = b.x - a.x
        if dx == 0:
            return VerticalLine(a.x)

        m = (b.y - a.y) / dx
        if not math.isfinite(m):
            return VerticalLine(a.x)
        return RegularLine(m, a.y - m * a.x)

    @property
    @abstractmethod
    def angle(self) -> float:
        """Orientation in radians, in (-pi/2, pi/2]."""

    def intersection(self, other: "Line") -> Optional[Point]:
        """Single point shared with `other`, or None for parallel lines.

        Two vertical lines at the same x are the same line. There is no single
        answer in that case; a warning is logged and the point (x, x), which
        lies on the line, is returned.
        """
        if isinstance(self, VerticalLine) and isinstance(other, VerticalLine):
            if self.x != other.x:
                return None
            logger.warning("intersecting line x=%r with itself, returning an arbitrary point", self.x)
            return Point(self.x, self.x)

        if isinstance(self, VerticalLine) and isinstance(other, RegularLine):
            return Point(self.x, other.y_at(self.x))

        if isinstance(self, RegularLine) and isinstance(other, VerticalLine):
            return Point(other.x, self.y_at(other.x))

        if isinstance(self, RegularLine) and isinstance(other, RegularLine):
            if self.slope == other.slope:
                return None
            x = (other.intercept - self.intercept) / (self.slope - other.slope)
            if math.isinf(x):
                return None
            return Point(x, self.y_at(x))

        raise TypeError(f"cannot intersect {type(self).__name__} with {type(other).__name__}")

    @abstractmethod
    def contains(self, point: Point) -> bool:
        """Exact membership test, no tolerance."""

    @abstractmethod
    def distance_to(self, point: Point) -> float:
        """Perpendicular distance from point to the line."""


@dataclass(frozen=True)
class RegularLine(Line):
    """Line y = slope * x + intercept."""
    slope: float
    intercept: float

    def __post_init__(self):
        if not math.isfinite(self.slope):
            raise ValueError(f"slope must be finite, got {self.slope!r}; use VerticalLine")

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept

    @property
    def angle(self) -> float:
        return math.atan(self.slope)

    def contains(self, point: Point) -> bool:
        # Exact comparison, callers needing a tolerance use distance_to.
        return point.y == self.slope * point.x + self.intercept

    def distance_to(self, point: Point) -> float:
        m, b = self.slope, self.intercept
        return abs(m * point.x - point.y + b) / math.sqrt(m * m + 1)


@dataclass(frozen=True)
class VerticalLine(Line):
    """Line x = x."""
    x: float

    @property
    def angle(self) -> float:
        return math.pi / 2

    def contains(self, point: Point) -> bool:
        return point.x == self.x

    def distance_to(self, point: Point) -> float:
        return Point(self.x, point.y).distance_to(point)
