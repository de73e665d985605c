"""Bounded line segments."""

import math
from dataclasses import dataclass
from typing import Optional

from .line import Line
from .types import Point, Rect


@dataclass(eq=False)
class LineSegment:
    """A line segment defined by two endpoints.

    Direction (a to b) matters for `angle` and `translated`, but a segment
    and its reverse compare equal.
    """
    a: Point
    b: Point

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or \
               (self.a == other.b and self.b == other.a)

    __hash__ = None

    @property
    def length(self) -> float:
        return self.a.distance_to(self.b)

    @property
    def angle(self) -> float:
        """Angle of the vector pointing from b back to a."""
        return (self.a - self.b).angle

    @property
    def bounds(self) -> Rect:
        delta = self.a - self.b
        return Rect(
            min(self.a.x, self.b.x),
            min(self.a.y, self.b.y),
            abs(delta.x),
            abs(delta.y),
        )

    @property
    def line(self) -> Line:
        """Infinite line this segment lies on."""
        return Line.from_segment(self)

    def intersection(self, other: "LineSegment") -> Optional[Point]:
        """Point where two segments cross, or None.

        Both segments are parametrized as start + u * direction; they meet
        only if both parameters fall in [0, 1]. Parallel and collinear
        segments never intersect.
        """
        d1 = self.b - self.a
        d2 = other.b - other.a

        denom = d2.y * d1.x - d2.x * d1.y
        if denom == 0:
            return None

        d3 = self.a - other.a
        u0 = (d2.x * d3.y - d2.y * d3.x) / denom
        u1 = (d1.x * d3.y - d1.y * d3.x) / denom

        if not (0 <= u0 <= 1 and 0 <= u1 <= 1):
            return None

        return self.a + d1 * u0

    def distance_to(self, point: Point) -> float:
        """Distance from point to the infinite line through this segment.

        Not clamped to the endpoints. A zero-length segment measures from a.
        """
        length = self.length
        if length == 0:
            return self.a.distance_to(point)
        return abs((self.b - self.a).cross(point) + self.a.cross(self.b)) / length

    def contains(self, point: Point) -> bool:
        # Exact: the point must make a degenerate triangle with both ends.
        return self.a.distance_to(point) + point.distance_to(self.b) == self.a.distance_to(self.b)

    def translated(self, distance: float) -> "LineSegment":
        """Copy moved perpendicular to itself by a signed distance."""
        vector = Point.polar(self.angle - math.pi / 2, distance)
        return LineSegment(self.a + vector, self.b + vector)
