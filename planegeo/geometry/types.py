"""Value types for planegeo geometry."""

import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Point:
    """2D point, also used as a vector."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def polar(cls, angle: float, distance: float, origin: Optional["Point"] = None) -> "Point":
        """Point at `distance` from `origin` in the direction of `angle` (radians)."""
        if origin is None:
            origin = ORIGIN
        return cls(
            origin.x + math.cos(angle) * distance,
            origin.y + math.sin(angle) * distance,
        )

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Point":
        return Point(self.x / k, self.y / k)

    def scale(self, k: float) -> "Point":
        return self * k

    def cross(self, other: "Point") -> float:
        """Z component of the cross product of two vectors."""
        return self.x * other.y - self.y * other.x

    @property
    def magnitude(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def angle(self) -> float:
        """Angle of the vector from the origin to this point."""
        return math.atan2(self.y, self.x)

    def distance_to(self, other: "Point") -> float:
        delta = self - other
        return math.sqrt(delta.x * delta.x + delta.y * delta.y)

    def bounds_for_circle(self, radius: float) -> "Rect":
        """Rectangle enclosing a circle of `radius` centered on this point."""
        return Rect(self.x - radius, self.y - radius, radius * 2, radius * 2)


ORIGIN = Point(0.0, 0.0)


def cross(a: Point, b: Point) -> float:
    return a.cross(b)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its origin and size."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def spanning(cls, points: Iterable[Point]) -> "Rect":
        """Smallest rectangle enclosing all points."""
        points = list(points)
        if not points:
            raise ValueError("cannot span an empty point set")

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def mid_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    # Corner names assume y grows downward, as on screen.
    @property
    def top_left(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def top_right(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max_x, self.max_y)

    def at_origin(self) -> "Rect":
        """Same size, moved to (0, 0)."""
        return Rect(0.0, 0.0, self.width, self.height)


@dataclass(frozen=True)
class EdgeInsets:
    """Per-side offsets for Polygon.inset."""
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, distance: float) -> "EdgeInsets":
        return cls(distance, distance, distance, distance)

    def in_edge_order(self):
        """Offsets in the edge order of Polygon.from_rect: left, bottom, right, top."""
        return [self.left, self.bottom, self.right, self.top]
