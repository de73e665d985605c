"""Polygon operations for planegeo."""

from typing import Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from ..errors import BrokenEdgeChainError
from .line import Line
from .segment import LineSegment
from .transform import AffineTransform
from .types import EdgeInsets, Point, Rect

T = TypeVar("T")


def cyclic_pairs(items: Sequence[T]) -> Iterator[Tuple[T, T]]:
    """Yield (items[i - 1], items[i]) for every i, starting with (last, first)."""
    n = len(items)
    for i in range(n):
        yield items[i - 1], items[i]


def check_edge_chain(edges: Sequence[LineSegment]) -> None:
    """Raise BrokenEdgeChainError unless every edge ends where the next starts."""
    for i, (previous, current) in enumerate(cyclic_pairs(edges)):
        if previous.b != current.a:
            raise BrokenEdgeChainError(
                f"edge {(i - 1) % len(edges)} ends at {previous.b} "
                f"but edge {i} starts at {current.a}"
            )


class Polygon:
    """Closed polygon given by its vertices.

    The last vertex connects back to the first. Edges are derived from the
    vertices every time they are read.
    """

    def __init__(self, vertices: Sequence[Point]):
        vertices = list(vertices)
        if not vertices:
            raise ValueError("a polygon needs at least one vertex")
        self.vertices: List[Point] = vertices

    @classmethod
    def from_edges(cls, edges: Sequence[LineSegment]) -> "Polygon":
        check_edge_chain(edges)
        return cls([edge.a for edge in edges])

    @classmethod
    def from_rect(cls, rect: Rect) -> "Polygon":
        return cls([
            Point(rect.min_x, rect.min_y),
            Point(rect.min_x, rect.max_y),
            Point(rect.max_x, rect.max_y),
            Point(rect.max_x, rect.min_y),
        ])

    def __repr__(self):
        return f"Polygon({self.vertices!r})"

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.vertices == other.vertices

    __hash__ = None

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    @property
    def edges(self) -> List[LineSegment]:
        n = len(self.vertices)
        return [
            LineSegment(vertex, self.vertices[(i + 1) % n])
            for i, vertex in enumerate(self.vertices)
        ]

    @edges.setter
    def edges(self, edges: Sequence[LineSegment]) -> None:
        check_edge_chain(edges)
        if not edges:
            raise ValueError("a polygon needs at least one edge")
        self.vertices = [edge.a for edge in edges]

    @property
    def frame(self) -> Rect:
        """Smallest axis-aligned rectangle enclosing the vertices."""
        return Rect.spanning(self.vertices)

    @property
    def bounds(self) -> Rect:
        return self.frame.at_origin()

    @property
    def center(self) -> Point:
        return self.frame.center

    def intersection(self, other: Union[LineSegment, Line]) -> List[Point]:
        """Points where the boundary meets a segment or an infinite line.

        Each point is reported once, in edge order, so a hit on a vertex
        shared by two edges counts once. Returns an empty list when they do
        not meet.
        """
        if isinstance(other, LineSegment):
            return self._intersection_with_segment(other)
        if isinstance(other, Line):
            return self._intersection_with_line(other)
        raise TypeError(f"cannot intersect Polygon with {type(other).__name__}")

    def _intersection_with_segment(self, segment: LineSegment) -> List[Point]:
        points = []
        for edge in self.edges:
            point = edge.intersection(segment)
            if point is not None and point not in points:
                points.append(point)
        return points

    def _intersection_with_line(self, line: Line) -> List[Point]:
        points = []
        for edge in self.edges:
            point = Line.from_segment(edge).intersection(line)
            # Keep only hits inside the edge itself; a vertex is shared by two edges
            if point is not None and edge.contains(point) and point not in points:
                points.append(point)
        return points

    def applying(self, transform: AffineTransform) -> "Polygon":
        return Polygon([transform.apply(vertex) for vertex in self.vertices])

    def map(self, fn: Callable[[Point], Point]) -> "Polygon":
        return Polygon([fn(vertex) for vertex in self.vertices])

    def inset(self, insets: Union[EdgeInsets, Sequence[float]]) -> Optional["Polygon"]:
        """Move each of the four edges perpendicular to itself.

        Offsets pair with edges in the order left, bottom, right, top (the
        edge order of `from_rect`). A plain sequence is taken in that same
        order. New corners are the intersections of neighbouring offset
        edges.

        A positive offset moves an edge to the left of its a->b direction.
        For polygons built with `from_rect` that is outward, so positive
        values grow the rectangle and negative values shrink it.

        Only quadrilaterals are supported. Returns None unless exactly four
        corners come out, e.g. for another vertex count or when neighbouring
        edges are parallel.
        """
        if isinstance(insets, EdgeInsets):
            offsets = insets.in_edge_order()
        else:
            offsets = list(insets)
            if len(offsets) != 4:
                raise ValueError(f"expected 4 offsets, got {len(offsets)}")

        if len(self.vertices) != 4:
            return None

        lines = [
            Line.from_segment(edge.translated(offset))
            for edge, offset in zip(self.edges, offsets)
        ]

        vertices = []
        for previous, current in cyclic_pairs(lines):
            point = previous.intersection(current)
            if point is not None:
                vertices.append(point)

        if len(vertices) != 4:
            return None
        return Polygon(vertices)
