"""Tests for infinite lines."""

import logging
import math

import pytest
from planegeo.geometry import Line, LineSegment, Point, RegularLine, VerticalLine


def segment(x1, y1, x2, y2):
    return LineSegment(Point(x1, y1), Point(x2, y2))


def test_from_segment_regular():
    line = Line.from_segment(segment(1, 2, 3, 6))

    assert line == RegularLine(2, 0)
    assert line.contains(Point(1, 2))
    assert line.contains(Point(3, 6))


def test_from_segment_vertical():
    assert Line.from_segment(segment(2, 0, 2, 5)) == VerticalLine(2)
    # Zero-length segments have no slope either
    assert Line.from_segment(segment(2, 3, 2, 3)) == VerticalLine(2)


def test_regular_line_rejects_infinite_slope():
    with pytest.raises(ValueError):
        RegularLine(math.inf, 0)
    with pytest.raises(ValueError):
        RegularLine(math.nan, 0)


def test_angle():
    assert RegularLine(1, 0).angle == pytest.approx(math.pi / 4)
    assert RegularLine(0, 5).angle == 0
    assert RegularLine(-1, 0).angle == pytest.approx(-math.pi / 4)
    assert VerticalLine(3).angle == pytest.approx(math.pi / 2)


def test_intersection_of_regular_lines():
    l1 = RegularLine(1, 0)
    l2 = RegularLine(-1, 2)

    assert l1.intersection(l2) == Point(1, 1)
    assert l2.intersection(l1) == Point(1, 1)


def test_intersection_satisfies_both_equations():
    l1 = RegularLine(0.3, 1.7)
    l2 = RegularLine(-2.1, 0.4)

    p = l1.intersection(l2)

    assert p is not None
    assert l1.y_at(p.x) == pytest.approx(l2.y_at(p.x))
    assert p.y == pytest.approx(l2.y_at(p.x))


def test_parallel_regular_lines_do_not_intersect():
    assert RegularLine(2, 1).intersection(RegularLine(2, 3)) is None


def test_coincident_regular_lines_do_not_intersect():
    assert RegularLine(2, 1).intersection(RegularLine(2, 1)) is None


def test_vertical_and_regular_intersect_in_either_order():
    vertical = VerticalLine(3)
    regular = RegularLine(2, 1)

    assert vertical.intersection(regular) == Point(3, 7)
    assert regular.intersection(vertical) == Point(3, 7)


def test_distinct_vertical_lines_do_not_intersect():
    assert VerticalLine(1).intersection(VerticalLine(2)) is None


def test_same_vertical_line_returns_point_on_line(caplog):
    with caplog.at_level(logging.WARNING, logger="planegeo.geometry.line"):
        p = VerticalLine(4).intersection(VerticalLine(4))

    assert p == Point(4, 4)
    assert VerticalLine(4).contains(p)
    assert "itself" in caplog.text


def test_contains_is_exact():
    line = RegularLine(0.5, 1)
    assert line.contains(Point(2, 2))
    assert not line.contains(Point(2, 2.0000001))

    # 0.1 * 3 is not exactly 0.3 in floating point
    assert not RegularLine(0.1, 0).contains(Point(3, 0.3))

    assert VerticalLine(2).contains(Point(2, -100))
    assert not VerticalLine(2).contains(Point(2.5, 0))


def test_distance_to_vertical_line():
    assert VerticalLine(2).distance_to(Point(5, 7)) == 3
    assert VerticalLine(2).distance_to(Point(-1, 0)) == 3


def test_distance_to_regular_line():
    assert RegularLine(0, 1).distance_to(Point(3, 4)) == 3
    assert RegularLine(1, 0).distance_to(Point(0, 2)) == pytest.approx(math.sqrt(2))
    assert RegularLine(1, 0).distance_to(Point(5, 5)) == 0


def test_intersection_with_unknown_type():
    with pytest.raises(TypeError):
        RegularLine(1, 0).intersection(segment(0, 0, 1, 1))


def test_line_base_is_abstract():
    with pytest.raises(TypeError):
        Line()
