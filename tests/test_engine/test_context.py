"""Tests for the engine data model."""

import math

from cubicpath.engine.context import CursorState, Path, PathData, Point


def test_point_add_and_midpoint():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(0, 0).midpoint(Point(10, 4)) == Point(5, 2)


def test_point_slope():
    assert Point(0, 0).slope(Point(2, 1)) == 0.5
    assert Point(0, 0).slope(Point(0, 3)) == math.inf
    assert Point(0, 0).slope(Point(0, -3)) == -math.inf
    assert math.isnan(Point(1, 1).slope(Point(1, 1)))


def test_line_segment_has_midpoint_controls():
    seg = PathData.line(Point(0, 0), Point(4, 8))
    assert seg.control == (Point(2, 4), Point(2, 4))
    assert seg.is_straight


def test_curve_segment_is_not_straight():
    seg = PathData(start=Point(0, 0), end=Point(3, 0), control=(Point(1, 1), Point(2, 1)))
    assert not seg.is_straight


def test_path_len_and_iter():
    segs = [PathData.line(Point(0, 0), Point(1, 0)), PathData.line(Point(1, 0), Point(1, 1))]
    path = Path(id="p", data=segs)
    assert len(path) == 2
    assert list(path) == segs


def test_cursor_close_resets_to_initial():
    cursor = CursorState()
    cursor.move_to(Point(5, 5))
    cursor.current = Point(9, 1)
    seg = cursor.close()
    assert seg.start == Point(9, 1)
    assert seg.end == Point(5, 5)
    assert cursor.current == Point(5, 5)


def test_vertical_slope_sign_follows_dy():
    # a negative-zero dx must not flip the sign
    assert Point(-0.0, 0).slope(Point(0.0, 2)) == math.inf
    assert Point(0.0, 0).slope(Point(-0.0, 2)) == math.inf
    assert Point(0.0, 2).slope(Point(-0.0, 0)) == -math.inf
