"""Tests for straight-segment detection and svgpathtools interop."""

import pytest
from svgpathtools import CubicBezier, Line, parse_path

from cubicpath.engine.context import PathData, Point
from cubicpath.engine.interpreter import interpret
from cubicpath.svg.primitives import is_line_from_cubic, to_svgpathtools


def test_is_line_from_cubic():
    assert is_line_from_cubic(PathData.line(Point(0, 0), Point(5, 5)))
    bent = PathData(start=Point(0, 0), end=Point(10, 0), control=(Point(3, 2), Point(7, 2)))
    assert not is_line_from_cubic(bent)


def test_is_line_from_cubic_degenerate():
    assert is_line_from_cubic(PathData.line(Point(1, 1), Point(1, 1)))


def test_to_svgpathtools_types():
    path = to_svgpathtools(interpret("M 0 0 L 10 0 C 11 1 12 1 13 0"))
    assert isinstance(path[0], Line)
    assert isinstance(path[1], CubicBezier)
    assert path[1].control1 == complex(11, 1)
    assert path.end == complex(13, 0)


@pytest.mark.parametrize(
    "d",
    [
        "M0 0 H10 V10 Z",
        "M 10 10 c 1 0 2 0 3 1.5",
        "M 1 2 3 4 5 6 l 1 1 -2 0",
        "m 5 5 h 3 v -2 L 0 0 C 1 1 2 3 4 4",
        "M 0 0 L 4 0 L 4 2 Z M 10 10 l 1 0 v 1 z",
    ],
)
def test_endpoints_agree_with_svgpathtools(d):
    ours = interpret(d)
    reference = parse_path(d)
    assert len(ours) == len(reference)
    for seg, ref in zip(ours, reference):
        assert complex(seg.start.x, seg.start.y) == ref.start
        assert complex(seg.end.x, seg.end.y) == ref.end
