"""Write segments back out as ``d`` attribute data."""

from __future__ import annotations

from cubicpath.engine.context import PathData, Point
from cubicpath.svg.primitives import is_line_from_cubic


def _fmt(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _pt(point: Point) -> str:
    return f"{_fmt(point.x)} {_fmt(point.y)}"


def to_d(data: list[PathData], line_tolerance: float = 0.0) -> str:
    """Render segments as absolute ``M``/``L``/``C`` commands.

    A segment whose start differs from the previous end opens a new subpath.
    Straight segments are written as ``L``; with ``line_tolerance`` > 0, curves
    whose control points sit within that distance of the chord are too.
    """
    parts: list[str] = []
    previous: Point | None = None

    for seg in data:
        if seg.start != previous:
            parts.append(f"M {_pt(seg.start)}")
        if seg.is_straight or (line_tolerance > 0 and is_line_from_cubic(seg, line_tolerance)):
            parts.append(f"L {_pt(seg.end)}")
        else:
            parts.append(f"C {_pt(seg.control[0])} {_pt(seg.control[1])} {_pt(seg.end)}")
        previous = seg.end

    return " ".join(parts)
