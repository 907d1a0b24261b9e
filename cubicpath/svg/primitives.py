"""Straight-segment detection and svgpathtools interop."""

from __future__ import annotations

import numpy as np
from svgpathtools import CubicBezier, Line
from svgpathtools import Path as SvgPath

from cubicpath.engine.context import PathData, Point

# Collinearity tolerance: 1% of segment length.
# Sub-pixel for typical SVG viewport sizes (100-1000px).
_LINE_COLLINEARITY_TOL = 0.01


def is_line_from_cubic(segment: PathData, tolerance: float = _LINE_COLLINEARITY_TOL) -> bool:
    """Detect if a cubic segment is a straight line (control points collinear)."""
    pts = np.array(
        [
            segment.start.as_tuple(),
            segment.control[0].as_tuple(),
            segment.control[1].as_tuple(),
            segment.end.as_tuple(),
        ]
    )

    # Cross product of the chord with each control offset should be near zero
    v1 = pts[3] - pts[0]
    v2 = pts[1] - pts[0]
    v3 = pts[2] - pts[0]

    length = np.linalg.norm(v1)
    if length < 1e-10:
        return bool(np.linalg.norm(v2) < tolerance and np.linalg.norm(v3) < tolerance)

    cross1 = abs(v1[0] * v2[1] - v1[1] * v2[0]) / length
    cross2 = abs(v1[0] * v3[1] - v1[1] * v3[0]) / length

    return bool(cross1 < tolerance and cross2 < tolerance)


def _complex(point: Point) -> complex:
    return complex(point.x, point.y)


def to_svgpathtools(data: list[PathData]) -> SvgPath:
    """Convert segments to an svgpathtools Path (Line for straight segments)."""
    segments = []
    for seg in data:
        if seg.is_straight:
            segments.append(Line(_complex(seg.start), _complex(seg.end)))
        else:
            segments.append(
                CubicBezier(
                    _complex(seg.start),
                    _complex(seg.control[0]),
                    _complex(seg.control[1]),
                    _complex(seg.end),
                )
            )
    return SvgPath(*segments)
