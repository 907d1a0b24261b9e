"""Segment optimizer — merges runs of nearly collinear segments.

Greedy single pass: the first segment of a run is the anchor, and following
segments join the run while the absolute difference between their slope
magnitudes and the anchor's stays strictly below the tolerance. A run of more
than one segment collapses into one straight segment from the first start to
the last end.
"""

from __future__ import annotations

import logging
import math

from cubicpath.engine.context import PathData

logger = logging.getLogger(__name__)


def slope_difference(anchor: PathData, candidate: PathData) -> float:
    """Difference between the slope magnitudes of two segments.

    Two vertical segments compare as an exact match. A vertical segment against a
    finite slope never matches, and zero-length segments yield NaN.
    """
    anchor_slope = abs(anchor.slope)
    candidate_slope = abs(candidate.slope)
    if math.isinf(anchor_slope) and math.isinf(candidate_slope):
        return 0.0
    return abs(candidate_slope - anchor_slope)


def optimize_segments(data: list[PathData], slope_tolerance: float) -> list[PathData]:
    """Return a new segment list with collinear runs merged."""
    optimized: list[PathData] = []
    i = 0
    while i < len(data):
        anchor = data[i]
        j = i + 1
        while j < len(data) and slope_difference(anchor, data[j]) < slope_tolerance:
            j += 1

        if j - i == 1:
            optimized.append(anchor)
        else:
            optimized.append(PathData.line(anchor.start, data[j - 1].end))
        i = j

    if len(optimized) != len(data):
        logger.debug(
            "Optimizer merged %d segments into %d (tolerance %g)",
            len(data),
            len(optimized),
            slope_tolerance,
        )
    return optimized
