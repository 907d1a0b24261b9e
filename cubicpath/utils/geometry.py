"""Leaf-node geometry helpers over segment lists. No engine logic."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from cubicpath.engine.context import PathData


def segments_to_array(data: list[PathData]) -> NDArray[np.float64]:
    """Stack segments into an Nx4x2 array of (start, control0, control1, end)."""
    if not data:
        return np.empty((0, 4, 2))
    return np.array(
        [
            [
                seg.start.as_tuple(),
                seg.control[0].as_tuple(),
                seg.control[1].as_tuple(),
                seg.end.as_tuple(),
            ]
            for seg in data
        ],
        dtype=np.float64,
    )


def sample_segments(data: list[PathData], samples_per_segment: int = 12) -> NDArray[np.float64]:
    """Evaluate every cubic at evenly spaced t and return an Mx2 point array.

    Each segment contributes ``samples_per_segment`` points over t in [0, 1).
    The final endpoint of the last segment closes the sequence.
    """
    arr = segments_to_array(data)
    if len(arr) == 0:
        return np.empty((0, 2))

    t = np.linspace(0.0, 1.0, samples_per_segment, endpoint=False)[:, None]
    mt = 1.0 - t
    # Bernstein basis weights, shape (samples, 1)
    b0, b1, b2, b3 = mt**3, 3 * mt**2 * t, 3 * mt * t**2, t**3

    points = (
        b0[None] * arr[:, 0][:, None]
        + b1[None] * arr[:, 1][:, None]
        + b2[None] * arr[:, 2][:, None]
        + b3[None] * arr[:, 3][:, None]
    )
    points = points.reshape(-1, 2)
    return np.vstack([points, arr[-1, 3]])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of the polyline through the points."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))
