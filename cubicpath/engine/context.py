"""Engine data model — points, cubic segments, paths and the per-parse cursor.

Every segment is a cubic bezier in absolute coordinates. Straight commands
store both control points at the segment midpoint so consumers never need to
know which command produced a segment.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def midpoint(self, other: Point) -> Point:
        return Point(0.5 * (self.x + other.x), 0.5 * (self.y + other.y))

    def slope(self, other: Point) -> float:
        """Slope of the line towards ``other``.

        Vertical lines give an infinity signed like ``dy``; coincident points give NaN.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        if dx == 0:
            if dy == 0:
                return math.nan
            return math.copysign(math.inf, dy)
        return dy / dx

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PathData:
    """One cubic bezier segment."""

    start: Point
    end: Point
    control: tuple[Point, Point]

    @classmethod
    def line(cls, start: Point, end: Point) -> PathData:
        middle = start.midpoint(end)
        return cls(start=start, end=end, control=(middle, middle))

    @property
    def is_straight(self) -> bool:
        middle = self.start.midpoint(self.end)
        return self.control[0] == middle and self.control[1] == middle

    @property
    def slope(self) -> float:
        return self.start.slope(self.end)


@dataclass
class Path:
    """A parsed ``<path>`` element: its id plus segments in draw order."""

    id: str = ""
    data: list[PathData] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[PathData]:
        return iter(self.data)


@dataclass
class CursorState:
    """Pen position for a single parse call. Never shared between paths."""

    # Current absolute pen position
    current: Point = field(default_factory=Point)
    # Destination of the most recent MoveTo, target of ClosePath
    initial: Point = field(default_factory=Point)

    def move_to(self, point: Point) -> None:
        self.current = point
        self.initial = point

    def close(self) -> PathData:
        segment = PathData.line(self.current, self.initial)
        self.current = self.initial
        return segment
