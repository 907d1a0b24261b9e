"""Segment builders — one per supported path command.

Each builder consumes the tokens of its run, reads and advances the shared
cursor, and returns cubic segments in absolute coordinates. Uppercase letters
measure from the origin, lowercase ones from the current cursor. Runs reach
a builder already checked against the `group_size` it registers with.
"""

from __future__ import annotations

from cubicpath.engine.context import CursorState, PathData, Point
from cubicpath.engine.coordinates import parse_abscissa, parse_ordinate, parse_point
from cubicpath.engine.registry import CommandKind, command

_ORIGIN = Point()


def _base(letter: str, cursor: CursorState) -> Point:
    return _ORIGIN if letter.isupper() else cursor.current


def _line_steps(pairs: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    segments: list[PathData] = []
    for i in range(0, len(pairs), 2):
        end = _base(letter, cursor) + parse_point(pairs[i], pairs[i + 1], letter)
        segments.append(PathData.line(cursor.current, end))
        cursor.current = end
    return segments


@command(
    kind=CommandKind.MOVE_TO,
    letters="Mm",
    description="Start a new subpath; extra pairs are implicit line-tos",
)
def move_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    start = _base(letter, cursor) + parse_point(tokens[0], tokens[1], letter)
    cursor.move_to(start)

    return _line_steps(tokens[2:], letter, cursor)


@command(kind=CommandKind.LINE_TO, letters="Ll", description="Straight lines to each pair")
def line_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    return _line_steps(tokens, letter, cursor)


@command(
    kind=CommandKind.HORIZONTAL_TO,
    letters="Hh",
    group_size=1,
    description="Horizontal lines, y held at the cursor",
)
def horizontal_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    segments: list[PathData] = []
    for token in tokens:
        base_x = 0.0 if letter.isupper() else cursor.current.x
        end = Point(base_x + parse_abscissa(token, letter), cursor.current.y)
        segments.append(PathData.line(cursor.current, end))
        cursor.current = end
    return segments


@command(
    kind=CommandKind.VERTICAL_TO,
    letters="Vv",
    group_size=1,
    description="Vertical lines, x held at the cursor",
)
def vertical_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    segments: list[PathData] = []
    for token in tokens:
        base_y = 0.0 if letter.isupper() else cursor.current.y
        end = Point(cursor.current.x, base_y + parse_ordinate(token, letter))
        segments.append(PathData.line(cursor.current, end))
        cursor.current = end
    return segments


@command(
    kind=CommandKind.CURVE_TO,
    letters="Cc",
    group_size=6,
    description="Cubic beziers: two control points and an endpoint per group",
)
def curve_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    segments: list[PathData] = []
    for i in range(0, len(tokens), 6):
        c0, c1, end = (parse_point(tokens[k], tokens[k + 1], letter) for k in range(i, i + 6, 2))
        # All three points of a group share one baseline
        base = _base(letter, cursor)
        segment = PathData(start=cursor.current, end=base + end, control=(base + c0, base + c1))
        segments.append(segment)
        cursor.current = segment.end
    return segments


@command(
    kind=CommandKind.CLOSE_PATH,
    letters="Zz",
    group_size=0,
    description="Line back to the subpath start",
)
def close_path(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
    return [cursor.close()]
