"""Numeric coordinate parsing for a single command run."""

from __future__ import annotations

import math

from cubicpath.engine.context import Point
from cubicpath.engine.errors import InvalidXError, InvalidYError, PathDataError

# Spelled-out infinities are the only tokens allowed to parse as inf
_INF_LITERALS = frozenset({"inf", "infinity"})


def split_tokens(run: str) -> list[str]:
    """Split a cleaned command run into its whitespace separated tokens."""
    return run.split()


def _parse_float(token: str, command: str, error: type[PathDataError]) -> float:
    # float() also takes digit separators and non-ASCII digits; path data does not
    if "_" in token or not token.isascii():
        raise error(command, token)
    try:
        value = float(token)
    except ValueError:
        raise error(command, token) from None
    if math.isinf(value) and token.lstrip("+-").lower() not in _INF_LITERALS:
        # out of float range, e.g. 1e400
        raise error(command, token)
    return value


def parse_abscissa(token: str, command: str) -> float:
    return _parse_float(token, command, InvalidXError)


def parse_ordinate(token: str, command: str) -> float:
    return _parse_float(token, command, InvalidYError)


def parse_point(x: str, y: str, command: str) -> Point:
    """Parse an x/y token pair. The x token is checked first."""
    return Point(parse_abscissa(x, command), parse_ordinate(y, command))
