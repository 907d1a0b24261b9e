"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample documents

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path id="square" d="M0 0 H10 V10 Z"/>
</svg>'''

STRAIGHT_RUN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path id="run" d="M0 0 L10 0 L20 0 L20 10"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path id="first" d="M0,0 L10,10"/>
  <g id="outer">
    <path id="second" d="M 20 20 l 5 0"/>
    <circle cx="50" cy="50" r="20"/>
    <g>
      <path id="third" d="M30 30 C 31 31, 32 32, 33 33"/>
    </g>
  </g>
  <path d="m 1 1 v 4"/>
</svg>'''

QUADRATIC_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path id="ok" d="M0 0 L1 1"/>
  <path id="quad" d="M0 0 Q 5 5 10 0"/>
  <path id="bad-x" d="M0 0 L x 1"/>
</svg>'''

EMPTY_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path id="blank" d=""/>
  <path id="move-only" d="M 3 3"/>
  <path id="line" d="M 3 3 L 4 4"/>
</svg>'''


def ends(segments) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """(start, end) tuples for compact assertions."""
    return [(s.start.as_tuple(), s.end.as_tuple()) for s in segments]


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG


@pytest.fixture
def quadratic_svg() -> str:
    return QUADRATIC_SVG
