"""Parser options — controls the post-parse segment optimizer."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ParserOptions:
    # Max absolute slope difference for two adjacent segments to merge.
    # 0 disables merging; negative or NaN values are clamped to 0.
    slope_tolerance: float = 0.0

    def __post_init__(self) -> None:
        tolerance = float(self.slope_tolerance)
        if math.isnan(tolerance) or tolerance < 0:
            tolerance = 0.0
        self.slope_tolerance = tolerance
