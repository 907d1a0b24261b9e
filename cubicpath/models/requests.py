"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    slope_tolerance: float | None = Field(
        default=None,
        description="Optimizer slope tolerance; server default when omitted, negatives act as 0",
    )
    isolate_errors: bool = Field(
        default=False,
        description="Report malformed paths individually instead of failing the request",
    )


class ParsePathRequest(BaseModel):
    d: str = Field(..., description="Raw d attribute")
    id: str = Field(default="", description="Element id carried through to the result")
    slope_tolerance: float | None = Field(default=None, description="Optimizer slope tolerance")
