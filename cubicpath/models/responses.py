"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cubicpath.engine.context import Path, PathData
from cubicpath.svg.serializer import to_d


class PointModel(BaseModel):
    x: float
    y: float


class SegmentModel(BaseModel):
    start: PointModel
    end: PointModel
    control: list[PointModel]

    @classmethod
    def from_segment(cls, seg: PathData) -> SegmentModel:
        return cls(
            start=PointModel(x=seg.start.x, y=seg.start.y),
            end=PointModel(x=seg.end.x, y=seg.end.y),
            control=[PointModel(x=c.x, y=c.y) for c in seg.control],
        )


class PathModel(BaseModel):
    id: str = ""
    data: list[SegmentModel] = Field(default_factory=list)
    d: str = ""

    @classmethod
    def from_path(cls, path: Path) -> PathModel:
        return cls(
            id=path.id,
            data=[SegmentModel.from_segment(seg) for seg in path.data],
            d=to_d(path.data),
        )


class PathErrorModel(BaseModel):
    kind: str
    command: str
    data: str = ""
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_registered: int = 0


class ParseResponse(BaseModel):
    paths: list[PathModel] = Field(default_factory=list)
    errors: dict[str, PathErrorModel] = Field(default_factory=dict)
    slope_tolerance: float = 0.0
    processing_time_ms: float = 0.0


class ParsePathResponse(BaseModel):
    path: PathModel
    slope_tolerance: float = 0.0
    processing_time_ms: float = 0.0
