"""POST /api/parse — SVG documents and single d attributes to cubic segments."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

from fastapi import APIRouter, Depends, HTTPException

from cubicpath.config import Settings
from cubicpath.dependencies import get_settings
from cubicpath.engine.errors import PathDataError
from cubicpath.engine.options import ParserOptions
from cubicpath.engine.pipeline import PathElement, create_pipeline
from cubicpath.models.requests import ParsePathRequest, ParseRequest
from cubicpath.models.responses import PathErrorModel, PathModel, ParsePathResponse, ParseResponse
from cubicpath.svg.parser import clean_path_data, iter_path_elements

logger = logging.getLogger(__name__)

router = APIRouter()


def _options(tolerance: float | None, cfg: Settings) -> ParserOptions:
    return ParserOptions(slope_tolerance=cfg.cubicpath_slope_tolerance if tolerance is None else tolerance)


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, cfg: Settings = Depends(get_settings)) -> ParseResponse:
    start = time.perf_counter()
    options = _options(req.slope_tolerance, cfg)
    pipeline = create_pipeline(options, cfg.cubicpath_workers)

    try:
        elements = list(iter_path_elements(req.svg))
    except ET.ParseError as e:
        raise HTTPException(status_code=422, detail={"kind": "xml", "message": str(e)}) from e

    errors: dict[str, PathErrorModel] = {}
    if req.isolate_errors:
        result = pipeline.run_isolated(elements)
        paths = result.paths
        errors = {key: PathErrorModel(**err.to_dict()) for key, err in result.errors.items()}
    else:
        try:
            paths = pipeline.run(elements)
        except PathDataError as e:
            logger.info("Rejected SVG: %s", e)
            raise HTTPException(status_code=422, detail=e.to_dict()) from e

    elapsed = (time.perf_counter() - start) * 1000
    return ParseResponse(
        paths=[PathModel.from_path(p) for p in paths],
        errors=errors,
        slope_tolerance=options.slope_tolerance,
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/parse/path", response_model=ParsePathResponse)
async def parse_path(req: ParsePathRequest, cfg: Settings = Depends(get_settings)) -> ParsePathResponse:
    start = time.perf_counter()
    options = _options(req.slope_tolerance, cfg)

    try:
        path = create_pipeline(options).parse_path(PathElement(id=req.id, d=clean_path_data(req.d)))
    except PathDataError as e:
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    elapsed = (time.perf_counter() - start) * 1000
    return ParsePathResponse(
        path=PathModel.from_path(path),
        slope_tolerance=options.slope_tolerance,
        processing_time_ms=round(elapsed, 3),
    )
