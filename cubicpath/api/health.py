"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

import cubicpath.engine.commands  # noqa: F401  (registers the builders)
from cubicpath.engine.registry import get_registry
from cubicpath.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        commands_registered=get_registry().count,
    )
