"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from geosections import __version__
from geosections.engine.registry import get_registry
from geosections.models.responses import HealthResponse, KindInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        kinds_registered=get_registry().count,
    )


@router.get("/kinds", response_model=list[KindInfo])
async def kinds() -> list[KindInfo]:
    registry = get_registry()
    return [
        KindInfo(kind=kind.value, description=registry.get(kind).description)
        for kind in registry.kinds()
    ]
