"""POST /api/sectionalize — monotonic sections of a GeoJSON geometry."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from geosections.config import Settings
from geosections.dependencies import get_settings
from geosections.engine.config import SectionalizeConfig
from geosections.engine.dispatch import sectionalize
from geosections.engine.shapes import from_geojson
from geosections.errors import SectionalizeError
from geosections.models.requests import SectionalizeRequest
from geosections.models.responses import SectionalizeResponse, SectionOut

logger = logging.getLogger(__name__)

router = APIRouter()


def _config_for(req: SectionalizeRequest, settings: Settings) -> SectionalizeConfig:
    return SectionalizeConfig(
        tracked_dimension_count=(
            req.tracked_dimension_count or settings.default_tracked_dimension_count
        ),
        max_segments_per_section=(
            req.max_segments_per_section or settings.default_max_segments_per_section
        ),
        epsilon=req.epsilon,
    )


@router.post("/sectionalize", response_model=SectionalizeResponse)
async def sectionalize_geometry(
    req: SectionalizeRequest,
    settings: Settings = Depends(get_settings),
) -> SectionalizeResponse:
    start = time.perf_counter()

    try:
        config = _config_for(req, settings)
        geometry = from_geojson(req.geometry)
        sections = sectionalize(geometry, config)
    except SectionalizeError as e:
        logger.info("Rejected %s geometry: %s", req.geometry.get("type"), e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Sectionalized %s into %d sections in %.1fms",
        req.geometry.get("type"),
        len(sections),
        elapsed,
    )

    return SectionalizeResponse(
        sections=[SectionOut(**s.to_dict()) for s in sections],
        section_count=len(sections),
        dimension_count=sections.dimension_count,
        processing_time_ms=round(elapsed, 3),
    )
