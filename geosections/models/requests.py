"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SectionalizeRequest(BaseModel):
    geometry: dict[str, Any] = Field(
        ...,
        description='GeoJSON geometry, or {"type": "Box", "bbox": [minx, miny, maxx, maxy]}',
    )
    tracked_dimension_count: int | None = Field(
        default=None,
        ge=1,
        description="Leading axes used for direction classification (default from settings)",
    )
    max_segments_per_section: int | None = Field(
        default=None,
        ge=1,
        description="Run length after which a section is split (default from settings)",
    )
    epsilon: float | None = Field(
        default=None,
        ge=0,
        description="Relative tolerance for zero-length segments (default: machine epsilon)",
    )
