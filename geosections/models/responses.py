"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    kinds_registered: int = 0


class KindInfo(BaseModel):
    kind: str
    description: str = ""


class SectionOut(BaseModel):
    id: int
    directions: list[int]
    ring_index: int
    multi_index: int
    # [min..., max...]
    bounding_box: list[float]
    begin_index: int
    end_index: int
    count: int
    range_count: int
    duplicate: bool
    non_duplicate_index: int


class SectionalizeResponse(BaseModel):
    sections: list[SectionOut] = Field(default_factory=list)
    section_count: int = 0
    dimension_count: int = 2
    processing_time_ms: float = 0.0
