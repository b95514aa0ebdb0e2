"""Polygon sectionalizer — exterior ring first, then each interior ring."""

from __future__ import annotations

from geosections.engine.config import SectionalizeConfig
from geosections.engine.kinds.ranges import sectionalize_ring_points
from geosections.engine.registry import GeometryKind, sectionalizer
from geosections.engine.section import Sections
from geosections.engine.shapes import Polygon


@sectionalizer(kind=GeometryKind.POLYGON, description="Exterior ring then holes")
def sectionalize_polygon(
    poly: Polygon, sections: Sections, config: SectionalizeConfig, multi_index: int = -1
) -> None:
    sectionalize_ring_points(
        poly.exterior, sections, config,
        closed=poly.closed, ring_index=-1, multi_index=multi_index,
    )
    for i, interior in enumerate(poly.interiors):
        sectionalize_ring_points(
            interior, sections, config,
            closed=poly.closed, ring_index=i, multi_index=multi_index,
        )
