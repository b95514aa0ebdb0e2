"""Sectionalize engine: monotonic sections of lines, rings, polygons and boxes."""

from geosections.engine.config import MAX_SEGMENTS_PER_SECTION, SectionalizeConfig
from geosections.engine.section import DUPLICATE_DIRECTION, Section, Sections
from geosections.engine.shapes import (
    GeometryKind,
    LineString,
    MultiShape,
    Polygon,
    Ring,
    from_geojson,
    from_shapely,
)
from geosections.engine.registry import get_registry, sectionalizer
from geosections.engine.dispatch import assign_section_ids, sectionalize

__all__ = [
    "MAX_SEGMENTS_PER_SECTION",
    "SectionalizeConfig",
    "DUPLICATE_DIRECTION",
    "Section",
    "Sections",
    "GeometryKind",
    "LineString",
    "MultiShape",
    "Polygon",
    "Ring",
    "from_geojson",
    "from_shapely",
    "get_registry",
    "sectionalizer",
    "assign_section_ids",
    "sectionalize",
]
