"""geosections — split shapes into monotonic sections for fast box pre-filtering."""

from geosections.engine import (
    MAX_SEGMENTS_PER_SECTION,
    LineString,
    MultiShape,
    Polygon,
    Ring,
    Section,
    Sections,
    SectionalizeConfig,
    from_geojson,
    from_shapely,
    sectionalize,
)
from geosections.errors import InvalidConfigError, SectionalizeError, UnsupportedGeometryError
from geosections.utils.geometry import Box, combine

__version__ = "0.1.0"

__all__ = [
    "MAX_SEGMENTS_PER_SECTION",
    "Box",
    "LineString",
    "MultiShape",
    "Polygon",
    "Ring",
    "Section",
    "Sections",
    "SectionalizeConfig",
    "combine",
    "from_geojson",
    "from_shapely",
    "sectionalize",
    "InvalidConfigError",
    "SectionalizeError",
    "UnsupportedGeometryError",
]
