"""Shapes the engine can sectionalize, plus adapters from shapely and GeoJSON.

Design:
- Immutable shapes (frozen dataclasses), points held as (N, dims) float arrays
- ``closed`` on rings says whether the stored points already repeat the first point
- Conversion is the only place shapely is touched; the engine works on arrays
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray
from shapely.errors import ShapelyError
from shapely.geometry import shape as shapely_shape
from shapely.geometry.base import BaseGeometry

from geosections.errors import UnsupportedGeometryError
from geosections.utils.geometry import Box, as_points


@dataclass(frozen=True)
class LineString:
    """Open polyline. Never closed by the view."""

    points: NDArray[np.float64]

    def __post_init__(self):
        object.__setattr__(self, "points", as_points(self.points))


@dataclass(frozen=True)
class Ring:
    """Closed boundary. Set ``closed=False`` when the last point does not repeat the first."""

    points: NDArray[np.float64]
    closed: bool = True

    def __post_init__(self):
        object.__setattr__(self, "points", as_points(self.points))


@dataclass(frozen=True)
class Polygon:
    """Exterior ring plus zero or more interior rings (holes)."""

    exterior: NDArray[np.float64]
    interiors: tuple[NDArray[np.float64], ...] = ()
    closed: bool = True

    def __post_init__(self):
        object.__setattr__(self, "exterior", as_points(self.exterior))
        object.__setattr__(self, "interiors", tuple(as_points(r) for r in self.interiors))

    @property
    def rings(self) -> list[Ring]:
        """All boundaries as Rings, exterior first."""
        return [Ring(self.exterior, self.closed)] + [
            Ring(r, self.closed) for r in self.interiors
        ]


@dataclass(frozen=True)
class MultiShape:
    """Collection of independent single shapes, sectionalized in member order."""

    members: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))

    def __len__(self) -> int:
        return len(self.members)


Shape = Union[Box, LineString, Ring, Polygon, MultiShape]


class GeometryKind(enum.Enum):
    BOX = "box"
    LINESTRING = "linestring"
    RING = "ring"
    POLYGON = "polygon"
    MULTI = "multi"


_KIND_OF_TYPE: dict[type, GeometryKind] = {
    Box: GeometryKind.BOX,
    LineString: GeometryKind.LINESTRING,
    Ring: GeometryKind.RING,
    Polygon: GeometryKind.POLYGON,
    MultiShape: GeometryKind.MULTI,
}


def kind_of(geometry: Any) -> GeometryKind:
    """Structural kind of a shape; anything else is unsupported."""
    kind = _KIND_OF_TYPE.get(type(geometry))
    if kind is None:
        raise UnsupportedGeometryError(
            f"Cannot sectionalize {type(geometry).__name__}: unsupported geometry kind"
        )
    return kind


def point_dimensions(geometry: Shape) -> list[int]:
    """Coordinate dimensionality of every non-empty range in ``geometry``."""
    if isinstance(geometry, Box):
        return [geometry.dimension_count]
    if isinstance(geometry, (LineString, Ring)):
        arrays = [geometry.points]
    elif isinstance(geometry, Polygon):
        arrays = [geometry.exterior, *geometry.interiors]
    elif isinstance(geometry, MultiShape):
        return [d for m in geometry.members for d in point_dimensions(m)]
    else:
        return []
    return [a.shape[1] for a in arrays if len(a) > 0]


def from_shapely(geom: BaseGeometry) -> Shape:
    """Convert a shapely geometry. Z coordinates are kept as a third dimension."""
    geom_type = geom.geom_type
    if geom_type == "LineString":
        return LineString(np.asarray(geom.coords))
    if geom_type == "LinearRing":
        return Ring(np.asarray(geom.coords), closed=True)
    if geom_type == "Polygon":
        if geom.is_empty:
            return Polygon(np.empty((0, 2)))
        return Polygon(
            np.asarray(geom.exterior.coords),
            tuple(np.asarray(r.coords) for r in geom.interiors),
            closed=True,
        )
    if geom_type in ("MultiLineString", "MultiPolygon", "GeometryCollection"):
        return MultiShape(tuple(_member_from_shapely(g) for g in geom.geoms))
    raise UnsupportedGeometryError(f"Cannot sectionalize shapely {geom_type}")


def _member_from_shapely(geom: BaseGeometry) -> Any:
    # Nested collections are left as-is and rejected by the dispatcher
    if geom.geom_type in ("MultiLineString", "MultiPolygon", "GeometryCollection"):
        return geom
    return from_shapely(geom)


def from_geojson(mapping: dict[str, Any]) -> Shape:
    """Convert a GeoJSON-like geometry dict.

    Besides the standard types, ``{"type": "Box", "bbox": [minx, miny, maxx, maxy]}``
    yields a Box.
    """
    if not isinstance(mapping, dict) or "type" not in mapping:
        raise UnsupportedGeometryError("Geometry must be a mapping with a 'type' member")

    if mapping["type"] == "Box":
        bbox = mapping.get("bbox")
        if not isinstance(bbox, (list, tuple)) or len(bbox) < 4 or len(bbox) % 2:
            raise UnsupportedGeometryError(f"Box bbox must hold 2*n numbers, got {bbox}")
        half = len(bbox) // 2
        try:
            return Box(
                min_corner=tuple(float(v) for v in bbox[:half]),
                max_corner=tuple(float(v) for v in bbox[half:]),
            )
        except (TypeError, ValueError) as e:
            raise UnsupportedGeometryError(f"Box bbox must hold numbers, got {bbox}") from e

    try:
        geom = shapely_shape(mapping)
    except (ShapelyError, KeyError, ValueError, TypeError, IndexError) as e:
        raise UnsupportedGeometryError(f"Invalid {mapping['type']} geometry: {e}") from e
    return from_shapely(geom)
