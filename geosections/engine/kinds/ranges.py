"""Range sectionalizers — one ring or line through the builder.

Rings are seen through the closeable view so the last segment returns to the
start; line strings are used exactly as stored.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from geosections.engine.builder import SectionBuilder
from geosections.engine.config import SectionalizeConfig
from geosections.engine.registry import GeometryKind, sectionalizer
from geosections.engine.section import Sections
from geosections.engine.shapes import LineString, Ring
from geosections.utils.geometry import closeable_view


def sectionalize_range(
    points: NDArray[np.float64],
    sections: Sections,
    config: SectionalizeConfig,
    ring_index: int = -1,
    multi_index: int = -1,
) -> None:
    """Append the sections of one point range to ``sections``.

    ``points`` is traversed as given. Zero or one point produces nothing.
    """
    if len(points) < 2:
        return

    builder = SectionBuilder(sections, config, ring_index=ring_index, multi_index=multi_index)
    builder.apply(points, index=0)
    builder.finish()


def sectionalize_ring_points(
    points: NDArray[np.float64],
    sections: Sections,
    config: SectionalizeConfig,
    closed: bool = True,
    ring_index: int = -1,
    multi_index: int = -1,
) -> None:
    """Sectionalize a ring, appending its first point when it is stored open."""
    sectionalize_range(
        closeable_view(points, closed), sections, config,
        ring_index=ring_index, multi_index=multi_index,
    )


@sectionalizer(kind=GeometryKind.LINESTRING, description="Open polyline, never closed")
def sectionalize_linestring(
    line: LineString, sections: Sections, config: SectionalizeConfig, multi_index: int = -1
) -> None:
    sectionalize_range(line.points, sections, config, multi_index=multi_index)


@sectionalizer(kind=GeometryKind.RING, description="Closed boundary, viewed closed")
def sectionalize_ring(
    ring: Ring, sections: Sections, config: SectionalizeConfig, multi_index: int = -1
) -> None:
    sectionalize_ring_points(ring.points, sections, config, closed=ring.closed, multi_index=multi_index)
