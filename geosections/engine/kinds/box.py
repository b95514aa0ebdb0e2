"""Box sectionalizer — the four sides of a 2D box as one closed ring.

Winding is ll → ul → ur → lr → ll, so a box with distinct corners yields
four single-segment sections: up, right, down, left. Coincident corners make
zero-length sides, which end up in duplicate sections instead.
"""

from __future__ import annotations

import math

import numpy as np

from geosections.engine.config import SectionalizeConfig
from geosections.engine.kinds.ranges import sectionalize_range
from geosections.engine.registry import GeometryKind, sectionalizer
from geosections.engine.section import Sections
from geosections.errors import UnsupportedGeometryError
from geosections.utils.geometry import Box


def check_box(box: Box) -> None:
    if box.dimension_count != 2:
        raise UnsupportedGeometryError(
            f"Only 2D boxes can be sectionalized, got {box.dimension_count}D"
        )
    corners = (*box.min_corner, *box.max_corner)
    if not all(math.isfinite(v) for v in corners):
        raise UnsupportedGeometryError(f"Box corners must be finite, got {box.as_list()}")
    if any(lo > hi for lo, hi in zip(box.min_corner, box.max_corner)):
        raise UnsupportedGeometryError(
            f"Box min_corner must not exceed max_corner, got {box.as_list()}"
        )


def box_ring(box: Box) -> np.ndarray:
    """The 5-point closed ring of a 2D box."""
    check_box(box)
    ll, lr, ul, ur = box.corners()
    return np.vstack([ll, ul, ur, lr, ll])


@sectionalizer(kind=GeometryKind.BOX, check=check_box, description="Four sides of a 2D box")
def sectionalize_box(
    box: Box, sections: Sections, config: SectionalizeConfig, multi_index: int = -1
) -> None:
    sectionalize_range(box_ring(box), sections, config, multi_index=multi_index)
