"""Dispatcher — the public sectionalize() entry point.

Resolves the sectionalizer for the geometry's kind (failing before traversal
for anything unsupported), runs it into a fresh Sections list and numbers the
result.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from shapely.geometry.base import BaseGeometry

# Importing the kinds package fires the @sectionalizer decorators
import geosections.engine.kinds  # noqa: F401
from geosections.engine.config import SectionalizeConfig
from geosections.engine.registry import SectionalizerRegistry, get_registry
from geosections.engine.section import Sections
from geosections.engine.shapes import Shape, from_shapely, point_dimensions
from geosections.errors import InvalidConfigError

logger = logging.getLogger(__name__)


def assign_section_ids(sections: Sections) -> Sections:
    """Number sections 0, 1, 2, ... in output order."""
    for index, section in enumerate(sections):
        section.id = index
    return sections


def as_shape(geometry: Any) -> Shape:
    """Accept engine shapes as-is and convert shapely geometries."""
    if isinstance(geometry, BaseGeometry):
        return from_shapely(geometry)
    return geometry


def _check_dimensions(geometry: Shape, config: SectionalizeConfig) -> None:
    for dims in point_dimensions(geometry):
        if dims < config.tracked_dimension_count:
            raise InvalidConfigError(
                f"tracked_dimension_count={config.tracked_dimension_count} exceeds "
                f"point dimensionality {dims}"
            )


def sectionalize(
    geometry: Any,
    config: SectionalizeConfig | None = None,
    registry: SectionalizerRegistry | None = None,
) -> Sections:
    """Split ``geometry`` into monotonic sections."""
    config = config or SectionalizeConfig()
    registry = registry or get_registry()
    start = time.perf_counter()

    shape = as_shape(geometry)
    spec = registry.resolve(shape)
    _check_dimensions(shape, config)

    sections = Sections(config.tracked_dimension_count)
    spec.fn(shape, sections, config, -1)
    assign_section_ids(sections)

    logger.debug(
        "Sectionalized %s: %d sections (%d duplicate) in %.2fms",
        spec.kind.value,
        len(sections),
        sections.duplicate_count,
        (time.perf_counter() - start) * 1000,
    )
    return sections
