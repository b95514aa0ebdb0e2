"""Multi-shape sectionalizer — each member in order, tagged with its multi_index."""

from __future__ import annotations

from geosections.engine.config import SectionalizeConfig
from geosections.engine.registry import GeometryKind, SectionalizerSpec, get_registry, sectionalizer
from geosections.engine.section import Sections
from geosections.engine.shapes import MultiShape, kind_of
from geosections.errors import UnsupportedGeometryError


def resolve_members(multi: MultiShape) -> list[SectionalizerSpec]:
    """Sectionalizer per member, resolved up front. Nested multi-shapes are rejected."""
    registry = get_registry()
    specs = []
    for i, member in enumerate(multi.members):
        if kind_of(member) is GeometryKind.MULTI:
            raise UnsupportedGeometryError(f"Multi-shape member {i} is itself a multi-shape")
        specs.append(registry.resolve(member))
    return specs


def check_multi(multi: MultiShape) -> None:
    resolve_members(multi)


@sectionalizer(kind=GeometryKind.MULTI, check=check_multi, description="Members in order")
def sectionalize_multi(
    multi: MultiShape, sections: Sections, config: SectionalizeConfig, multi_index: int = -1
) -> None:
    specs = resolve_members(multi)
    for i, (member, spec) in enumerate(zip(multi.members, specs)):
        spec.fn(member, sections, config, i)
