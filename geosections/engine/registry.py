"""Sectionalizer registry — one sectionalizer per geometry kind, registered via decorator.

Usage:
    @sectionalizer(kind=GeometryKind.RING, description="Closed boundary")
    def sectionalize_ring(ring: Ring, sections: Sections, config, multi_index: int = -1) -> None:
        ...

Lookup happens before any traversal, so an unsupported kind fails at setup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from geosections.engine.shapes import GeometryKind, kind_of
from geosections.errors import UnsupportedGeometryError

if TYPE_CHECKING:
    from geosections.engine.config import SectionalizeConfig
    from geosections.engine.section import Sections

logger = logging.getLogger(__name__)

SectionalizeFn = Callable[[Any, "Sections", "SectionalizeConfig", int], None]


@dataclass
class SectionalizerSpec:
    kind: GeometryKind
    fn: SectionalizeFn
    # Optional setup-time validation; raises before any section is built
    check: Callable[[Any], None] | None = None
    description: str = ""


class SectionalizerRegistry:
    """Maps each GeometryKind to the function that sectionalizes it."""

    def __init__(self) -> None:
        self._sectionalizers: dict[GeometryKind, SectionalizerSpec] = {}

    def register(self, spec: SectionalizerSpec) -> None:
        if spec.kind in self._sectionalizers:
            raise ValueError(f"Duplicate sectionalizer for kind: {spec.kind.value}")
        self._sectionalizers[spec.kind] = spec
        logger.debug("Registered sectionalizer for %s", spec.kind.value)

    def get(self, kind: GeometryKind) -> SectionalizerSpec:
        try:
            return self._sectionalizers[kind]
        except KeyError:
            raise UnsupportedGeometryError(
                f"No sectionalizer registered for geometry kind {kind.value!r}"
            ) from None

    def resolve(self, geometry: Any) -> SectionalizerSpec:
        """Pick and pre-validate the sectionalizer for ``geometry``."""
        spec = self.get(kind_of(geometry))
        if spec.check is not None:
            spec.check(geometry)
        return spec

    def kinds(self) -> list[GeometryKind]:
        return sorted(self._sectionalizers, key=lambda k: k.value)

    @property
    def count(self) -> int:
        return len(self._sectionalizers)


# Module-level singleton
_registry = SectionalizerRegistry()


def get_registry() -> SectionalizerRegistry:
    return _registry


def sectionalizer(
    *,
    kind: GeometryKind,
    check: Callable[[Any], None] | None = None,
    description: str = "",
):
    """Decorator to register a sectionalizer function for one geometry kind."""

    def decorator(fn: SectionalizeFn):
        spec = SectionalizerSpec(kind=kind, fn=fn, check=check, description=description)
        _registry.register(spec)
        return fn

    return decorator
