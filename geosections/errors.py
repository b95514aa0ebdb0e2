"""Exceptions raised by the sectionalize engine."""

from __future__ import annotations


class SectionalizeError(ValueError):
    """Base class for every error the engine raises."""


class UnsupportedGeometryError(SectionalizeError):
    """The geometry's kind has no sectionalizer, or cannot be converted to one."""


class InvalidConfigError(SectionalizeError):
    """Sectionalize configuration is out of range for the requested geometry."""
