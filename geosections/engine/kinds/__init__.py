"""Per-kind sectionalizers. Importing this package registers all of them."""

from geosections.engine.kinds import box, multi, polygon, ranges

__all__ = ["box", "multi", "polygon", "ranges"]
