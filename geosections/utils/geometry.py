"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from geosections.errors import UnsupportedGeometryError

_FLOAT_EPSILON = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class Box:
    """Axis-aligned box as (min_corner, max_corner), any dimensionality."""

    min_corner: tuple[float, ...]
    max_corner: tuple[float, ...]

    @classmethod
    def inverse(cls, dimension_count: int) -> Box:
        """The empty box: +inf minima, -inf maxima. Identity element of combine()."""
        return cls(
            min_corner=(math.inf,) * dimension_count,
            max_corner=(-math.inf,) * dimension_count,
        )

    @property
    def dimension_count(self) -> int:
        return len(self.min_corner)

    @property
    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min_corner, self.max_corner))

    def contains(self, point) -> bool:
        """Closed containment test over the box's dimensions."""
        return all(
            lo <= float(point[d]) <= hi
            for d, (lo, hi) in enumerate(zip(self.min_corner, self.max_corner))
        )

    def corners(self) -> tuple[NDArray[np.float64], ...]:
        """2D corners as (lower-left, lower-right, upper-left, upper-right)."""
        (xmin, ymin), (xmax, ymax) = self.min_corner, self.max_corner
        return (
            np.array([xmin, ymin]),
            np.array([xmax, ymin]),
            np.array([xmin, ymax]),
            np.array([xmax, ymax]),
        )

    def as_list(self) -> list[float]:
        """Flat [min..., max...] form, same layout as a GeoJSON bbox."""
        return [*self.min_corner, *self.max_corner]


def combine(box: Box, point) -> Box:
    """Return the smallest box covering ``box`` and ``point``.

    Only the box's dimensions are considered; extra point coordinates are ignored.
    """
    n = box.dimension_count
    coords = np.asarray(point, dtype=np.float64)[:n]
    return Box(
        min_corner=tuple(float(v) for v in np.minimum(box.min_corner, coords)),
        max_corner=tuple(float(v) for v in np.maximum(box.max_corner, coords)),
    )


def math_equals(a, b, epsilon: float | None = None) -> bool:
    """Tolerance-aware equality: exact for integers, relative epsilon for floats."""
    if isinstance(a, (int, np.integer)) and isinstance(b, (int, np.integer)):
        return a == b
    eps = _FLOAT_EPSILON if epsilon is None else epsilon
    a = float(a)
    b = float(b)
    if a == b:
        return True
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def closeable_view(points: NDArray[np.float64], closed: bool) -> NDArray[np.float64]:
    """View a ring as closed.

    ``closed`` says whether the stored points already repeat the first point.
    An open ring gets its first point appended; a closed one is returned as-is.
    """
    if closed or len(points) == 0:
        return points
    return np.vstack([points, points[:1]])


def as_points(coords) -> NDArray[np.float64]:
    """Coerce a coordinate sequence to an (N, dims) float array of finite values."""
    try:
        arr = np.asarray(coords, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise UnsupportedGeometryError(f"points must be numeric: {e}") from e
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2:
        raise UnsupportedGeometryError(
            f"points must be an (N, dims) array, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise UnsupportedGeometryError("points must not contain NaN or infinite coordinates")
    return arr
