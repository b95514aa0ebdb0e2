"""Direction classification and duplicate detection for segments.

Directions are exact sign tests on the tracked dimensions. The duplicate test
is tolerance-based and spans every coordinate of the points, which may be more
than the tracked dimensions.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from geosections.utils.geometry import math_equals


def segment_directions(start, end, dimension_count: int) -> tuple[int, ...]:
    """Sign of (end - start) for each of the first ``dimension_count`` axes."""
    directions = []
    for d in range(dimension_count):
        diff = end[d] - start[d]
        directions.append(1 if diff > 0 else -1 if diff < 0 else 0)
    return tuple(directions)


def range_directions(points: NDArray[np.float64], dimension_count: int) -> NDArray[np.int64]:
    """Directions of every consecutive segment of ``points`` at once, shape (M, D)."""
    if len(points) < 2:
        return np.empty((0, dimension_count), dtype=np.int64)
    diffs = np.diff(points[:, :dimension_count], axis=0)
    return np.sign(diffs).astype(np.int64)


def is_duplicate_segment(start, end, epsilon: float | None = None) -> bool:
    """True if start and end coincide within tolerance in every real coordinate."""
    for a, b in zip(start, end):
        if not math_equals(b - a, 0.0, epsilon):
            return False
    return True
