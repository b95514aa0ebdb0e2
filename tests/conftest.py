"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from geosections.engine.shapes import LineString, MultiShape, Polygon, Ring
from geosections.utils.geometry import Box


# Closed square, clockwise from the origin: up, right, down, left
SQUARE_RING = [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)]

# Same square without the repeated closing point
OPEN_SQUARE_RING = [(0, 0), (0, 10), (10, 10), (10, 0)]

# Square with a zero-length edge at (0, 10)
DUPLICATE_EDGE_RING = [(0, 0), (0, 10), (0, 10), (10, 10), (10, 0), (0, 0)]

# Monotonic staircase: 30 segments all moving +x +y
STAIRCASE_LINE = [(i, i * 0.5) for i in range(31)]

# Zig-zag line: direction flips on every segment
ZIGZAG_LINE = [(0, 0), (1, 1), (2, 0), (3, 1), (4, 0)]

HOLE_1 = [(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]
HOLE_2 = [(6, 6), (8, 6), (8, 8), (6, 8), (6, 6)]

UNIT_BOX = Box(min_corner=(0.0, 0.0), max_corner=(2.0, 3.0))


def make_wave(n: int = 200) -> np.ndarray:
    """Sampled sine line with frequent direction changes."""
    x = np.linspace(0, 4 * np.pi, n)
    return np.column_stack([x, np.sin(x)])


@pytest.fixture
def square_ring() -> Ring:
    return Ring(SQUARE_RING)


@pytest.fixture
def duplicate_edge_ring() -> Ring:
    return Ring(DUPLICATE_EDGE_RING)


@pytest.fixture
def staircase_line() -> LineString:
    return LineString(STAIRCASE_LINE)


@pytest.fixture
def polygon_with_holes() -> Polygon:
    return Polygon(SQUARE_RING, (HOLE_1, HOLE_2))


@pytest.fixture
def unit_box() -> Box:
    return UNIT_BOX


@pytest.fixture
def mixed_multi() -> MultiShape:
    return MultiShape((Ring(SQUARE_RING), LineString(ZIGZAG_LINE), UNIT_BOX))
