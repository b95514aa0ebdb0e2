"""Tests for the section builder loop."""

import numpy as np

from geosections.engine.builder import SectionBuilder
from geosections.engine.config import SectionalizeConfig
from geosections.engine.section import DUPLICATE_DIRECTION, Sections
from tests.conftest import DUPLICATE_EDGE_RING, STAIRCASE_LINE, ZIGZAG_LINE


def _build(points, config=None, **kwargs) -> Sections:
    config = config or SectionalizeConfig()
    sections = Sections(config.tracked_dimension_count)
    builder = SectionBuilder(sections, config, **kwargs)
    builder.apply(np.asarray(points, dtype=float), index=0)
    return builder.finish()


def test_split_happens_after_max_plus_one():
    sections = _build(STAIRCASE_LINE, SectionalizeConfig(max_segments_per_section=10))
    assert [s.count for s in sections] == [11, 11, 8]
    assert [(s.begin_index, s.end_index) for s in sections] == [(0, 11), (11, 22), (22, 30)]
    assert all(s.directions == (1, 1) for s in sections)


def test_small_max_count():
    sections = _build(STAIRCASE_LINE, SectionalizeConfig(max_segments_per_section=1))
    assert [s.count for s in sections] == [2] * 15


def test_direction_change_flushes():
    sections = _build(ZIGZAG_LINE)
    assert [s.directions for s in sections] == [(1, 1), (1, -1), (1, 1), (1, -1)]
    assert all(s.count == 1 for s in sections)


def test_start_bookkeeping():
    sections = _build(ZIGZAG_LINE, ring_index=3, multi_index=7)
    for s in sections:
        assert s.ring_index == 3
        assert s.multi_index == 7
        assert s.range_count == len(ZIGZAG_LINE)
        assert s.id == -1
    assert [s.non_duplicate_index for s in sections] == [0, 1, 2, 3]


def test_duplicate_segment_isolated():
    sections = _build(DUPLICATE_EDGE_RING)
    assert [s.duplicate for s in sections] == [False, True, False, False, False]
    dup = sections[1]
    assert dup.count == 1
    assert dup.directions == (DUPLICATE_DIRECTION, DUPLICATE_DIRECTION)
    assert (dup.begin_index, dup.end_index) == (1, 2)
    # The zero-length edge does not advance the non-duplicate counter
    assert [s.non_duplicate_index for s in sections] == [0, 1, 1, 2, 3]


def test_consecutive_duplicates_share_one_section():
    pts = [(0, 0), (1, 0), (1, 0), (1, 0), (1, 0), (2, 0)]
    sections = _build(pts)
    assert [s.count for s in sections] == [1, 3, 1]
    assert [s.duplicate for s in sections] == [False, True, False]


def test_vertical_segment_is_not_duplicate():
    sections = _build([(0, 0), (0, 5)])
    assert len(sections) == 1
    assert not sections[0].duplicate
    assert sections[0].directions == (0, 1)


def test_trailing_dimension_breaks_duplicate():
    # x and y unchanged, z moves: not a duplicate, direction (0, 0) on tracked axes
    pts = [(0, 0, 0), (0, 0, 5), (1, 0, 5), (1, 0, 5)]
    sections = _build(pts, SectionalizeConfig(tracked_dimension_count=2))
    assert [s.duplicate for s in sections] == [False, False, True]
    assert sections[0].directions == (0, 0)


def test_bounding_box_covers_segments():
    sections = _build(ZIGZAG_LINE)
    assert sections[0].bounding_box.min_corner == (0.0, 0.0)
    assert sections[0].bounding_box.max_corner == (1.0, 1.0)


def test_apply_past_end_is_noop():
    config = SectionalizeConfig()
    sections = Sections(2)
    builder = SectionBuilder(sections, config)
    pts = np.asarray(ZIGZAG_LINE, dtype=float)
    assert builder.apply(pts, index=len(pts)) == len(pts)
    assert len(builder.finish()) == 0


def test_apply_returns_cursor():
    config = SectionalizeConfig()
    builder = SectionBuilder(Sections(2), config)
    pts = np.asarray(ZIGZAG_LINE, dtype=float)
    assert builder.apply(pts) == len(pts) - 1
    assert builder.ndi == len(pts) - 1


def test_finish_twice_does_not_duplicate():
    config = SectionalizeConfig()
    builder = SectionBuilder(Sections(2), config)
    builder.apply(np.asarray(ZIGZAG_LINE, dtype=float))
    builder.finish()
    assert len(builder.finish()) == 4
