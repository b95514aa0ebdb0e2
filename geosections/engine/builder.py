"""Section builder — the accumulation loop that cuts one point range into sections.

Walks consecutive point pairs, keeps one in-progress Section and pushes it to
the output whenever the direction vector changes or the run has grown past
``max_segments_per_section``. The split happens on the segment *after* the
count exceeds the maximum, so a run can hold ``max + 1`` segments.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from geosections.engine.config import SectionalizeConfig
from geosections.engine.direction import is_duplicate_segment, range_directions
from geosections.engine.section import DUPLICATE_DIRECTION, Section, Sections
from geosections.utils.geometry import combine


class SectionBuilder:
    """Stateful builder for the sections of one ring or line.

    ``apply`` may be called again with the returned cursor to continue a
    range; ``finish`` pushes whatever run is still open.
    """

    def __init__(
        self,
        sections: Sections,
        config: SectionalizeConfig,
        ring_index: int = -1,
        multi_index: int = -1,
    ) -> None:
        self.sections = sections
        self.config = config
        self.ring_index = ring_index
        self.multi_index = multi_index
        self.dimension_count = config.tracked_dimension_count
        self.section = Section.empty(self.dimension_count)
        self.index = 0
        self.ndi = 0  # non-duplicate segment counter

    def apply(self, points: NDArray[np.float64], index: int | None = None) -> int:
        """Consume the segments of ``points`` starting at segment ``index``.

        Returns the cursor after the last consumed segment.
        """
        if index is not None:
            self.index = index
        if len(points) <= self.index:
            return self.index
        if self.index == 0:
            self.ndi = 0

        dims = self.dimension_count
        max_count = self.config.max_segments_per_section
        range_count = len(points)
        directions = range_directions(points[self.index:], dims)
        duplicate_directions = (DUPLICATE_DIRECTION,) * dims

        for row in directions:
            previous = points[self.index]
            current = points[self.index + 1]
            direction = tuple(int(v) for v in row)

            # Dimension 0 unchanged: recheck all real dimensions for a zero-length segment
            duplicate = False
            if direction[0] == 0 and is_duplicate_segment(previous, current, self.config.epsilon):
                duplicate = True
                direction = duplicate_directions

            section = self.section
            if section.count > 0 and (
                direction != section.directions or section.count > max_count
            ):
                self.sections.append(section)
                section = self.section = Section.empty(dims)

            if section.count == 0:
                section.begin_index = self.index
                section.ring_index = self.ring_index
                section.multi_index = self.multi_index
                section.duplicate = duplicate
                section.non_duplicate_index = self.ndi
                section.range_count = range_count
                section.directions = direction
                section.bounding_box = combine(section.bounding_box, previous)

            section.bounding_box = combine(section.bounding_box, current)
            section.end_index = self.index + 1
            section.count += 1
            if not duplicate:
                self.ndi += 1
            self.index += 1

        return self.index

    def finish(self) -> Sections:
        """Push the open run, if any, and return the output list."""
        if self.section.count > 0:
            self.sections.append(self.section)
            self.section = Section.empty(self.dimension_count)
        return self.sections
