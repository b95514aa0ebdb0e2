"""Section — one monotonic run of segments, and the ordered collection of them.

A Section is created empty, grows while the builder appends segments, and is
left alone once pushed into a Sections list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from geosections.utils.geometry import Box

# Stored in every direction slot of a duplicate section. Any value outside
# {-1, 0, 1} works; it only has to never equal a real direction.
DUPLICATE_DIRECTION = -99


@dataclass
class Section:
    """A run of consecutive segments sharing one direction-sign vector."""

    # Unique within a Sections list; -1 until ids are assigned
    id: int = -1
    # Sign of coordinate change per tracked dimension
    directions: tuple[int, ...] = ()
    # -1 = exterior ring / line / box, 0.. = interior rings
    ring_index: int = -1
    # -1 = single shape, 0.. = member of a multi-shape
    multi_index: int = -1
    bounding_box: Box = field(default_factory=lambda: Box.inverse(2))
    # Half-open segment range [begin_index, end_index) in the viewed range
    begin_index: int = -1
    end_index: int = -1
    count: int = 0
    # Point count of the viewed range this section was cut from
    range_count: int = 0
    duplicate: bool = False
    # Non-duplicate segments seen in the range before this section started
    non_duplicate_index: int = -1

    @classmethod
    def empty(cls, dimension_count: int) -> Section:
        return cls(
            directions=(0,) * dimension_count,
            bounding_box=Box.inverse(dimension_count),
        )

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def segment_indices(self) -> range:
        if self.is_empty:
            return range(0)
        return range(self.begin_index, self.end_index)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "directions": list(self.directions),
            "ring_index": self.ring_index,
            "multi_index": self.multi_index,
            "bounding_box": self.bounding_box.as_list(),
            "begin_index": self.begin_index,
            "end_index": self.end_index,
            "count": self.count,
            "range_count": self.range_count,
            "duplicate": self.duplicate,
            "non_duplicate_index": self.non_duplicate_index,
        }


class Sections(list):
    """Ordered sections of one geometry, in traversal order."""

    def __init__(self, dimension_count: int, iterable=()) -> None:
        super().__init__(iterable)
        self.dimension_count = dimension_count

    def for_ring(self, ring_index: int, multi_index: int = -1) -> list[Section]:
        return [
            s for s in self
            if s.ring_index == ring_index and s.multi_index == multi_index
        ]

    @property
    def duplicate_count(self) -> int:
        return sum(1 for s in self if s.duplicate)
