"""Sectionalize configuration — controls how runs are classified and split."""

from __future__ import annotations

from dataclasses import dataclass

from geosections.errors import InvalidConfigError

# A maximum of 10 segments per section balances box-test overhead
# against section-count overhead for downstream consumers.
MAX_SEGMENTS_PER_SECTION = 10


@dataclass(frozen=True)
class SectionalizeConfig:
    """Controls direction tracking and run length."""

    # Leading coordinate axes whose sign participates in classification
    tracked_dimension_count: int = 2

    # A run may reach max + 1 segments before the next one splits it
    max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION

    # Relative tolerance for duplicate detection; None = float64 machine epsilon
    epsilon: float | None = None

    def __post_init__(self) -> None:
        if self.tracked_dimension_count < 1:
            raise InvalidConfigError(
                f"tracked_dimension_count must be >= 1, got {self.tracked_dimension_count}"
            )
        if self.max_segments_per_section < 1:
            raise InvalidConfigError(
                f"max_segments_per_section must be >= 1, got {self.max_segments_per_section}"
            )
        if self.epsilon is not None and self.epsilon < 0:
            raise InvalidConfigError(f"epsilon must be non-negative, got {self.epsilon}")
