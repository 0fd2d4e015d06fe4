"""Sequence animator configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SequenceConfig:
    """Immutable settings for the sequence animator.

    Attributes:
        check_interval_ms: Minimum game time between two sweeps. Sweeping
            every tick is wasted work on large worlds; dwell durations are
            only honored to this granularity.
    """

    check_interval_ms: int = 1000

    def __post_init__(self) -> None:
        if self.check_interval_ms < 0:
            raise ValueError(
                f"check_interval_ms must be >= 0, got {self.check_interval_ms}"
            )
