"""Conditional block configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConditionalConfig:
    """Immutable settings for rule evaluation.

    Attributes:
        adjacent_distance: A trigger closer than this counts as touching
            for ``BlockNearby(adjacent=True)`` rules. 2.0 covers face, edge
            and corner neighbours (corner distance is about 1.73).
    """

    adjacent_distance: float = 2.0

    def __post_init__(self) -> None:
        if self.adjacent_distance <= 0:
            raise ValueError(
                f"adjacent_distance must be > 0, got {self.adjacent_distance}"
            )
