"""StageSequence definition and the ChangingBlocks runtime component."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from blocktick_voxel import normalize_id

UNPOLLED = -1


@dataclass(frozen=True)
class StageSequence:
    """Ordered block stages with the dwell time of each, in milliseconds.

    Order is the order stages were given in; the stage after the current
    block's entry is the next one. A looping sequence returns to the first
    stage once the last stage's dwell time has passed.
    """

    stages: tuple[tuple[str, int], ...]
    loops: bool = False

    def __post_init__(self) -> None:
        if not self.stages:
            raise ValueError("StageSequence needs at least one stage")
        normalized: list[tuple[str, int]] = []
        seen: set[str] = set()
        for block_id, dwell_ms in self.stages:
            key = normalize_id(block_id)
            if not key:
                raise ValueError("Stage block id must be non-empty")
            if key in seen:
                raise ValueError(f"Duplicate stage {block_id!r}")
            if dwell_ms < 0:
                raise ValueError(f"Dwell time for {block_id!r} must be >= 0, got {dwell_ms}")
            seen.add(key)
            normalized.append((key, int(dwell_ms)))
        object.__setattr__(self, "stages", tuple(normalized))

    @classmethod
    def of(cls, stages: Mapping[str, int], loops: bool = False) -> StageSequence:
        """Build from a mapping, keeping its iteration order."""
        return cls(tuple(stages.items()), loops=loops)

    def __len__(self) -> int:
        return len(self.stages)

    @property
    def last_index(self) -> int:
        return len(self.stages) - 1

    def index_of(self, block_id: str) -> int | None:
        key = normalize_id(block_id)
        for i, (stage, _) in enumerate(self.stages):
            if stage == key:
                return i
        return None

    def stage(self, index: int) -> str:
        return self.stages[index][0]

    def dwell(self, index: int) -> int:
        return self.stages[index][1]


@dataclass
class ChangingBlocks:
    """Animation state of one block entity.

    ``dwell_ms`` is the dwell time of the stage currently shown and
    ``last_polled_ms`` the game time the entity's timer last restarted;
    ``UNPOLLED`` until the first sweep or spawn hook sees it. ``stopped``
    is set once a non-looping sequence reaches its last stage.
    """

    sequence: StageSequence
    stopped: bool = False
    dwell_ms: int = 0
    last_polled_ms: int = UNPOLLED


def reset_sequence(component: ChangingBlocks, now_ms: int = UNPOLLED) -> None:
    """Restart a sequence from its first stage.

    Without ``now_ms`` the timer re-initializes on the next sweep. With it,
    the timer restarts at ``now_ms`` on the first stage's dwell time. The
    caller puts the first stage's block back in the world.
    """
    component.stopped = False
    if now_ms == UNPOLLED:
        component.dwell_ms = 0
    else:
        component.dwell_ms = component.sequence.dwell(0)
    component.last_polled_ms = now_ms
