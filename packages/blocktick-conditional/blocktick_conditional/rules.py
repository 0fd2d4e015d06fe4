"""Condition rules: the four kinds of trigger a block can react to.

Every rule names a trigger (a block id or an entity category), the block to
become when it fires, and the odds of firing once every other gate passes.
The union is closed; evaluators dispatch on ``rule.kind``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from blocktick_geometry import Side
from blocktick_voxel import normalize_id


class RuleKind(Enum):
    BLOCK_NEARBY = "block_nearby"
    BLOCK_DIRECTED = "block_directed"
    ENTITY_NEARBY = "entity_nearby"
    ENTITY_DIRECTED = "entity_directed"

    @property
    def is_block_trigger(self) -> bool:
        return self in (RuleKind.BLOCK_NEARBY, RuleKind.BLOCK_DIRECTED)

    @property
    def is_directed(self) -> bool:
        return self in (RuleKind.BLOCK_DIRECTED, RuleKind.ENTITY_DIRECTED)


@dataclass(frozen=True, kw_only=True)
class _Condition:
    """Fields shared by every rule kind.

    Attributes:
        trigger: Block id or entity category that triggers the rule.
        target: Block id this block becomes when the rule fires.
        chance: Probability of firing once all other gates pass, 0.0 to 1.0.
        min_distance: Closest the trigger may be.
        max_distance: Farthest the trigger may be; also bounds the sight line.
        ignore_occlusion: Fire even when something blocks the line of sight.
    """

    kind: ClassVar[RuleKind]

    trigger: str
    target: str
    chance: float = 1.0
    min_distance: float = 0.0
    max_distance: float = 1.5
    ignore_occlusion: bool = False

    def __post_init__(self) -> None:
        if not self.trigger.strip():
            raise ValueError("trigger must be non-empty")
        if not self.target.strip():
            raise ValueError("target must be non-empty")
        if not 0.0 <= self.chance <= 1.0:
            raise ValueError(f"chance must be in [0, 1], got {self.chance}")
        if self.min_distance < 0:
            raise ValueError(f"min_distance must be >= 0, got {self.min_distance}")
        if self.min_distance > self.max_distance:
            raise ValueError(
                f"min_distance {self.min_distance} exceeds max_distance {self.max_distance}"
            )
        object.__setattr__(self, "trigger", normalize_id(self.trigger))
        object.__setattr__(self, "target", normalize_id(self.target))


@dataclass(frozen=True, kw_only=True)
class _DirectedCondition(_Condition):
    """A rule that only fires for triggers on one side of the block.

    ``side`` is relative to the block's facing. ``field_of_view`` is the
    largest angle in radians allowed between the trigger direction and that
    side's axis: 0 accepts only the axis itself, 1 covers every direction
    that resolves to the side.
    """

    max_distance: float = 1.0
    side: Side = Side.FRONT
    field_of_view: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.field_of_view < 0:
            raise ValueError(f"field_of_view must be >= 0, got {self.field_of_view}")


@dataclass(frozen=True, kw_only=True)
class BlockNearby(_Condition):
    """Fires when a trigger block appears within range.

    With ``adjacent`` set, a trigger touching this block fires regardless of
    the distance bounds and without a sight check.
    """

    kind: ClassVar[RuleKind] = RuleKind.BLOCK_NEARBY

    adjacent: bool = False


@dataclass(frozen=True, kw_only=True)
class BlockDirected(_DirectedCondition):
    kind: ClassVar[RuleKind] = RuleKind.BLOCK_DIRECTED


@dataclass(frozen=True, kw_only=True)
class EntityNearby(_Condition):
    kind: ClassVar[RuleKind] = RuleKind.ENTITY_NEARBY


@dataclass(frozen=True, kw_only=True)
class EntityDirected(_DirectedCondition):
    kind: ClassVar[RuleKind] = RuleKind.ENTITY_DIRECTED


ConditionRule = Union[BlockNearby, BlockDirected, EntityNearby, EntityDirected]
