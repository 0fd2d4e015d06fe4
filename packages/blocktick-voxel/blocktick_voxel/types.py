"""Collaborator protocols and shared value types for block worlds.

The rule engines only ever talk to a world through these protocols. The
in-memory classes in this package implement them for tests and examples;
a host game supplies its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from blocktick import EntityId
    from blocktick_geometry import Vec

Coord = tuple[int, ...]

ITEM = "item"
NPC = "npc"
PLAYER = "player"
ENTITY_CATEGORIES = frozenset({ITEM, NPC, PLAYER})


def normalize_id(identifier: str) -> str:
    """Canonical form of a block id or entity category: stripped, case-folded."""
    return identifier.strip().casefold()


@dataclass(frozen=True)
class BlockType:
    """A resolved block type.

    Attributes:
        id: Catalog identifier, stored normalized.
        penetrable: Rays and line-of-sight checks pass through it.
    """

    id: str
    penetrable: bool = False

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("BlockType id must be non-empty")
        object.__setattr__(self, "id", normalize_id(self.id))


AIR = BlockType("air", penetrable=True)


class CollisionGroup(IntFlag):
    WORLD = 1
    ITEM = 2
    NPC = 4
    PLAYER = 8
    OTHER = 16
    ALL = WORLD | ITEM | NPC | PLAYER | OTHER


_CATEGORY_GROUPS = {
    ITEM: CollisionGroup.ITEM,
    NPC: CollisionGroup.NPC,
    PLAYER: CollisionGroup.PLAYER,
}


def group_for_category(category: str) -> CollisionGroup:
    return _CATEGORY_GROUPS.get(normalize_id(category), CollisionGroup.OTHER)


@dataclass(frozen=True)
class RayHit:
    """First thing a ray struck: the cell, and the entity there if any."""

    position: Coord
    entity: EntityId | None = None


class GameClock(Protocol):
    def now_millis(self) -> int: ...


class BlockWorld(Protocol):
    def block_at(self, position: Coord) -> str: ...
    def set_block(self, position: Coord, block: BlockType) -> None: ...


class BlockCatalog(Protocol):
    def resolve(self, block_id: str) -> BlockType | None: ...


class Raycaster(Protocol):
    def trace(
        self,
        origin: Vec,
        direction: Vec,
        max_distance: float,
        mask: CollisionGroup,
        prefer: EntityId | None = None,
    ) -> RayHit | None: ...


class RandomSource(Protocol):
    def random(self) -> float: ...
