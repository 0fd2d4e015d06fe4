"""blocktick-voxel - World, catalog and raycast collaborators for the rule engines."""
from __future__ import annotations

from blocktick_voxel.catalog import Catalog
from blocktick_voxel.components import Category, Location
from blocktick_voxel.helpers import move_entity
from blocktick_voxel.memory import VoxelWorld
from blocktick_voxel.raycast import VoxelRaycaster
from blocktick_voxel.types import (
    AIR,
    ENTITY_CATEGORIES,
    ITEM,
    NPC,
    PLAYER,
    BlockCatalog,
    BlockType,
    BlockWorld,
    CollisionGroup,
    Coord,
    GameClock,
    RandomSource,
    Raycaster,
    RayHit,
    group_for_category,
    normalize_id,
)

__all__ = [
    "AIR",
    "ENTITY_CATEGORIES",
    "ITEM",
    "NPC",
    "PLAYER",
    "BlockCatalog",
    "BlockType",
    "BlockWorld",
    "Catalog",
    "Category",
    "CollisionGroup",
    "Coord",
    "GameClock",
    "Location",
    "RandomSource",
    "RayHit",
    "Raycaster",
    "VoxelRaycaster",
    "VoxelWorld",
    "group_for_category",
    "move_entity",
    "normalize_id",
]
