"""Components shared by block entities and mobile entities."""
from __future__ import annotations

from dataclasses import dataclass

from blocktick_geometry import Side

from blocktick_voxel.types import normalize_id


@dataclass
class Location:
    """World position of an entity. Block entities sit on integer cell centers.

    ``facing`` is the world side the block's front face points to; directed
    rules rotate their configured side by it.
    """

    position: tuple[float, float, float]
    facing: Side = Side.FRONT


@dataclass
class Category:
    """Trigger category of a mobile entity: ``"item"``, ``"npc"`` or ``"player"``."""

    name: str

    def __post_init__(self) -> None:
        self.name = normalize_id(self.name)
