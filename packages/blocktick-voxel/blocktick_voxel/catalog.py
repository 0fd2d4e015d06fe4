"""Catalog - the block-type registry the engines resolve ids against."""
from __future__ import annotations

from blocktick_voxel.types import AIR, BlockType, normalize_id


class Catalog:
    """Stores block type definitions keyed by normalized id. Air is always defined."""

    def __init__(self, *blocks: BlockType) -> None:
        self._blocks: dict[str, BlockType] = {AIR.id: AIR}
        for block in blocks:
            self.define(block)

    def define(self, block: BlockType) -> BlockType:
        """Register a block type. Overwrites if the id exists."""
        self._blocks[block.id] = block
        return block

    def resolve(self, block_id: str) -> BlockType | None:
        """Look up a block type; None when the id is unknown."""
        return self._blocks.get(normalize_id(block_id))

    def has(self, block_id: str) -> bool:
        return normalize_id(block_id) in self._blocks

    def names(self) -> list[str]:
        return list(self._blocks)
