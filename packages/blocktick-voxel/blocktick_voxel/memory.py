"""VoxelWorld - a dict-backed block store implementing ``BlockWorld``."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from blocktick_geometry import block_coord
from blocktick_signal import BLOCK_CHANGED

from blocktick_voxel.types import AIR, BlockType, Coord

if TYPE_CHECKING:
    from blocktick import EntityId
    from blocktick_signal import SignalBus

logger = logging.getLogger(__name__)


def _cell(position: Coord) -> Coord:
    return block_coord(position)


class VoxelWorld:
    """Unbounded sparse block grid. Unset cells read as air.

    Writes are visible to the next read immediately. When a bus is given,
    every write that changes a cell's block type publishes ``BLOCK_CHANGED``.
    """

    def __init__(self, bus: SignalBus | None = None) -> None:
        self._bus = bus
        self._blocks: dict[Coord, BlockType] = {}
        self._entities: dict[Coord, EntityId] = {}

    def block_type_at(self, position: Coord) -> BlockType:
        return self._blocks.get(_cell(position), AIR)

    def block_at(self, position: Coord) -> str:
        return self.block_type_at(position).id

    def set_block(self, position: Coord, block: BlockType) -> None:
        cell = _cell(position)
        old = self.block_type_at(cell)
        if block.id == AIR.id:
            self._blocks.pop(cell, None)
        else:
            self._blocks[cell] = block
        if old.id == block.id:
            return
        logger.debug("block %s: %s -> %s", cell, old.id, block.id)
        if self._bus is not None:
            self._bus.publish(
                BLOCK_CHANGED,
                position=cell,
                old=old.id,
                new=block.id,
                entity=self._entities.get(cell),
            )

    def bind_entity(self, position: Coord, entity: EntityId) -> None:
        """Associate a block entity with a cell so events and ray hits can name it."""
        self._entities[_cell(position)] = entity

    def unbind_entity(self, position: Coord) -> None:
        self._entities.pop(_cell(position), None)

    def entity_at(self, position: Coord) -> EntityId | None:
        return self._entities.get(_cell(position))

    def cells(self) -> Iterator[tuple[Coord, BlockType]]:
        """Every non-air cell, in write order."""
        yield from list(self._blocks.items())
