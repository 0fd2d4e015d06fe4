"""Entity movement helper that reports position changes to the event sink."""
from __future__ import annotations

from typing import TYPE_CHECKING

from blocktick_signal import ENTITY_MOVED

from blocktick_voxel.components import Location

if TYPE_CHECKING:
    from blocktick import EntityId, World
    from blocktick_signal import SignalBus


def move_entity(
    world: World, bus: SignalBus, eid: EntityId, position: tuple[float, float, float]
) -> None:
    """Set the entity's Location and publish ``ENTITY_MOVED``."""
    location = world.get(eid, Location)
    location.position = position
    bus.publish(ENTITY_MOVED, entity=eid, position=position)
