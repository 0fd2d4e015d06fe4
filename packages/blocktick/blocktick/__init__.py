"""blocktick - a fixed-timestep engine for block worlds that change over time."""

from blocktick.clock import Clock
from blocktick.engine import Engine
from blocktick.types import DeadEntityError, EntityId, TickContext
from blocktick.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
