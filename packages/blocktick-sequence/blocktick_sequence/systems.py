"""Sequence animator: sweeps ChangingBlocks entities and advances their stages."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from blocktick_geometry import block_coord
from blocktick_signal import SEQUENCE_COMPLETE
from blocktick_voxel import Location

from blocktick_sequence.components import UNPOLLED, ChangingBlocks
from blocktick_sequence.config import SequenceConfig

if TYPE_CHECKING:
    from blocktick import EntityId, Engine, TickContext, World
    from blocktick_signal import SignalBus
    from blocktick_voxel import BlockCatalog, BlockWorld, Coord, GameClock

logger = logging.getLogger(__name__)

OnComplete = Callable[["World", "EntityId", str], None]


def _start_timer(
    anim: ChangingBlocks, blocks: BlockWorld, cell: Coord, now_ms: int
) -> None:
    index = anim.sequence.index_of(blocks.block_at(cell))
    if index is not None:
        anim.dwell_ms = anim.sequence.dwell(index)
    anim.last_polled_ms = now_ms


def _advance(
    world: World,
    eid: EntityId,
    anim: ChangingBlocks,
    cell: Coord,
    blocks: BlockWorld,
    catalog: BlockCatalog,
    on_complete: OnComplete | None,
) -> bool:
    sequence = anim.sequence
    current_id = blocks.block_at(cell)
    current = sequence.index_of(current_id)
    if current is None:
        logger.warning(
            "entity %d at %s shows %r, which is not a stage of its sequence",
            eid, cell, current_id,
        )
        return False

    last = sequence.last_index
    if current == last:
        if not sequence.loops:
            return False
        target = 0
    else:
        target = current + 1
        if target == last and not sequence.loops:
            anim.stopped = True
            logger.info("entity %d finished its sequence at %s", eid, cell)
            if on_complete is not None:
                on_complete(world, eid, sequence.stage(target))

    stage_id = sequence.stage(target)
    block = catalog.resolve(stage_id)
    if block is None or block.id != stage_id:
        logger.warning("stage %r of entity %d is not a known block", stage_id, eid)
        return False
    blocks.set_block(cell, block)
    anim.dwell_ms = sequence.dwell(target)
    return True


def advance_sequences(
    world: World,
    blocks: BlockWorld,
    catalog: BlockCatalog,
    now_ms: int,
    on_complete: OnComplete | None = None,
) -> int:
    """Run one sweep over every located ChangingBlocks entity.

    Returns the number of blocks written. Stopped entities are skipped, an
    entity seen for the first time only starts its timer, and an entity
    whose dwell time has not passed is left untouched.
    """
    writes = 0
    for eid, (anim, location) in world.query(ChangingBlocks, Location):
        if anim.stopped:
            continue
        cell = block_coord(location.position)
        if anim.last_polled_ms == UNPOLLED:
            _start_timer(anim, blocks, cell, now_ms)
            continue
        if now_ms - anim.last_polled_ms <= anim.dwell_ms:
            continue
        anim.last_polled_ms = now_ms
        if _advance(world, eid, anim, cell, blocks, catalog, on_complete):
            writes += 1
    if writes:
        logger.debug("sequence sweep at %d ms advanced %d blocks", now_ms, writes)
    return writes


def make_sequence_spawn_hook(
    blocks: BlockWorld, clock: GameClock
) -> Callable[[World, EntityId, ChangingBlocks], None]:
    """Return an on_attach hook that starts an entity's timer when it spawns.

    Entities attached before their Location start their timer on the first
    sweep instead.
    """

    def on_spawn(world: World, eid: EntityId, anim: ChangingBlocks) -> None:
        location = world.find(eid, Location)
        if location is None:
            return
        _start_timer(anim, blocks, block_coord(location.position), clock.now_millis())

    return on_spawn


def make_sequence_system(
    blocks: BlockWorld,
    catalog: BlockCatalog,
    clock: GameClock | None = None,
    on_complete: OnComplete | None = None,
    config: SequenceConfig = SequenceConfig(),
) -> Callable[[World, TickContext], None]:
    """Return a system that sweeps sequences at most once per check interval.

    Game time comes from ``clock`` when given, otherwise from the tick context.
    """
    last_sweep: int | None = None

    def sequence_system(world: World, ctx: TickContext) -> None:
        nonlocal last_sweep
        now = clock.now_millis() if clock is not None else ctx.now_ms
        if last_sweep is not None and now - last_sweep < config.check_interval_ms:
            return
        last_sweep = now
        advance_sequences(world, blocks, catalog, now, on_complete)

    return sequence_system


def install_changing_blocks(
    engine: Engine,
    blocks: BlockWorld,
    catalog: BlockCatalog,
    bus: SignalBus | None = None,
    config: SequenceConfig = SequenceConfig(),
) -> None:
    """Wire the animator into an engine.

    Spawned ChangingBlocks entities start their timers from the engine clock,
    the sweep runs as a system, and completions are published to ``bus`` as
    ``SEQUENCE_COMPLETE``.
    """
    on_complete: OnComplete | None = None
    if bus is not None:
        def publish_complete(world: World, eid: EntityId, stage: str) -> None:
            location = world.get(eid, Location)
            bus.publish(
                SEQUENCE_COMPLETE,
                entity=eid,
                position=block_coord(location.position),
                stage=stage,
            )

        on_complete = publish_complete

    engine.world.on_attach(ChangingBlocks, make_sequence_spawn_hook(blocks, engine.clock))
    engine.add_system(
        make_sequence_system(blocks, catalog, engine.clock, on_complete, config)
    )
