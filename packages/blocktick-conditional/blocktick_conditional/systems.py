"""Wiring between world events and the rule evaluator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from blocktick_signal import BLOCK_CHANGED, ENTITY_MOVED
from blocktick_voxel import Category

from blocktick_conditional.components import ConditionalBlocks
from blocktick_conditional.config import ConditionalConfig
from blocktick_conditional.evaluator import RuleEvaluator, TriggerEvent
from blocktick_conditional.registry import TriggerRegistry

if TYPE_CHECKING:
    from blocktick import Engine, EntityId, TickContext, World
    from blocktick_signal import SignalBus
    from blocktick_voxel import BlockCatalog, BlockWorld, Raycaster

_Hook = Callable[["World", "EntityId", ConditionalBlocks], None]
_SessionHook = Callable[["World", "TickContext"], None]
_Handler = Callable[[str, dict[str, Any]], None]


def make_registration_hooks(registry: TriggerRegistry) -> tuple[_Hook, _Hook]:
    """Return ``(on_attach, on_detach)`` hooks that keep ``registry`` in sync.

    Re-attaching a holder replaces its old registrations.
    """

    def on_attach(world: World, eid: EntityId, component: ConditionalBlocks) -> None:
        registry.unregister(eid)
        for key in component.triggers():
            registry.register(key, eid)

    def on_detach(world: World, eid: EntityId, component: ConditionalBlocks) -> None:
        registry.unregister(eid)

    return on_attach, on_detach


def make_session_hooks(registry: TriggerRegistry) -> tuple[_SessionHook, _SessionHook]:
    """Return ``(on_start, on_stop)`` engine hooks bounding the registry's session.

    Starting a session registers every holder already in the world, so a
    registry cleared by an earlier stop picks up where the world left off.
    """

    def on_start(world: World, ctx: TickContext) -> None:
        for eid, (component,) in world.query(ConditionalBlocks):
            for key in component.triggers():
                registry.register(key, eid)

    def on_stop(world: World, ctx: TickContext) -> None:
        registry.clear()

    return on_start, on_stop


def make_block_changed_handler(evaluator: RuleEvaluator) -> _Handler:
    """A block became ``new`` at ``position``: evaluate block-trigger rules."""

    def on_block_changed(signal_name: str, data: dict[str, Any]) -> None:
        position = tuple(float(c) for c in data["position"])
        evaluator.evaluate(
            TriggerEvent(data["new"], position, is_block=True, source=data.get("entity"))
        )

    return on_block_changed


def make_entity_moved_handler(world: World, evaluator: RuleEvaluator) -> _Handler:
    """A categorized entity moved: evaluate entity-trigger rules for its category."""

    def on_entity_moved(signal_name: str, data: dict[str, Any]) -> None:
        eid = data["entity"]
        category = world.find(eid, Category)
        if category is None:
            return
        evaluator.evaluate(
            TriggerEvent(category.name, tuple(data["position"]), is_block=False, source=eid)
        )

    return on_entity_moved


def install_conditional_blocks(
    engine: Engine,
    bus: SignalBus,
    blocks: BlockWorld,
    catalog: BlockCatalog,
    raycaster: Raycaster | None,
    config: ConditionalConfig = ConditionalConfig(),
) -> RuleEvaluator:
    """Wire conditional blocks into an engine session.

    Holders register as their ConditionalBlocks component is attached and
    unregister when it is detached or the entity despawns. ``BLOCK_CHANGED``
    and ``ENTITY_MOVED`` signals drive evaluation whenever ``bus`` is
    flushed. Each engine session rebuilds the registry from the world when
    it starts and clears it when it stops. Rules draw from the engine's
    seeded random stream.
    """
    registry = TriggerRegistry()
    world = engine.world
    on_attach, on_detach = make_registration_hooks(registry)
    world.on_attach(ConditionalBlocks, on_attach)
    world.on_detach(ConditionalBlocks, on_detach)

    evaluator = RuleEvaluator(world, registry, blocks, catalog, raycaster, engine.random, config)
    bus.subscribe(BLOCK_CHANGED, make_block_changed_handler(evaluator))
    bus.subscribe(ENTITY_MOVED, make_entity_moved_handler(world, evaluator))
    on_start, on_stop = make_session_hooks(registry)
    engine.on_start(on_start)
    engine.on_stop(on_stop)
    return evaluator
