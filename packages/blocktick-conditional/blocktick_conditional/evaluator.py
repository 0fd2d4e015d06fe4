"""RuleEvaluator - runs the gate chain of every rule subscribed to a trigger."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from blocktick_geometry import block_coord, is_within_fov, side_facing, vec
from blocktick_voxel import CollisionGroup, Location, group_for_category

from blocktick_conditional.components import ConditionalBlocks
from blocktick_conditional.config import ConditionalConfig
from blocktick_conditional.registry import normalize_key
from blocktick_conditional.rules import RuleKind

if TYPE_CHECKING:
    from blocktick import EntityId, World
    from blocktick_geometry import Vec
    from blocktick_voxel import BlockCatalog, BlockWorld, RandomSource, Raycaster

    from blocktick_conditional.registry import TriggerRegistry
    from blocktick_conditional.rules import ConditionRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriggerEvent:
    """Something appeared or moved.

    Attributes:
        key: Block id (block triggers) or entity category (entity triggers).
        position: Where it happened, in world coordinates.
        is_block: Block trigger if True, entity trigger otherwise.
        source: The causing entity, if known. An entity trigger's sight line
            must end on it, or in the trigger's cell when there is none. A
            block trigger's sight line only has to reach the trigger cell.
    """

    key: str
    position: Vec
    is_block: bool
    source: EntityId | None = None


class RuleEvaluator:
    """Evaluates conditional rules against trigger events.

    Gates run in a fixed order and stop at the first failure: trigger match,
    adjacency shortcut, distance range, side and field of view, line of
    sight, then the random draw. Only rules that reach the draw consume a
    number from the random stream, so a fixed seed replays identically.
    """

    def __init__(
        self,
        world: World,
        registry: TriggerRegistry,
        blocks: BlockWorld,
        catalog: BlockCatalog,
        raycaster: Raycaster | None,
        rng: RandomSource,
        config: ConditionalConfig = ConditionalConfig(),
    ) -> None:
        self._world = world
        self._registry = registry
        self._blocks = blocks
        self._catalog = catalog
        self._raycaster = raycaster
        self._rng = rng
        self._config = config
        self._unknown_targets: set[str] = set()

    @property
    def registry(self) -> TriggerRegistry:
        return self._registry

    def evaluate(self, event: TriggerEvent) -> int:
        """Fire every matching rule once. Returns the number of blocks written."""
        key = normalize_key(event.key)
        holders = self._registry.lookup(key)
        if not holders:
            return 0
        writes = 0
        with self._registry.sweep():
            for holder in holders:
                component = self._world.find(holder, ConditionalBlocks)
                location = self._world.find(holder, Location)
                if component is None or location is None:
                    logger.debug("holder %d has no rules or location, skipped", holder)
                    continue
                for rule in component.rules:
                    if rule.kind.is_block_trigger != event.is_block or rule.trigger != key:
                        continue
                    if self._passes(rule, location, event) and self._apply(rule, location):
                        writes += 1
        return writes

    def _passes(self, rule: ConditionRule, location: Location, event: TriggerEvent) -> bool:
        anchor = location.position
        distance = vec.distance(anchor, event.position)

        if (
            rule.kind is RuleKind.BLOCK_NEARBY
            and rule.adjacent
            and distance < self._config.adjacent_distance
        ):
            return self._roll(rule)

        if not rule.min_distance <= distance <= rule.max_distance:
            return False

        offset = vec.sub(event.position, anchor)
        if rule.kind.is_directed and not self._on_side(rule, location, offset):
            return False

        if not rule.ignore_occlusion and not self._in_sight(rule, anchor, offset, event):
            return False

        return self._roll(rule)

    def _on_side(self, rule: ConditionRule, location: Location, offset: Vec) -> bool:
        if vec.magnitude(offset) == 0.0:
            return False
        side = rule.side.relative_to(location.facing)
        return side_facing(offset) is side and is_within_fov(
            offset, side.vector, rule.field_of_view
        )

    def _in_sight(
        self, rule: ConditionRule, anchor: Vec, offset: Vec, event: TriggerEvent
    ) -> bool:
        if self._raycaster is None:
            return False
        target_cell = block_coord(event.position)
        if event.is_block:
            # Reaching the trigger cell with nothing in front of it counts as sight.
            hit = self._raycaster.trace(
                anchor, offset, vec.magnitude(offset), CollisionGroup.WORLD
            )
            return hit is None or hit.position == target_cell
        mask = CollisionGroup.WORLD | group_for_category(event.key)
        hit = self._raycaster.trace(
            anchor, offset, rule.max_distance, mask, prefer=event.source
        )
        if hit is None:
            return False
        if event.source is not None:
            return hit.entity == event.source
        return hit.position == target_cell

    def _roll(self, rule: ConditionRule) -> bool:
        return self._rng.random() < rule.chance

    def _apply(self, rule: ConditionRule, location: Location) -> bool:
        block = self._catalog.resolve(rule.target)
        if block is None:
            if rule.target not in self._unknown_targets:
                self._unknown_targets.add(rule.target)
                logger.warning("rule target %r is not a known block, skipped", rule.target)
            return False
        cell = block_coord(location.position)
        logger.debug("%s rule on %r turned %s into %s", rule.kind.value, rule.trigger, cell, block.id)
        self._blocks.set_block(cell, block)
        return True
