"""blocktick-conditional - Blocks that change when triggers appear nearby."""
from __future__ import annotations

from blocktick_conditional.components import ConditionalBlocks
from blocktick_conditional.config import ConditionalConfig
from blocktick_conditional.evaluator import RuleEvaluator, TriggerEvent
from blocktick_conditional.registry import TriggerRegistry, normalize_key
from blocktick_conditional.rules import (
    BlockDirected,
    BlockNearby,
    ConditionRule,
    EntityDirected,
    EntityNearby,
    RuleKind,
)
from blocktick_conditional.systems import (
    install_conditional_blocks,
    make_block_changed_handler,
    make_entity_moved_handler,
    make_registration_hooks,
    make_session_hooks,
)

__all__ = [
    "BlockDirected",
    "BlockNearby",
    "ConditionRule",
    "ConditionalBlocks",
    "ConditionalConfig",
    "EntityDirected",
    "EntityNearby",
    "RuleEvaluator",
    "RuleKind",
    "TriggerEvent",
    "TriggerRegistry",
    "install_conditional_blocks",
    "make_block_changed_handler",
    "make_entity_moved_handler",
    "make_registration_hooks",
    "make_session_hooks",
    "normalize_key",
]
