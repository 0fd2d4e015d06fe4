"""ConditionalBlocks component: the rules a block entity reacts with."""
from __future__ import annotations

from dataclasses import dataclass

from blocktick_conditional.rules import ConditionRule


@dataclass(frozen=True)
class ConditionalBlocks:
    """Rule holder. The anchor is the entity's Location."""

    rules: tuple[ConditionRule, ...]

    def triggers(self) -> list[str]:
        """Distinct trigger keys, in rule order."""
        return list(dict.fromkeys(rule.trigger for rule in self.rules))
