"""blocktick-sequence - Timed stage cycling for block entities."""
from __future__ import annotations

from blocktick_sequence.components import (
    UNPOLLED,
    ChangingBlocks,
    StageSequence,
    reset_sequence,
)
from blocktick_sequence.config import SequenceConfig
from blocktick_sequence.systems import (
    advance_sequences,
    install_changing_blocks,
    make_sequence_spawn_hook,
    make_sequence_system,
)

__all__ = [
    "UNPOLLED",
    "ChangingBlocks",
    "SequenceConfig",
    "StageSequence",
    "advance_sequences",
    "install_changing_blocks",
    "make_sequence_spawn_hook",
    "make_sequence_system",
    "reset_sequence",
]
