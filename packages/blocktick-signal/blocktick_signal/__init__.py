"""blocktick-signal - In-process event sink for the blocktick engine."""
from __future__ import annotations

from blocktick_signal.bus import SignalBus
from blocktick_signal.names import BLOCK_CHANGED, ENTITY_MOVED, SEQUENCE_COMPLETE
from blocktick_signal.systems import make_signal_system

__all__ = [
    "SignalBus",
    "make_signal_system",
    "BLOCK_CHANGED",
    "ENTITY_MOVED",
    "SEQUENCE_COMPLETE",
]
