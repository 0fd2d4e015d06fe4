"""Signal names exchanged between the world adapter and the rule engines.

Payloads (keyword data):

- ``BLOCK_CHANGED``: ``position`` (block cell), ``old`` and ``new`` block
  ids, ``entity`` (block entity at the cell, or None).
- ``ENTITY_MOVED``: ``entity``, ``position`` (world position).
- ``SEQUENCE_COMPLETE``: ``entity``, ``position``, ``stage`` (final stage id).
"""
from __future__ import annotations

BLOCK_CHANGED = "block_changed"
ENTITY_MOVED = "entity_moved"
SEQUENCE_COMPLETE = "sequence_complete"
