"""TriggerRegistry - which rule holders listen for which trigger keys."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from blocktick_voxel import normalize_id

if TYPE_CHECKING:
    from blocktick import EntityId

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    """Trigger keys are case-insensitive block ids or entity categories."""
    return normalize_id(key)


class TriggerRegistry:
    """Maps each trigger key to its holders, in registration order.

    One registry belongs to one world session. Mutations made while a sweep
    is running are queued and replayed in order when the outermost sweep
    ends, so lists handed out by ``lookup`` never change under an evaluator.
    """

    def __init__(self) -> None:
        self._holders: dict[str, list[EntityId]] = {}
        self._sweep_depth = 0
        self._deferred: list[tuple[str | None, EntityId]] = []

    def register(self, key: str, holder: EntityId) -> None:
        """Subscribe ``holder`` to ``key``. Registering a pair twice is a no-op."""
        key = normalize_key(key)
        if self._sweep_depth:
            self._deferred.append((key, holder))
            return
        holders = self._holders.setdefault(key, [])
        if holder not in holders:
            holders.append(holder)

    def unregister(self, holder: EntityId) -> None:
        """Remove ``holder`` from every key it is registered under."""
        if self._sweep_depth:
            self._deferred.append((None, holder))
            return
        for key in [k for k, holders in self._holders.items() if holder in holders]:
            holders = self._holders[key]
            holders.remove(holder)
            if not holders:
                del self._holders[key]

    def lookup(self, key: str) -> tuple[EntityId, ...]:
        return tuple(self._holders.get(normalize_key(key), ()))

    def keys(self) -> list[str]:
        return list(self._holders)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._holders

    def __len__(self) -> int:
        return len(self._holders)

    @property
    def sweeping(self) -> bool:
        return self._sweep_depth > 0

    @contextmanager
    def sweep(self) -> Iterator[TriggerRegistry]:
        self._sweep_depth += 1
        try:
            yield self
        finally:
            self._sweep_depth -= 1
            if not self._sweep_depth and self._deferred:
                deferred, self._deferred = self._deferred, []
                logger.debug("applying %d deferred registry changes", len(deferred))
                for key, holder in deferred:
                    if key is None:
                        self.unregister(holder)
                    else:
                        self.register(key, holder)

    def clear(self) -> None:
        """Drop every registration, at session end."""
        for key, holders in self._holders.items():
            logger.info("clearing %d holders triggered by %r", len(holders), key)
        self._holders.clear()
        self._deferred.clear()
