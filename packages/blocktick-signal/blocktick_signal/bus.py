"""In-memory pub/sub signal bus with per-tick flush semantics."""
from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queue signals during a tick and dispatch them on ``flush``.

    Signals published by a handler while a flush is running are queued for
    the next flush, so dispatch never re-enters a handler for its own output.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch every queued signal. Returns how many were dispatched."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        if snapshot:
            logger.debug(
                "flushed %d signals, %d queued for next flush",
                len(snapshot), len(self._queue),
            )
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
