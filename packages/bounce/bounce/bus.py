"""Session notifications, queued during a frame and delivered at its end."""
from __future__ import annotations

from typing import Any, Callable

BOUNCE = "bounce"
PLAYBACK = "playback"
TIMER_EXPIRED = "timer_expired"
TIMER_RESET = "timer_reset"
RESIZED = "resized"

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Publish/subscribe queue.

    :meth:`publish` only enqueues; handlers run on :meth:`flush`, in
    publish order. Signals published by a handler wait for the next flush.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._pending: list[tuple[str, dict[str, Any]]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, name: str, **data: Any) -> None:
        self._pending.append((name, data))

    def flush(self) -> None:
        batch, self._pending = self._pending, []
        for name, data in batch:
            for handler in list(self._handlers.get(name, ())):
                handler(name, data)

    def clear(self) -> None:
        self._pending.clear()
