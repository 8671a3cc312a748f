"""Fan-out of published items to subscribed queues."""

from __future__ import annotations

import threading
from typing import Any, Protocol


class _Channel(Protocol):
    def put(self, item: Any) -> None: ...


class EventStreamer:
    """Deliver every published item to every subscribed channel.

    Delivery happens on background threads so a slow or full channel never
    blocks the publisher.
    """

    def __init__(self) -> None:
        self._channels: list[_Channel] = []
        self._lock = threading.Lock()

    def publish(self, item: Any) -> None:
        """Send ``item`` to all current subscribers."""
        with self._lock:
            for channel in self._channels:
                threading.Thread(target=channel.put, args=(item,), daemon=True).start()

    def subscribe(self, channel: _Channel) -> None:
        """Register a channel (anything with ``put``) to receive items."""
        with self._lock:
            self._channels.append(channel)