"""
Events - Subscription points for visibility notifications.

Listeners are plain callables. Dispatch iterates over a snapshot of the
listener list, so handlers may add or remove listeners (including
themselves) while an event is being raised. Changes made during a
dispatch take effect on the next one.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Event:
    """Multicast event with any number of listeners."""

    def __init__(self, name: str = "event"):
        self.name = name
        self._listeners: list[Callable[..., Any]] = []

    def add_listener(self, listener: Callable[..., Any]) -> None:
        """Register a listener. The same callable may be added more than once."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[..., Any]) -> None:
        """Remove one registration of listener. Unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def invoke(self, *args) -> None:
        """
        Call every listener with args.

        A listener that raises is logged and skipped; the remaining
        listeners still run.
        """
        if not self._listeners:
            return

        for listener in tuple(self._listeners):
            try:
                listener(*args)
            except Exception as e:
                logger.error(f"Listener {listener!r} failed on {self.name}: {e}", exc_info=True)


class BoolEvent(Event):
    """Event carrying a single bool argument."""

    def invoke(self, value: bool) -> None:
        super().invoke(value)


class VoidEvent(Event):
    """Event without arguments."""

    def invoke(self) -> None:
        super().invoke()


__all__ = ["BoolEvent", "Event", "VoidEvent"]
