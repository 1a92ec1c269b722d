#!/usr/bin/env python3
"""
Refresh Event Bus

Lets one part of the application tell others that their data is stale (a new
expense was saved, so the driver dashboard should reload its totals) without a
process-wide callback attribute. Subscribers register per topic for the
lifetime of the application.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# Topics published by the record and driver screens
EARNINGS = "earnings"
EXPENSES = "expenses"
AUTO_EXPENSES = "auto_expenses"
DRIVERS = "drivers"

RefreshCallback = Callable[..., Any]


class RefreshBus:
    """
    Topic based publish/subscribe registry.

    Callbacks are invoked synchronously in subscription order. A callback that
    raises is logged and skipped; the remaining subscribers are still notified.
    """

    def __init__(self) -> None:
        """Initialize empty subscriber registry."""
        self._subscribers: dict[str, list[RefreshCallback]] = {}

    def subscribe(self, topic: str, callback: RefreshCallback) -> Callable[[], None]:
        """
        Register a callback for a topic.

        Args:
            topic: Topic name, e.g. EARNINGS
            callback: Called with the keyword payload of each publish()

        Returns:
            A function that removes this subscription when called
        """
        self._subscribers.setdefault(topic, []).append(callback)
        logger.debug(f"Subscribed {getattr(callback, '__name__', callback)!r} to {topic}")

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(topic, [])
            if callback in callbacks:
                callbacks.remove(callback)
                logger.debug(f"Unsubscribed from {topic}")

        return unsubscribe

    def publish(self, topic: str, **payload: Any) -> int:
        """
        Notify every subscriber of a topic.

        Returns:
            Number of callbacks that completed without raising
        """
        delivered = 0
        for callback in list(self._subscribers.get(topic, [])):
            try:
                callback(**payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Refresh subscriber for {topic} failed: {e}")
        return delivered

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    def clear(self) -> None:
        """Drop every subscription (used on logout and in tests)."""
        self._subscribers.clear()


_refresh_bus: RefreshBus | None = None


def get_refresh_bus() -> RefreshBus:
    """Get the application-wide refresh bus."""
    global _refresh_bus
    if _refresh_bus is None:
        _refresh_bus = RefreshBus()
    return _refresh_bus
