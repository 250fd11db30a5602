#!/usr/bin/env python3
"""
events.py
--------------------
Synchronous publish/subscribe used to keep views of the memo collection
in sync after an edit.

The screen that owns the canonical memo collection posts the full,
sorted list under ``MEMOS_DID_CHANGE`` after every mutation; any other
party (the statistics screen, the persistence layer) subscribes and
replaces its own copy with the payload. Delivery is fire-and-forget: a
failing handler is logged and the remaining handlers still run.

Usage:
    bus = EventBus(logger)
    unsubscribe = bus.subscribe(MEMOS_DID_CHANGE, screen.receive)
    bus.post(MEMOS_DID_CHANGE, memos)
    unsubscribe()
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from reflog.core.logging_manager import ReflogLogger, safe_logger

MEMOS_DID_CHANGE = "memosDidChange"

EventHandler = Callable[[Any], None]


class EventBus:
    """
    Dispatches named events to subscribed handlers.

    Handlers run on the caller's thread, in subscription order.
    """

    def __init__(self, logger: Optional[ReflogLogger] = None) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}
        self.logger = logger

    def subscribe(self, event_name: str, handler: EventHandler) -> Callable[[], None]:
        """
        Register a handler for an event name.

        Args:
            event_name: Name of the event to observe
            handler: Callable receiving the event payload

        Returns:
            Callable that removes this subscription
        """
        self._handlers.setdefault(event_name, []).append(handler)
        safe_logger(self.logger).log_debug(
            f"Subscribed handler to {event_name}",
            {"handler": getattr(handler, "__name__", repr(handler))},
        )

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_name, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def subscriber_count(self, event_name: str) -> int:
        return len(self._handlers.get(event_name, []))

    def post(self, event_name: str, payload: Any = None) -> int:
        """
        Deliver a payload to every handler of an event.

        Args:
            event_name: Name of the event
            payload: Object handed to each handler

        Returns:
            Number of handlers that completed without raising
        """
        handlers = list(self._handlers.get(event_name, []))
        delivered = 0

        for handler in handlers:
            try:
                handler(payload)
                delivered += 1
            except Exception as e:
                safe_logger(self.logger).log_error(
                    e,
                    {
                        "event": event_name,
                        "handler": getattr(handler, "__name__", repr(handler)),
                    },
                )

        return delivered
