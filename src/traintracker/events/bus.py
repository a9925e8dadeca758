"""Event bus: named publish/subscribe with disposable subscriptions.

Handlers for a name run in registration order, each to completion, on the
publishing thread. Exceptions raised by a handler propagate to the publisher.

Usage:
    bus = LocalEventBus()
    sub = bus.subscribe("on_train_created", handler)
    bus.publish("on_train_created", payload)
    sub.close()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, Protocol

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]
"""Signature: (event_payload) -> None"""


class Subscription:
    """Handle for one registered handler. Closing it unregisters the handler.

    Closing is idempotent. Can be used as a context manager:

        with bus.subscribe(name, handler):
            bus.publish(name, payload)
    """

    def __init__(self, name: Hashable, handler: Handler, detach: Callable[[Subscription], None]):
        self._name = name
        self._handler = handler
        self._detach: Callable[[Subscription], None] | None = detach

    @property
    def name(self) -> Hashable:
        return self._name

    @property
    def handler(self) -> Handler:
        return self._handler

    @property
    def active(self) -> bool:
        """True until ``close()`` has been called."""
        return self._detach is not None

    def close(self) -> None:
        """Unregister the handler."""
        detach, self._detach = self._detach, None
        if detach is not None:
            detach(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "active" if self.active else "closed"
        return f"Subscription({self._name!r}, {state})"


class EventBus(Protocol):
    """Abstract event bus. The host's own bus can be adapted to this."""

    def subscribe(self, name: Hashable, handler: Handler) -> Subscription:
        """Register ``handler`` for events published under ``name``."""
        ...

    def publish(self, name: Hashable, event: Any) -> None:
        """Deliver ``event`` to every handler registered for ``name``."""
        ...


class LocalEventBus:
    """In-memory bus with per-name handler lists.

    Structure:
        _handlers[name] = [subscription, ...]  # registration order
    """

    def __init__(self) -> None:
        self._handlers: dict[Hashable, list[Subscription]] = {}

    def subscribe(self, name: Hashable, handler: Handler) -> Subscription:
        """Register a handler.

        Args:
            name: Event name.
            handler: Callable invoked with the event payload.

        Returns:
            Subscription whose ``close()`` removes the handler.
        """
        subscription = Subscription(name, handler, self._unsubscribe)
        self._handlers.setdefault(name, []).append(subscription)
        logger.debug("Subscribed %r to %r", handler, name)
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        handlers = self._handlers.get(subscription.name)
        if not handlers:
            return
        self._handlers[subscription.name] = [s for s in handlers if s is not subscription]
        if not self._handlers[subscription.name]:
            del self._handlers[subscription.name]

    def publish(self, name: Hashable, event: Any) -> None:
        """Run every handler registered for ``name``. No handlers is a no-op.

        Handlers registered or closed while publishing take effect from the
        next publish.
        """
        for subscription in list(self._handlers.get(name, ())):
            subscription.handler(event)

    def handler_count(self, name: Hashable) -> int:
        """Number of live handlers registered for ``name``."""
        return len(self._handlers.get(name, ()))


def filter_event(parameter: str, entity_type: str, callback: Handler) -> Handler:
    """Wrap a handler so it only sees events about one entity kind.

    Args:
        parameter: Payload attribute holding the entity (e.g. ``"entity"``).
        entity_type: Kind tag the entity's ``type`` must equal.
        callback: Handler to invoke when the filter passes.

    Returns:
        Handler forwarding the whole payload to ``callback`` on a match.
    """

    def _filtered(event: Any) -> None:
        entity = getattr(event, parameter, None)
        if entity is not None and getattr(entity, "type", None) == entity_type:
            callback(event)

    _filtered.__name__ = f"filtered_{getattr(callback, '__name__', 'handler')}"
    return _filtered
