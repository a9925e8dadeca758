"""Event bus protocol and in-memory implementation."""

from traintracker.events.bus import EventBus, Handler, LocalEventBus, Subscription, filter_event

__all__ = [
    "EventBus",
    "LocalEventBus",
    "Subscription",
    "Handler",
    "filter_event",
]
