"""Tests for LocalEventBus and subscriptions.

Why these tests exist:
- Handler order must follow registration order
- Subscriptions must tear down deterministically
- Handler errors must reach the publisher
"""

from types import SimpleNamespace

import pytest

from traintracker.events import EventBus, LocalEventBus, Subscription, filter_event


def test_local_bus_is_event_bus():
    bus: EventBus = LocalEventBus()
    assert callable(bus.subscribe)
    assert callable(bus.publish)


def test_handlers_run_in_registration_order():
    bus = LocalEventBus()
    calls = []
    bus.subscribe("tick", lambda event: calls.append(("first", event)))
    bus.subscribe("tick", lambda event: calls.append(("second", event)))

    bus.publish("tick", 42)

    assert calls == [("first", 42), ("second", 42)]


def test_publish_without_handlers_is_noop():
    LocalEventBus().publish("nobody-listens", object())


def test_names_are_isolated():
    bus = LocalEventBus()
    seen = []
    bus.subscribe("a", seen.append)

    bus.publish("b", 1)

    assert seen == []


def test_close_unregisters_and_is_idempotent():
    bus = LocalEventBus()
    seen = []
    subscription = bus.subscribe("tick", seen.append)
    assert isinstance(subscription, Subscription)
    assert subscription.active

    subscription.close()
    subscription.close()
    bus.publish("tick", 1)

    assert seen == []
    assert not subscription.active
    assert bus.handler_count("tick") == 0


def test_close_only_removes_its_own_handler():
    """Same handler subscribed twice: closing one subscription keeps the other."""
    bus = LocalEventBus()
    seen = []
    first = bus.subscribe("tick", seen.append)
    bus.subscribe("tick", seen.append)

    first.close()
    bus.publish("tick", 1)

    assert seen == [1]


def test_subscription_as_context_manager():
    bus = LocalEventBus()
    seen = []

    with bus.subscribe("tick", seen.append) as subscription:
        bus.publish("tick", 1)
    bus.publish("tick", 2)

    assert seen == [1]
    assert not subscription.active
    assert "closed" in repr(subscription)


def test_handler_exceptions_propagate():
    bus = LocalEventBus()

    def explode(event):
        raise ValueError("boom")

    bus.subscribe("tick", explode)

    with pytest.raises(ValueError, match="boom"):
        bus.publish("tick", None)


def test_subscribing_during_publish_applies_next_time():
    bus = LocalEventBus()
    seen = []

    def late(event):
        seen.append(("late", event))

    def subscriber(event):
        seen.append(("early", event))
        bus.subscribe("tick", late)

    bus.subscribe("tick", subscriber)
    bus.publish("tick", 1)

    assert seen == [("early", 1)]


class TestFilterEvent:
    def test_matching_kind_is_forwarded_whole(self):
        seen = []
        handler = filter_event("entity", "locomotive", seen.append)
        event = SimpleNamespace(entity=SimpleNamespace(type="locomotive"))

        handler(event)

        assert seen == [event]

    def test_other_kinds_are_dropped(self):
        seen = []
        handler = filter_event("entity", "locomotive", seen.append)

        handler(SimpleNamespace(entity=SimpleNamespace(type="cargo-wagon")))
        handler(SimpleNamespace(entity=None))
        handler(SimpleNamespace())

        assert seen == []

    def test_wrapper_is_named_after_callback(self):
        def on_removed(event):
            pass

        assert filter_event("entity", "locomotive", on_removed).__name__ == "filtered_on_removed"
