"""TrainTracker: wires registry, reconciler, data store and bus together.

Usage:
    tracker = TrainTracker(host, bus)
    tracker.attach()                      # host fires init -> registry rebuilt

    tracker.find_filtered(surface="nauvis", state=TrainState.WAIT_STATION)
    tracker.set_data(train, {"route": "north"})

    bus.subscribe(tracker.removed_event_name, on_removed)
    tracker.close()
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from traintracker.config import TrackerSettings
from traintracker.core.identity import TrainEntity
from traintracker.core.query import Criteria, TrainInfo, find_filtered
from traintracker.events import EventBus, Subscription
from traintracker.host.protocol import Host
from traintracker.lifecycle import TrainLifecycle
from traintracker.registry import TrainRegistry
from traintracker.storage import (
    EntityDataStore,
    LocalEntityDataStore,
    get_train_data,
    set_train_data,
)

logger = logging.getLogger(__name__)


class TrainTracker:
    """Public entry point for train tracking.

    Owns the registry and the reconciler. Subscriptions are made explicitly by
    ``attach`` and released by ``close``, so several trackers can share one bus
    and tests can tear down deterministically.
    """

    def __init__(
        self,
        host: Host,
        bus: EventBus,
        store: EntityDataStore | None = None,
        settings: TrackerSettings | None = None,
    ):
        self._host = host
        self._bus = bus
        self._store = store if store is not None else LocalEntityDataStore()
        self._settings = settings or TrackerSettings()
        self._registry = TrainRegistry()
        self._lifecycle = TrainLifecycle(
            self._registry,
            bus,
            host,
            removed_event_name=self._settings.removed_event_name,
            locomotive_type=self._settings.locomotive_type,
        )
        self._subscriptions: list[Subscription] = []

    @property
    def registry(self) -> TrainRegistry:
        return self._registry

    @property
    def lifecycle(self) -> TrainLifecycle:
        return self._lifecycle

    @property
    def settings(self) -> TrackerSettings:
        return self._settings

    @property
    def removed_event_name(self) -> Hashable:
        """Event name ``TrainRemovedEvent`` payloads are published under."""
        return self._lifecycle.removed_event_name

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    def attach(self) -> tuple[Subscription, ...]:
        """Subscribe the reconciler to host events.

        Returns:
            The subscriptions made, in registration order.

        Raises:
            RuntimeError: If already attached.
        """
        if self._subscriptions:
            raise RuntimeError("TrainTracker is already attached")
        self._subscriptions = [
            self._bus.subscribe(name, handler) for name, handler in self._lifecycle.handlers()
        ]
        logger.debug("Attached %d train handlers", len(self._subscriptions))
        return tuple(self._subscriptions)

    def start(self) -> TrainTracker:
        """Attach and rebuild immediately, for hosts whose init already fired."""
        self.attach()
        self.rebuild()
        return self

    def rebuild(self) -> None:
        """Repopulate the registry from the current host state."""
        self._lifecycle.on_configuration_changed()

    def close(self) -> None:
        """Release every subscription. Safe to call repeatedly."""
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.close()

    def __enter__(self) -> TrainTracker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_filtered(self, criteria: Criteria | None = None, **fields: Any) -> list[TrainInfo]:
        """Find trains by criteria.

        Args:
            criteria: Search criteria. Mutually exclusive with ``fields``.
            **fields: ``Criteria`` fields (surface, force, name, state).

        Returns:
            ``TrainInfo(train, id)`` for every match.

        Raises:
            TypeError: If both criteria and keyword fields are given.
        """
        if criteria is not None and fields:
            raise TypeError("Pass either a Criteria or keyword fields, not both")
        if criteria is None:
            criteria = Criteria(**fields)
        logger.debug("Searching trains with %s", criteria)
        return find_filtered(self._host, criteria)

    def to_entity(self, train: Any) -> TrainEntity:
        """Synthetic entity descriptor for a train."""
        return TrainEntity.from_train(train, prefix=self._settings.entity_name_prefix)

    def get_data(self, train: Any) -> Any | None:
        """User data attached to a train, or None."""
        return get_train_data(self._store, train, prefix=self._settings.entity_name_prefix)

    def set_data(self, train: Any, data: Any | None) -> Any | None:
        """Attach user data to a train. Returns the previous data."""
        return set_train_data(self._store, train, data, prefix=self._settings.entity_name_prefix)
