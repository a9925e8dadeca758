"""Lifecycle reconciler: keeps train identity consistent across host events.

The host renumbers trains whenever cars are coupled or decoupled, firing
``on_train_created`` with the ids it consumed. Locomotive removals arrive
separately and may or may not end the train. The reconciler turns both into
registry mutations and a derived ``on_train_removed`` event.

Usage:
    lifecycle = TrainLifecycle(registry, bus, host)
    for name, handler in lifecycle.handlers():
        bus.subscribe(name, handler)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from traintracker.core.query import find_filtered
from traintracker.core.types import LOCOMOTIVE_TYPE, TRAIN_REMOVED
from traintracker.events import EventBus, Handler, filter_event
from traintracker.host.events import HostEvent, TrainRemovedEvent, prior_ids
from traintracker.host.protocol import Host, carriage_count, describe_train, mover_count
from traintracker.registry import TrainRegistry

logger = logging.getLogger(__name__)


class InvalidTrainError(RuntimeError):
    """Removal notification referenced a train the host already invalidated."""

    pass


class TrainLifecycle:
    """Event handlers deciding when a train starts, ends, or is renumbered.

    Per train id:
        absent -> registered        train created with at least one mover
        registered -> (event)       last mover removed, removal event published
        registered -> absent        train created naming the id as a prior id

    Args:
        registry: Registry this reconciler owns writes to.
        bus: Bus the derived removal event is published on.
        host: Host searched when the registry is rebuilt.
        removed_event_name: Name of the derived removal event.
        locomotive_type: Entity kind tag routed to ``on_locomotive_removed``.
    """

    def __init__(
        self,
        registry: TrainRegistry,
        bus: EventBus,
        host: Host,
        removed_event_name: Hashable = TRAIN_REMOVED,
        locomotive_type: str = LOCOMOTIVE_TYPE,
    ):
        self._registry = registry
        self._bus = bus
        self._host = host
        self._removed_event_name = removed_event_name
        self._locomotive_type = locomotive_type

    @property
    def registry(self) -> TrainRegistry:
        return self._registry

    @property
    def removed_event_name(self) -> Hashable:
        return self._removed_event_name

    def on_locomotive_removed(self, event: Any) -> TrainRemovedEvent | None:
        """Handle a locomotive being destroyed or mined.

        The payload's entity still points at its pre-removal train. If another
        mover stays coupled, the host follows up with ``on_train_created`` and
        nothing happens here. Otherwise the train is gone and a removal event
        is published. The registry is left for ``on_train_created`` to clean up.

        Args:
            event: Payload with an ``entity`` whose ``train`` is the old train.

        Returns:
            The published removal event, or None when the train survives.

        Raises:
            InvalidTrainError: If the old train is already invalid.
        """
        train = event.entity.train
        if train is None or not train.valid:
            raise InvalidTrainError(
                f"Locomotive {getattr(event.entity, 'unit_number', '?')} removed "
                f"from an invalid train"
            )

        if carriage_count(train) > 1 and mover_count(train) > 1:
            logger.debug("Train %s keeps a mover, waiting for train-created", train.id)
            return None

        removed = TrainRemovedEvent(old_id=train.id)
        logger.info("Train %s removed (%s)", train.id, describe_train(train))
        self._bus.publish(self._removed_event_name, removed)
        return removed

    def on_train_created(self, event: Any) -> None:
        """Handle the host finishing a coupling or decoupling operation.

        Registers the new train if it has a mover, then drops every distinct
        prior id. A prior id equal to the new id is kept only when the new
        train was just registered under it.

        Args:
            event: Payload with ``train`` and optional ``old_id_1``/``old_id_2``.
        """
        train = event.train
        registered = mover_count(train) > 0
        if registered:
            self._registry.register(train)

        for old_id in prior_ids(event):
            if registered and old_id == train.id:
                continue
            self._registry.unregister(old_id)

    def on_configuration_changed(self, event: Any = None) -> None:
        """Rebuild the registry from a full host search."""
        self._registry.rebuild(find_filtered(self._host))

    def handlers(self) -> list[tuple[Hashable, Handler]]:
        """Host event names paired with the handler each should be routed to.

        Returns:
            Registration table, in the order subscriptions should be made.
        """
        removed = filter_event("entity", self._locomotive_type, self.on_locomotive_removed)
        return [
            (HostEvent.ENTITY_DIED, removed),
            (HostEvent.PLAYER_MINED_ENTITY, removed),
            (HostEvent.TRAIN_CREATED, self.on_train_created),
            (HostEvent.INIT, self.on_configuration_changed),
            (HostEvent.CONFIGURATION_CHANGED, self.on_configuration_changed),
        ]
