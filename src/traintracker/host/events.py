"""Host event names and payload records.

The host fires a fixed set of events. Payloads are duck-typed on the consuming
side; the dataclasses here are what the in-memory host and tests publish.

Usage:
    bus.publish(HostEvent.TRAIN_CREATED, TrainCreatedEvent(train=train, old_id_1=1001))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from traintracker.core.types import TrainId


class HostEvent(StrEnum):
    """Event names fired by the host engine."""

    ENTITY_DIED = "on_entity_died"
    PLAYER_MINED_ENTITY = "on_player_mined_entity"
    TRAIN_CREATED = "on_train_created"
    INIT = "init"
    CONFIGURATION_CHANGED = "configuration_changed"


@dataclass(frozen=True, slots=True)
class EntityRemovedEvent:
    """Payload of ``on_entity_died`` and ``on_player_mined_entity``.

    Attributes:
        entity: The removed host entity. Its ``train`` still reflects the
            pre-removal topology while handlers run. The same payload is
            fired under both event names.
    """

    entity: Any


@dataclass(frozen=True, slots=True)
class TrainCreatedEvent:
    """Payload of ``on_train_created``.

    Attributes:
        train: The train produced by the coupling/decoupling operation.
        old_id_1: First predecessor id consumed, if any.
        old_id_2: Second predecessor id consumed (merges only).
    """

    train: Any
    old_id_1: TrainId | None = None
    old_id_2: TrainId | None = None

    def prior_ids(self) -> tuple[TrainId, ...]:
        """Distinct predecessor ids, in payload order."""
        return prior_ids(self)


@dataclass(frozen=True, slots=True)
class LifecycleEvent:
    """Payload-less notification (``init``, ``configuration_changed``)."""

    pass


@dataclass(frozen=True, slots=True)
class TrainRemovedEvent:
    """Derived event published when a train is judged fully gone.

    Attributes:
        old_id: Id of the train before the removal.
        remains_id: Id of leftover wagons, when known. Currently always None.
    """

    old_id: TrainId
    remains_id: TrainId | None = None


def prior_ids(event: Any) -> tuple[TrainId, ...]:
    """Distinct predecessor ids carried by a train-created payload.

    Works on any object exposing ``old_id_1`` / ``old_id_2``; missing
    attributes count as absent.

    Args:
        event: Train-created payload.

    Returns:
        Zero, one or two ids in payload order, duplicates dropped.
    """
    ids: list[TrainId] = []
    for old_id in (getattr(event, "old_id_1", None), getattr(event, "old_id_2", None)):
        if old_id is not None and old_id not in ids:
            ids.append(old_id)
    return tuple(ids)
