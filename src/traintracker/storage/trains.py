"""Train user data on top of an entity data store.

Each call wraps the train in a fresh ``TrainEntity`` and delegates. Nothing is
cached, so data follows the train id: after a split or merge the new id starts
with no data.
"""

from __future__ import annotations

from typing import Any

from traintracker.core.identity import DEFAULT_PREFIX, TrainEntity
from traintracker.storage.protocol import EntityDataStore


def get_train_data(store: EntityDataStore, train: Any, prefix: str = DEFAULT_PREFIX) -> Any | None:
    """Get user data attached to a train."""
    return store.get_data(TrainEntity.from_train(train, prefix=prefix))


def set_train_data(
    store: EntityDataStore, train: Any, data: Any | None, prefix: str = DEFAULT_PREFIX
) -> Any | None:
    """Set user data on a train. Returns whatever the store returns (previous data)."""
    return store.set_data(TrainEntity.from_train(train, prefix=prefix), data)
