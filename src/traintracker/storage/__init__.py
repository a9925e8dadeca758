"""Entity data storage backends and the train adapter."""

from traintracker.storage.local import LocalEntityDataStore
from traintracker.storage.protocol import EntityDataStore
from traintracker.storage.trains import get_train_data, set_train_data

__all__ = [
    "EntityDataStore",
    "LocalEntityDataStore",
    "get_train_data",
    "set_train_data",
]
