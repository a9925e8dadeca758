"""Entity data store protocol.

The host exposes a generic key/value store keyed by entity identity. Trains are
attached to it through ``TrainEntity`` descriptors (see ``storage.trains``).

Usage:
    store = LocalEntityDataStore()
    store.set_data(entity, {"route": "north"})
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EntityDataStore(Protocol):
    """Abstract entity-keyed data store. Implementations handle actual data."""

    def get_data(self, entity: Any) -> Any | None:
        """Data attached to entity, or None."""
        ...

    def set_data(self, entity: Any, data: Any | None) -> Any | None:
        """Attach data to entity (None clears). Returns the previous data."""
        ...
