"""Local in-memory entity data store.

Simple dict-based store suitable for single-process use and testing.

Usage:
    store = LocalEntityDataStore()
    store.set_data(TrainEntity.for_id(1001), "payload")
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class LocalEntityDataStore:
    """In-memory store keyed by entity name.

    Structure:
        _data[entity.name] = data

    Entities are matched by name only, the same predicate ``TrainEntity.equals``
    uses, so a fresh descriptor for the same train finds earlier data.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    @staticmethod
    def _key(entity: Any) -> str:
        name = getattr(entity, "name", None)
        if name is None:
            raise ValueError(f"Entity has no name: {entity!r}")
        return str(name)

    def get_data(self, entity: Any) -> Any | None:
        """Get data attached to an entity.

        Args:
            entity: Entity-like object with a ``name``.

        Returns:
            Stored data or None if nothing is attached.

        Raises:
            ValueError: If entity has no name.
        """
        return self._data.get(self._key(entity))

    def set_data(self, entity: Any, data: Any | None) -> Any | None:
        """Attach data to an entity, replacing what was there.

        Args:
            entity: Entity-like object with a ``name``.
            data: Value to store. None removes the entry.

        Returns:
            The previously stored data, or None.

        Raises:
            ValueError: If entity has no name.
        """
        key = self._key(entity)
        previous = self._data.get(key)
        if data is None:
            self._data.pop(key, None)
        else:
            self._data[key] = data
        return previous

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)
