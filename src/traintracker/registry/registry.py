"""Train registry: owned mapping from train id to live train handle.

Usage:
    registry = TrainRegistry()
    registry.rebuild(find_filtered(host))
    train = registry.get(1001)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from traintracker.core.query import TrainInfo
from traintracker.core.types import TrainId

logger = logging.getLogger(__name__)


class TrainRegistry:
    """Mapping of train id to train handle.

    Holds non-owning references. Entries are registered while valid; a handle
    the host has since invalidated is never returned from ``get`` and can be
    dropped with ``prune``.
    """

    def __init__(self) -> None:
        self._trains: dict[TrainId, Any] = {}

    def rebuild(self, trains: Iterable[TrainInfo]) -> None:
        """Replace the whole mapping with the given search results.

        Idempotent: the same input always yields the same mapping.

        Args:
            trains: ``TrainInfo`` pairs, usually ``find_filtered(host)``.
        """
        self._trains = {int(info.id): info.train for info in trains}
        logger.info("Train registry rebuilt with %d trains", len(self._trains))

    def register(self, train: Any) -> None:
        """Map ``train.id`` to ``train``, replacing any earlier handle."""
        self._trains[train.id] = train
        logger.debug("Registered train %s", train.id)

    def unregister(self, train_id: TrainId) -> bool:
        """Remove an id.

        Returns:
            True if the id was registered, False otherwise.
        """
        if self._trains.pop(train_id, None) is None:
            return False
        logger.debug("Unregistered train %s", train_id)
        return True

    def get(self, train_id: TrainId) -> Any | None:
        """Handle registered under ``train_id``, or None if absent or invalid."""
        train = self._trains.get(train_id)
        if train is None or not train.valid:
            return None
        return train

    def prune(self) -> list[TrainId]:
        """Drop entries whose handle is no longer valid.

        Returns:
            Ids removed, in registration order.
        """
        stale = [train_id for train_id, train in self._trains.items() if not train.valid]
        for train_id in stale:
            del self._trains[train_id]
        if stale:
            logger.debug("Pruned invalid trains %s", stale)
        return stale

    def ids(self) -> list[TrainId]:
        return list(self._trains)

    def items(self) -> list[tuple[TrainId, Any]]:
        return list(self._trains.items())

    def as_dict(self) -> dict[TrainId, Any]:
        """Shallow copy of the mapping."""
        return dict(self._trains)

    def __contains__(self, train_id: object) -> bool:
        return train_id in self._trains

    def __len__(self) -> int:
        return len(self._trains)

    def __iter__(self) -> Iterator[TrainId]:
        return iter(list(self._trains))

    def __repr__(self) -> str:
        return f"TrainRegistry(ids={sorted(self._trains)})"
