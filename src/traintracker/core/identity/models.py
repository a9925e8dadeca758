"""Train identity models.

Usage:
    entity = TrainEntity.from_train(train)   # TrainEntity(name="train-1001", valid=True)
    entity.equals(TrainEntity.for_id(1001))  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from traintracker.core.types import TRAIN_ENTITY_PREFIX as DEFAULT_PREFIX


@dataclass(frozen=True, slots=True)
class TrainEntity:
    """Synthetic entity standing in for a train in entity-keyed stores.

    Trains are not entities on the host side, so the data store cannot key
    them directly. The name is derived from the train id only, so two
    descriptors built from the same id are interchangeable.
    """

    name: str
    valid: bool = True

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrainEntity):
            return NotImplemented
        return self.name == other.name

    def equals(self, other: Any) -> bool:
        """Identity check against any entity-like object exposing ``name``.

        Validity is not compared.
        """
        return self.name == getattr(other, "name", None)

    @classmethod
    def for_id(cls, train_id: int, valid: bool = True, prefix: str = DEFAULT_PREFIX) -> TrainEntity:
        return cls(name=f"{prefix}{train_id}", valid=valid)

    @classmethod
    def from_train(cls, train: Any, prefix: str = DEFAULT_PREFIX) -> TrainEntity:
        """Wrap a train handle, mirroring its validity flag."""
        return cls.for_id(train.id, valid=bool(train.valid), prefix=prefix)
