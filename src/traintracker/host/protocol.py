"""Structural types for the host engine's train object model.

The host owns every object described here. traintracker only holds non-owning
references and reads attributes, so any object with matching attributes works:
real engine bindings, the in-memory host in ``traintracker.host.local``, or
test doubles.

Usage:
    def count_movers(train: Train) -> int:
        return mover_count(train)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Locomotives(Protocol):
    """Movers of a train, split by the direction they pull in.

    Either list may be ``None`` when the host has nothing to report for that
    direction.
    """

    front_movers: Sequence[Any] | None
    back_movers: Sequence[Any] | None


@runtime_checkable
class Train(Protocol):
    """Host train handle."""

    id: int
    valid: bool
    state: int
    locomotives: Locomotives
    carriages: Sequence[Carriage]


@runtime_checkable
class Carriage(Protocol):
    """Host rolling-stock entity (locomotive or wagon)."""

    name: str
    type: str
    unit_number: int
    train: Train


@runtime_checkable
class Surface(Protocol):
    """Spatial partition of the host world."""

    name: str
    index: int

    def get_trains(self, force: str | None = None) -> Sequence[Train]:
        """Trains on this surface, restricted to ``force`` when given."""
        ...


class Host(Protocol):
    """Host-side surface directory."""

    def all_surfaces(self) -> Iterator[Surface]:
        """Iterate every surface that currently exists, in host order."""
        ...

    def get_surface(self, key: str | int) -> Surface | None:
        """Look up a surface by name or index. None when it does not exist."""
        ...


def _movers(movers: Iterable[Any] | None) -> int:
    return len(list(movers)) if movers is not None else 0


def mover_count(train: Train) -> int:
    """Total movers attached to a train, front and back together."""
    locomotives = train.locomotives
    return _movers(locomotives.front_movers) + _movers(locomotives.back_movers)


def carriage_count(train: Train) -> int:
    """Number of carriages in a train. Absent carriage lists count as zero."""
    carriages = getattr(train, "carriages", None)
    return len(carriages) if carriages is not None else 0


def describe_train(train: Train) -> Mapping[str, Any]:
    """Small dict view of a train for log records."""
    return {
        "id": train.id,
        "valid": train.valid,
        "state": train.state,
        "movers": mover_count(train),
        "carriages": carriage_count(train),
    }
