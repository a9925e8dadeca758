"""Local in-memory host implementation.

Plain dataclasses that satisfy the host protocols. Suitable for tests and for
embedding traintracker in tools that replay host state without a live engine.

Usage:
    host = LocalHost()
    nauvis = host.create_surface("nauvis")
    nauvis.add_train(LocalTrain.assemble(1001, front=1))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from traintracker.core.types import LOCOMOTIVE_TYPE, PRIMARY_LOCOMOTIVE, TrainState

DEFAULT_FORCE = "player"
WAGON_NAME = "cargo-wagon"


@dataclass(eq=False)
class LocalCarriage:
    """Rolling-stock entity. ``train`` points back at the owning train."""

    name: str
    type: str
    unit_number: int
    train: LocalTrain | None = None


@dataclass(frozen=True, slots=True)
class MoverLists:
    """Snapshot of a train's movers, as returned by ``LocalTrain.locomotives``."""

    front_movers: tuple[LocalCarriage, ...] | None = ()
    back_movers: tuple[LocalCarriage, ...] | None = ()


@dataclass(eq=False)
class LocalTrain:
    """In-memory train handle.

    Identity semantics (``eq=False``): two handles are the same train only if
    they are the same object, like host references.
    """

    id: int
    state: int = TrainState.ON_THE_PATH
    force: str = DEFAULT_FORCE
    valid: bool = True
    carriages: list[LocalCarriage] = field(default_factory=list)
    front_movers: list[LocalCarriage] = field(default_factory=list)
    back_movers: list[LocalCarriage] = field(default_factory=list)

    @property
    def locomotives(self) -> MoverLists:
        return MoverLists(tuple(self.front_movers), tuple(self.back_movers))

    def invalidate(self) -> None:
        """Mark the handle invalid, as the host does once a train is replaced."""
        self.valid = False

    @classmethod
    def assemble(
        cls,
        train_id: int,
        *,
        front: int = 1,
        back: int = 0,
        wagons: int = 0,
        state: int = TrainState.ON_THE_PATH,
        force: str = DEFAULT_FORCE,
        locomotive_name: str = PRIMARY_LOCOMOTIVE,
        first_unit: int | None = None,
    ) -> LocalTrain:
        """Build a train with carriages laid out front movers, wagons, back movers.

        Unit numbers are consecutive, starting at ``first_unit`` (default
        ``train_id - 1``).

        Args:
            train_id: Host id for the new train.
            front: Number of front-facing movers.
            back: Number of back-facing movers.
            wagons: Number of unpowered wagons between them.
            state: Movement state.
            force: Owning force.
            locomotive_name: Prototype name given to every mover.
            first_unit: Unit number of the first carriage.

        Returns:
            The assembled train, with every carriage pointing back at it.
        """
        train = cls(id=train_id, state=state, force=force)
        unit = train_id - 1 if first_unit is None else first_unit

        def _add(name: str, kind: str) -> LocalCarriage:
            nonlocal unit
            carriage = LocalCarriage(name=name, type=kind, unit_number=unit, train=train)
            unit += 1
            train.carriages.append(carriage)
            return carriage

        for _ in range(front):
            train.front_movers.append(_add(locomotive_name, LOCOMOTIVE_TYPE))
        for _ in range(wagons):
            _add(WAGON_NAME, "cargo-wagon")
        for _ in range(back):
            train.back_movers.append(_add(locomotive_name, LOCOMOTIVE_TYPE))
        return train


@dataclass(eq=False)
class LocalSurface:
    """Surface holding trains in insertion order."""

    name: str
    index: int
    trains: list[LocalTrain] = field(default_factory=list)

    def add_train(self, train: LocalTrain) -> LocalTrain:
        self.trains.append(train)
        return train

    def remove_train(self, train: LocalTrain) -> bool:
        """Drop a train from the surface. Returns True if it was present."""
        for i, existing in enumerate(self.trains):
            if existing is train:
                del self.trains[i]
                return True
        return False

    def get_trains(self, force: str | None = None) -> list[LocalTrain]:
        """Valid trains on this surface, restricted to ``force`` when given."""
        return [
            train
            for train in self.trains
            if train.valid and (force is None or train.force == force)
        ]


class LocalHost:
    """Surface directory keyed by name, with host-style 1-based indices."""

    def __init__(self) -> None:
        self._surfaces: dict[str, LocalSurface] = {}

    def create_surface(self, name: str) -> LocalSurface:
        """Create a surface, or return the existing one with that name."""
        if name in self._surfaces:
            return self._surfaces[name]
        surface = LocalSurface(name=name, index=len(self._surfaces) + 1)
        self._surfaces[name] = surface
        return surface

    def all_surfaces(self) -> Iterator[LocalSurface]:
        yield from self._surfaces.values()

    def get_surface(self, key: str | int) -> LocalSurface | None:
        if isinstance(key, str):
            return self._surfaces.get(key)
        for surface in self._surfaces.values():
            if surface.index == key:
                return surface
        return None
