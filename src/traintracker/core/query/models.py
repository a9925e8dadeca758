"""Train search criteria.

Usage:
    Criteria()                                    # every train on every surface
    Criteria(surface="nauvis", state=TrainState.WAIT_STATION)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, NamedTuple

from traintracker.core.types import PRIMARY_LOCOMOTIVE, TrainId

type SurfaceSelector = str | int | Any | Iterable[Any] | None
"""Surface name, surface index, surface object, or an iterable of those. None = all."""


@dataclass(frozen=True)
class Criteria:
    """Filter record for train searches.

    Attributes:
        surface: Surface selector. None searches every surface.
        force: Owning force. None matches every force.
        name: Entity kind. None means unspecified; see ``resolved_name``.
        state: Movement state to keep. None keeps every state.
    """

    surface: SurfaceSelector = None
    force: str | None = None
    name: str | None = None
    state: int | None = None

    def resolved_name(self, default: str = PRIMARY_LOCOMOTIVE) -> str:
        """Entity kind in effect, falling back to the primary locomotive kind."""
        return self.name if self.name is not None else default

    def filters_kind(self) -> bool:
        """True when the caller asked for a specific entity kind."""
        return self.name is not None


class TrainInfo(NamedTuple):
    """One search hit: the train handle and its id at search time."""

    train: Any
    id: TrainId
