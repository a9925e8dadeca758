"""Train search over host surfaces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from traintracker.core.query.models import Criteria, SurfaceSelector, TrainInfo
from traintracker.host.protocol import Host, Surface, Train


def _is_surface(candidate: Any) -> bool:
    return callable(getattr(candidate, "get_trains", None))


def lookup_surfaces(host: Host, selector: SurfaceSelector) -> list[Surface]:
    """Resolve a surface selector to surface objects.

    Handles multiple input formats:
    - None -> every surface the host has, in host order
    - str or int -> surface with that name or index
    - surface object -> itself
    - iterable of any of the above -> each, flattened, first occurrence kept

    Unknown names and indices are skipped.

    Args:
        host: Host surface directory.
        selector: Surface selector.

    Returns:
        Resolved surfaces, possibly empty.

    Raises:
        TypeError: If selector is not a recognized surface selector format.
    """
    if selector is None:
        return list(host.all_surfaces())

    resolved: list[Surface] = []

    def _add(item: Any) -> None:
        if isinstance(item, (str, int)):
            surface = host.get_surface(item)
            if surface is None:
                return
        elif _is_surface(item):
            surface = item
        else:
            raise TypeError(f"Invalid surface selector: {item!r}")
        if not any(existing is surface for existing in resolved):
            resolved.append(surface)

    if isinstance(selector, (str, int)) or _is_surface(selector):
        _add(selector)
    elif isinstance(selector, Iterable):
        for item in selector:
            _add(item)
    else:
        raise TypeError(f"Invalid surface selector: {selector!r}")
    return resolved


def _has_kind(train: Train, name: str) -> bool:
    carriages = getattr(train, "carriages", None) or ()
    return any(getattr(carriage, "name", None) == name for carriage in carriages)


def find_filtered(host: Host, criteria: Criteria | None = None) -> list[TrainInfo]:
    """Find trains matching criteria.

    Surfaces are searched in selector order, trains in host order. With no
    criteria every train on every surface is returned.

    Args:
        host: Host to search.
        criteria: Filters to apply. None is the same as ``Criteria()``.

    Returns:
        ``TrainInfo(train, id)`` for each match. Empty list when nothing matches.
    """
    criteria = criteria or Criteria()

    trains: list[Train] = []
    for surface in lookup_surfaces(host, criteria.surface):
        trains.extend(surface.get_trains(criteria.force))

    if criteria.filters_kind():
        kind = criteria.resolved_name()
        trains = [train for train in trains if _has_kind(train, kind)]

    if criteria.state is not None:
        trains = [train for train in trains if train.state == criteria.state]

    return [TrainInfo(train=train, id=train.id) for train in trains]
