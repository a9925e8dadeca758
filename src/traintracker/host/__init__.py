"""Host collaborator: object-model protocols, event names, in-memory host."""

from traintracker.host.events import (
    EntityRemovedEvent,
    HostEvent,
    LifecycleEvent,
    TrainCreatedEvent,
    TrainRemovedEvent,
    prior_ids,
)
from traintracker.host.local import LocalCarriage, LocalHost, LocalSurface, LocalTrain
from traintracker.host.protocol import (
    Carriage,
    Host,
    Locomotives,
    Surface,
    Train,
    carriage_count,
    mover_count,
)

__all__ = [
    # Protocols
    "Train",
    "Carriage",
    "Locomotives",
    "Surface",
    "Host",
    "mover_count",
    "carriage_count",
    # Events
    "HostEvent",
    "EntityRemovedEvent",
    "TrainCreatedEvent",
    "LifecycleEvent",
    "TrainRemovedEvent",
    "prior_ids",
    # In-memory host
    "LocalHost",
    "LocalSurface",
    "LocalTrain",
    "LocalCarriage",
]
