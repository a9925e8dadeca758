"""traintracker: train identity tracking over host entity-lifecycle events.

Usage:
    from traintracker import LocalEventBus, TrainTracker, HostEvent, LifecycleEvent

    bus = LocalEventBus()
    tracker = TrainTracker(host, bus)
    tracker.attach()
    bus.publish(HostEvent.INIT, LifecycleEvent())

    for info in tracker.find_filtered(state=TrainState.WAIT_STATION):
        print(info.id, tracker.get_data(info.train))
"""

__version__ = "0.1.0"

# Core primitives
from traintracker.core import (
    PRIMARY_LOCOMOTIVE,
    Criteria,
    TrainEntity,
    TrainId,
    TrainInfo,
    TrainState,
    find_filtered,
)

# Configuration
from traintracker.config import TrackerSettings

# Events
from traintracker.events import EventBus, LocalEventBus, Subscription, filter_event

# Host collaborator
from traintracker.host import (
    EntityRemovedEvent,
    Host,
    HostEvent,
    LifecycleEvent,
    LocalHost,
    Train,
    TrainCreatedEvent,
    TrainRemovedEvent,
)

# Reconciler
from traintracker.lifecycle import InvalidTrainError, TrainLifecycle

# Registry
from traintracker.registry import TrainRegistry

# Storage
from traintracker.storage import EntityDataStore, LocalEntityDataStore

# Tracker
from traintracker.tracker import TrainTracker

__all__ = [
    # Version
    "__version__",
    # Core
    "TrainId",
    "TrainState",
    "TrainEntity",
    "Criteria",
    "TrainInfo",
    "PRIMARY_LOCOMOTIVE",
    "find_filtered",
    # Config
    "TrackerSettings",
    # Events
    "EventBus",
    "LocalEventBus",
    "Subscription",
    "filter_event",
    # Host
    "Host",
    "Train",
    "HostEvent",
    "EntityRemovedEvent",
    "TrainCreatedEvent",
    "LifecycleEvent",
    "TrainRemovedEvent",
    "LocalHost",
    # Reconciler
    "TrainLifecycle",
    "InvalidTrainError",
    # Registry
    "TrainRegistry",
    # Storage
    "EntityDataStore",
    "LocalEntityDataStore",
    # Tracker
    "TrainTracker",
]
