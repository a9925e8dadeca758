"""Core functionalities: stateless models and queries.

Architecture Note:
    core/ holds pure building blocks with no runtime state. Stateful services
    (registry, lifecycle, tracker) live in their own packages and build on
    these.
"""

from traintracker.core.identity import TrainEntity
from traintracker.core.query import (
    PRIMARY_LOCOMOTIVE,
    Criteria,
    TrainInfo,
    find_filtered,
    lookup_surfaces,
)
from traintracker.core.types import TrainId, TrainState

__all__ = [
    # Types
    "TrainId",
    "TrainState",
    # Identity
    "TrainEntity",
    # Query
    "Criteria",
    "TrainInfo",
    "PRIMARY_LOCOMOTIVE",
    "find_filtered",
    "lookup_surfaces",
]
