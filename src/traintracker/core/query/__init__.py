"""Train search: criteria record and surface-wide lookup."""

from traintracker.core.query.models import (
    PRIMARY_LOCOMOTIVE,
    Criteria,
    SurfaceSelector,
    TrainInfo,
)
from traintracker.core.query.operations import find_filtered, lookup_surfaces

__all__ = [
    # Models
    "Criteria",
    "TrainInfo",
    "SurfaceSelector",
    "PRIMARY_LOCOMOTIVE",
    # Operations
    "find_filtered",
    "lookup_surfaces",
]
