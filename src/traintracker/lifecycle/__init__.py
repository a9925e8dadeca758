"""Lifecycle reconciler for host train events."""

from traintracker.lifecycle.reconciler import (
    LOCOMOTIVE_TYPE,
    TRAIN_REMOVED,
    InvalidTrainError,
    TrainLifecycle,
)

__all__ = [
    "TrainLifecycle",
    "InvalidTrainError",
    "TRAIN_REMOVED",
    "LOCOMOTIVE_TYPE",
]
