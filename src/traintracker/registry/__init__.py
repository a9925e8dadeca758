"""Train registry."""

from traintracker.registry.registry import TrainRegistry

__all__ = [
    "TrainRegistry",
]
