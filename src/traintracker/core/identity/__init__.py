"""Train identity: synthetic entity descriptors built from train ids."""

from traintracker.core.identity.models import DEFAULT_PREFIX, TrainEntity

__all__ = [
    "TrainEntity",
    "DEFAULT_PREFIX",
]
