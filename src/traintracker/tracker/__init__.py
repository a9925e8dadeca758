"""Tracker facade.

Architecture Note:
    tracker/ is the stateful service layer that owns the registry and routes
    host events to the reconciler. core/ stays stateless underneath it.
"""

from traintracker.tracker.tracker import TrainTracker

__all__ = [
    "TrainTracker",
]
