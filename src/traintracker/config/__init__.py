"""Configuration module using Pydantic Settings.

Usage:
    from traintracker.config import TrackerSettings

    settings = TrackerSettings(removed_event_name="my_train_removed")
"""

from traintracker.config.settings import TrackerSettings

__all__ = [
    "TrackerSettings",
]
