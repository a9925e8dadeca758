"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the tracker.

Usage:
    from traintracker.config import TrackerSettings

    # Load from environment variables (TRAINS_*)
    settings = TrackerSettings()

    # Or override with explicit values
    settings = TrackerSettings(locomotive_type="electric-locomotive")
"""

from __future__ import annotations

from traintracker.core.types import LOCOMOTIVE_TYPE, TRAIN_ENTITY_PREFIX, TRAIN_REMOVED

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class TrackerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the train tracker.

    Attributes:
        locomotive_type: Entity kind tag whose removal events are tracked.
        entity_name_prefix: Prefix of synthetic train entity names.
        removed_event_name: Event name the derived removal event is published under.

    Environment Variables:
        TRAINS_LOCOMOTIVE_TYPE
        TRAINS_ENTITY_NAME_PREFIX
        TRAINS_REMOVED_EVENT_NAME
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAINS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locomotive_type: str = LOCOMOTIVE_TYPE
    entity_name_prefix: str = TRAIN_ENTITY_PREFIX
    removed_event_name: str = TRAIN_REMOVED
