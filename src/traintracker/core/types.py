"""Core type definitions for traintracker."""

from enum import IntEnum

PRIMARY_LOCOMOTIVE = "diesel-locomotive"
"""Prototype name of the primary locomotive kind."""

LOCOMOTIVE_TYPE = "locomotive"
"""Entity kind tag the host gives every locomotive."""

TRAIN_REMOVED = "on_train_removed"
"""Default name of the derived train-removed event."""

TRAIN_ENTITY_PREFIX = "train-"
"""Default prefix of synthetic train entity names."""

type TrainId = int
"""Host-assigned train number.

Unique among valid trains, but reassigned whenever cars are coupled or
decoupled. Never treat it as stable across a train-created event.
"""


class TrainState(IntEnum):
    """Movement states reported by the host for a train.

    Values mirror the host's numbering so raw integers from host payloads
    compare equal to members.
    """

    ON_THE_PATH = 0
    PATH_LOST = 1
    NO_SCHEDULE = 2
    NO_PATH = 3
    ARRIVE_SIGNAL = 4
    WAIT_SIGNAL = 5
    ARRIVE_STATION = 6
    WAIT_STATION = 7
    MANUAL_CONTROL_STOP = 8
    MANUAL_CONTROL = 9
    DESTINATION_FULL = 10
