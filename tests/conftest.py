"""Shared test fixtures.

Train fixtures mirror the host scenarios the tracker has to handle: ids
1001/2001, locomotive unit numbers 1000/2000.
"""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from traintracker import LocalEventBus, TrackerSettings, TrainState, TrainTracker
from traintracker.host import LocalHost, LocalTrain


class RecordingHandler:
    """Handler double that records every payload it receives."""

    def __init__(self) -> None:
        self.events: list = []

    def __call__(self, event) -> None:
        self.events.append(event)


@pytest.fixture
def host():
    """Host with a single empty surface, like a fresh world."""
    host = LocalHost()
    host.create_surface("nauvis")
    return host


@pytest.fixture
def nauvis(host):
    return host.get_surface("nauvis")


@pytest.fixture
def bus():
    """Fresh LocalEventBus instance."""
    return LocalEventBus()


@pytest.fixture
def settings():
    return TrackerSettings(_env_file=None)


@pytest.fixture
def tracker(host, bus, settings):
    """Attached tracker, closed after the test."""
    tracker = TrainTracker(host, bus, settings=settings)
    tracker.attach()
    yield tracker
    tracker.close()


@pytest.fixture
def removed(bus, tracker):
    """Records derived train-removed events."""
    recorder = RecordingHandler()
    with bus.subscribe(tracker.removed_event_name, recorder):
        yield recorder


@pytest.fixture
def single_train_with_single_locomotive(nauvis):
    return nauvis.add_train(LocalTrain.assemble(1001, front=1, state=TrainState.PATH_LOST))


@pytest.fixture
def single_train_with_two_locomotives(nauvis):
    return nauvis.add_train(LocalTrain.assemble(1001, front=1, back=1, state=TrainState.PATH_LOST))


@pytest.fixture
def two_trains_with_single_locomotive(nauvis):
    return (
        nauvis.add_train(LocalTrain.assemble(1001, front=1, state=TrainState.PATH_LOST)),
        nauvis.add_train(LocalTrain.assemble(2001, front=1, state=TrainState.PATH_LOST)),
    )


@pytest.fixture
def trains_in_different_states(nauvis):
    return (
        nauvis.add_train(LocalTrain.assemble(1001, front=1, state=TrainState.PATH_LOST)),
        nauvis.add_train(LocalTrain.assemble(2001, front=1, state=TrainState.MANUAL_CONTROL)),
    )


@pytest.fixture
def train_with_front_and_back_locomotives_a(nauvis):
    return nauvis.add_train(LocalTrain.assemble(1001, front=1, back=1))


@pytest.fixture
def train_with_front_and_back_locomotives_b(nauvis):
    return nauvis.add_train(LocalTrain.assemble(2001, front=1, back=1))
