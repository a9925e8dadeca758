"""Tests for the TrainTracker facade."""

import pytest

from traintracker import (
    Criteria,
    LocalEventBus,
    TrackerSettings,
    TrainEntity,
    TrainState,
    TrainTracker,
)
from traintracker.host import EntityRemovedEvent, HostEvent, LifecycleEvent, LocalTrain
from traintracker.storage import LocalEntityDataStore


class TestAttach:
    def test_attach_subscribes_every_host_event(self, host, bus, settings):
        tracker = TrainTracker(host, bus, settings=settings)

        subscriptions = tracker.attach()

        assert tracker.attached
        assert [s.name for s in subscriptions] == [
            HostEvent.ENTITY_DIED,
            HostEvent.PLAYER_MINED_ENTITY,
            HostEvent.TRAIN_CREATED,
            HostEvent.INIT,
            HostEvent.CONFIGURATION_CHANGED,
        ]
        tracker.close()

    def test_double_attach_raises(self, tracker):
        with pytest.raises(RuntimeError, match="already attached"):
            tracker.attach()

    def test_close_releases_subscriptions(self, host, bus, settings):
        tracker = TrainTracker(host, bus, settings=settings)
        subscriptions = tracker.attach()

        tracker.close()
        tracker.close()

        assert not tracker.attached
        assert not any(s.active for s in subscriptions)
        assert bus.handler_count(HostEvent.TRAIN_CREATED) == 0

    def test_context_manager_closes(self, host, bus, settings):
        with TrainTracker(host, bus, settings=settings) as tracker:
            tracker.attach()
        assert bus.handler_count(HostEvent.INIT) == 0

    def test_reattach_after_close(self, host, bus, settings):
        tracker = TrainTracker(host, bus, settings=settings)
        tracker.attach()
        tracker.close()

        tracker.attach()

        assert bus.handler_count(HostEvent.INIT) == 1
        tracker.close()

    def test_start_rebuilds_immediately(self, host, bus, settings, two_trains_with_single_locomotive):
        tracker = TrainTracker(host, bus, settings=settings).start()

        assert sorted(tracker.registry.ids()) == [1001, 2001]
        tracker.close()


class TestEvents:
    def test_init_event_rebuilds(self, tracker, bus, two_trains_with_single_locomotive):
        first, second = two_trains_with_single_locomotive

        bus.publish(HostEvent.INIT, LifecycleEvent())

        assert tracker.registry.as_dict() == {1001: first, 2001: second}

    def test_configuration_changed_rebuilds(self, tracker, bus, nauvis):
        bus.publish(HostEvent.INIT, LifecycleEvent())
        assert len(tracker.registry) == 0

        nauvis.add_train(LocalTrain.assemble(1001))
        bus.publish(HostEvent.CONFIGURATION_CHANGED, LifecycleEvent())

        assert tracker.registry.ids() == [1001]

    def test_closed_tracker_ignores_events(self, host, bus, settings, two_trains_with_single_locomotive):
        tracker = TrainTracker(host, bus, settings=settings)
        tracker.attach()
        tracker.close()

        bus.publish(HostEvent.INIT, LifecycleEvent())

        assert len(tracker.registry) == 0

    def test_settings_drive_event_routing(self, host, bus, nauvis):
        settings = TrackerSettings(
            _env_file=None, locomotive_type="electric", removed_event_name="gone"
        )
        tracker = TrainTracker(host, bus, settings=settings)
        tracker.attach()
        seen = []
        bus.subscribe("gone", seen.append)
        train = nauvis.add_train(LocalTrain.assemble(1001))
        train.carriages[0].type = "electric"

        bus.publish(HostEvent.ENTITY_DIED, EntityRemovedEvent(entity=train.carriages[0]))

        assert tracker.removed_event_name == "gone"
        assert [event.old_id for event in seen] == [1001]
        tracker.close()


class TestQueries:
    def test_find_filtered_with_keywords(self, tracker, trains_in_different_states):
        _, second = trains_in_different_states

        hits = tracker.find_filtered(state=TrainState.MANUAL_CONTROL)

        assert [info.train for info in hits] == [second]

    def test_find_filtered_with_criteria(self, tracker, trains_in_different_states):
        hits = tracker.find_filtered(Criteria(surface="nauvis"))

        assert [info.id for info in hits] == [1001, 2001]

    def test_find_filtered_rejects_mixed_arguments(self, tracker):
        with pytest.raises(TypeError, match="not both"):
            tracker.find_filtered(Criteria(), state=1)

    def test_find_filtered_unknown_field(self, tracker):
        with pytest.raises(TypeError):
            tracker.find_filtered(colour="red")


class TestUserData:
    def test_to_entity(self, tracker):
        assert tracker.to_entity(LocalTrain.assemble(1001)) == TrainEntity.for_id(1001)

    def test_set_then_get(self, tracker):
        train = LocalTrain.assemble(1001)

        assert tracker.set_data(train, {"route": "north"}) is None
        assert tracker.get_data(train) == {"route": "north"}

    def test_shared_store(self, host, settings):
        store = LocalEntityDataStore()
        tracker = TrainTracker(host, LocalEventBus(), store=store, settings=settings)
        train = LocalTrain.assemble(1001)

        tracker.set_data(train, "payload")

        assert store.get_data(TrainEntity.for_id(1001)) == "payload"

    def test_prefix_from_settings(self, host):
        settings = TrackerSettings(_env_file=None, entity_name_prefix="consist-")
        tracker = TrainTracker(host, LocalEventBus(), settings=settings)

        assert tracker.to_entity(LocalTrain.assemble(7)).name == "consist-7"
