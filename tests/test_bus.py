"""Tests for the EventBus and the status listener bridge."""

import random

from catpoint_security import (
    AlarmStatus,
    ArmingStatus,
    Event,
    EventBus,
    EventBusStatusListener,
    EventFilter,
    FakeImageClassifier,
    InMemorySecurityRepository,
    SecurityService,
    Sensor,
    SensorType,
)


class TestEventBus:
    """Tests for EventBus dispatch."""

    def test_filtering_by_type(self):
        """Test event filtering by type."""
        bus = EventBus()
        alarm_events = []
        cat_events = []

        bus.subscribe(alarm_events.append, EventFilter(event_type="alarm.status_changed"))
        bus.subscribe(cat_events.append, EventFilter(event_type="camera.cat_detected"))

        bus.publish(Event(type="alarm.status_changed", source="test"))
        bus.publish(Event(type="camera.cat_detected", source="test"))
        bus.publish(Event(type="other.event", source="test"))

        assert len(alarm_events) == 1
        assert len(cat_events) == 1

    def test_filtering_by_source(self):
        """Test event filtering by source."""
        bus = EventBus()
        received = []

        bus.subscribe(received.append, EventFilter(source="security"))

        bus.publish(Event(type="a", source="security"))
        bus.publish(Event(type="a", source="ui"))

        assert [e.source for e in received] == ["security"]

    def test_failing_handler_isolated(self):
        """One failing handler does not stop delivery to the others."""
        bus = EventBus()
        received = []

        def broken(event: Event):
            raise RuntimeError("boom")

        bus.subscribe(broken)
        bus.subscribe(received.append)

        bus.publish(Event(type="test.event", source="test"))

        assert len(received) == 1

    def test_unsubscribe(self):
        """Unsubscribed handlers receive nothing."""
        bus = EventBus()
        received = []

        def handler(event: Event):
            received.append(event)

        bus.subscribe(handler)
        bus.unsubscribe(handler)
        bus.publish(Event(type="test.event", source="test"))

        assert received == []


class TestEventBusStatusListener:
    """Tests for republishing service notifications on the bus."""

    def test_hooks_become_events(self):
        """Each hook publishes one event with the expected payload."""
        bus = EventBus()
        received = []
        bus.subscribe(received.append)
        listener = EventBusStatusListener(bus)

        listener.on_alarm_status_changed(AlarmStatus.PENDING_ALARM)
        listener.on_sensor_status_changed()
        listener.on_cat_detected(True)

        assert [e.type for e in received] == [
            "alarm.status_changed",
            "sensor.status_changed",
            "camera.cat_detected",
        ]
        assert all(e.source == "security" for e in received)
        assert received[0].payload == {
            "alarm_status": "pending_alarm",
            "description": "I'm in Danger...",
        }
        assert received[1].payload == {}
        assert received[2].payload == {"cat": True}

    def test_service_publishes_through_bus(self):
        """Service transitions reach bus subscribers."""
        bus = EventBus()
        alarms = []
        bus.subscribe(
            lambda e: alarms.append(e.payload["alarm_status"]),
            EventFilter(event_type="alarm.status_changed"),
        )

        repo = InMemorySecurityRepository()
        service = SecurityService(repo, FakeImageClassifier(random.Random(1)))
        service.add_status_listener(EventBusStatusListener(bus))

        door = Sensor(name="Door", sensor_type=SensorType.DOOR)
        service.add_sensor(door)
        service.set_arming_status(ArmingStatus.ARMED_HOME)
        service.change_sensor_activation_status(door, True)
        service.change_sensor_activation_status(door, False)

        assert alarms == ["pending_alarm", "no_alarm"]


class TestFakeImageClassifier:
    """Tests for the guessing classifier."""

    def test_seeded_guesses_repeat(self):
        """Two classifiers with the same seed guess the same way."""
        a = FakeImageClassifier(random.Random(42))
        b = FakeImageClassifier(random.Random(42))

        guesses_a = [a.image_contains_cat(None, 50.0) for _ in range(20)]
        guesses_b = [b.image_contains_cat(None, 50.0) for _ in range(20)]

        assert guesses_a == guesses_b
        assert all(isinstance(g, bool) for g in guesses_a)
