"""
Status listener interface and the event bus bridge.

Listeners are notification sinks. A UI panel, a logger or a push
notifier implements StatusListener and registers with the service.
"""

from abc import ABC, abstractmethod

from catpoint_security.core.bus import Event, EventBus
from catpoint_security.core.models import AlarmStatus


EVENT_SOURCE = "security"
ALARM_STATUS_CHANGED = "alarm.status_changed"
SENSOR_STATUS_CHANGED = "sensor.status_changed"
CAT_DETECTED = "camera.cat_detected"


class StatusListener(ABC):
    """Receives notifications from the SecurityService."""

    @abstractmethod
    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        """
        Called after a new alarm status has been persisted.

        Args:
            alarm_status: The status just stored
        """
        pass

    @abstractmethod
    def on_sensor_status_changed(self) -> None:
        """Called when sensor states may have changed in bulk (no payload)."""
        pass

    @abstractmethod
    def on_cat_detected(self, cat: bool) -> None:
        """
        Called after every processed camera frame.

        Args:
            cat: Whether the classifier found a cat
        """
        pass


class EventBusStatusListener(StatusListener):
    """
    Republishes service notifications on an EventBus.

    Events Emitted:
    - alarm.status_changed: payload {"alarm_status": <value>, "description": <text>}
    - sensor.status_changed: empty payload
    - camera.cat_detected: payload {"cat": <bool>}
    """

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus

    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        self._bus.publish(
            Event(
                type=ALARM_STATUS_CHANGED,
                source=EVENT_SOURCE,
                payload={
                    "alarm_status": alarm_status.value,
                    "description": alarm_status.description,
                },
            )
        )

    def on_sensor_status_changed(self) -> None:
        self._bus.publish(Event(type=SENSOR_STATUS_CHANGED, source=EVENT_SOURCE))

    def on_cat_detected(self, cat: bool) -> None:
        self._bus.publish(Event(type=CAT_DETECTED, source=EVENT_SOURCE, payload={"cat": cat}))
