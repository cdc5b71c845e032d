"""The decision core of the security system.

SecurityService owns every rule that combines arming status, sensor
activity and cat detection into an alarm status. It holds no state of
its own: everything is read from and written to the repository, and
every change is announced to the registered StatusListeners.

Ordering within each operation is persist, then notify. A repository
failure therefore stops the operation before any listener hears about it.
"""

import logging
import threading
from typing import Any, Set

from .classifier import ImageClassifier
from .listeners import StatusListener
from .models import AlarmStatus, ArmingStatus, Sensor
from .repository import SecurityRepository

_LOGGER = logging.getLogger(__name__)

CAT_CONFIDENCE_THRESHOLD = 50.0

# One step up on activation; ALARM is the ceiling.
_ESCALATE = {
    AlarmStatus.NO_ALARM: AlarmStatus.PENDING_ALARM,
    AlarmStatus.PENDING_ALARM: AlarmStatus.ALARM,
}

# One step down on deactivation; NO_ALARM is the floor.
_DEESCALATE = {
    AlarmStatus.PENDING_ALARM: AlarmStatus.NO_ALARM,
    AlarmStatus.ALARM: AlarmStatus.PENDING_ALARM,
}


class SecurityService:
    """The status-transition engine.

    All public operations run to completion on the caller's thread and are
    serialized by a single re-entrant lock.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        classifier: ImageClassifier,
    ) -> None:
        """Initialize the service with its collaborators.

        Args:
            repository: Storage for alarm status, arming status and sensors.
            classifier: Cat detector used by process_image().
        """
        self._repository = repository
        self._classifier = classifier
        self._listeners: Set[StatusListener] = set()
        self._lock = threading.RLock()

    # Listener registry

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener. Adding the same listener twice is a no-op."""
        with self._lock:
            self._listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        with self._lock:
            self._listeners.discard(listener)

    # Commands

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Change the arming status.

        Disarming forces the alarm to NO_ALARM. Arming (home or away) resets
        every sensor to inactive without running the deactivation rule.
        Listeners always get a sensor-status broadcast, and the new arming
        status is stored last.

        Args:
            arming_status: The new arming status.
        """
        with self._lock:
            _LOGGER.info(f"Arming status -> {arming_status.value}")

            if arming_status is ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                self._reset_sensors()

            for listener in self._snapshot_listeners():
                listener.on_sensor_status_changed()

            self._repository.set_arming_status(arming_status)

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store a new alarm status and notify listeners. No guards.

        Args:
            alarm_status: The new alarm status.
        """
        with self._lock:
            self._repository.set_alarm_status(alarm_status)
            _LOGGER.info(f"Alarm status -> {alarm_status.value}")

            for listener in self._snapshot_listeners():
                listener.on_alarm_status_changed(alarm_status)

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Set a sensor's active flag and apply the alarm consequences.

        A full ALARM is sticky: the sensor change is recorded but the alarm
        status is left alone. Otherwise activating escalates one step (unless
        disarmed) and deactivating a previously active sensor de-escalates
        one step. The decision is taken on the sensor's state before the flag
        is changed.

        Args:
            sensor: The sensor being changed.
            active: Its new active flag.
        """
        with self._lock:
            _LOGGER.debug(f"Sensor {sensor.name}: active {sensor.active} -> {active}")

            if self._repository.get_alarm_status() is not AlarmStatus.ALARM:
                if active:
                    self._handle_sensor_activated()
                elif sensor.active:
                    self._handle_sensor_deactivated()

            sensor.active = active
            self._repository.update_sensor(sensor)

    def reevaluate_sensor(self, sensor: Sensor) -> None:
        """Re-apply the alarm rules for a sensor whose flag was already set.

        PENDING_ALARM with the sensor inactive drops to NO_ALARM. ALARM while
        disarmed steps down once to PENDING_ALARM. The sensor is stored
        afterwards in every case.

        Args:
            sensor: The sensor to evaluate, with its flag already updated.
        """
        with self._lock:
            alarm_status = self._repository.get_alarm_status()

            if alarm_status is AlarmStatus.PENDING_ALARM and not sensor.active:
                self._handle_sensor_deactivated()
            elif (
                alarm_status is AlarmStatus.ALARM
                and self._repository.get_arming_status() is ArmingStatus.DISARMED
            ):
                self._handle_sensor_deactivated()

            self._repository.update_sensor(sensor)

    def process_image(self, image: Any) -> None:
        """Run a camera frame through the classifier and react to the result.

        Args:
            image: The frame, passed through to the classifier untouched.
        """
        with self._lock:
            cat = self._classifier.image_contains_cat(image, CAT_CONFIDENCE_THRESHOLD)
            self._cat_detected(cat)

    # Read accessors

    def get_alarm_status(self) -> AlarmStatus:
        with self._lock:
            return self._repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        with self._lock:
            return self._repository.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        with self._lock:
            return self._repository.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.remove_sensor(sensor)

    # Rules

    def _cat_detected(self, cat: bool) -> None:
        if cat and self._repository.get_arming_status() is ArmingStatus.ARMED_HOME:
            _LOGGER.info("Cat detected while armed home")
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not cat and self._all_sensors_inactive():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        for listener in self._snapshot_listeners():
            listener.on_cat_detected(cat)

    def _handle_sensor_activated(self) -> None:
        if self._repository.get_arming_status() is ArmingStatus.DISARMED:
            return

        next_status = _ESCALATE.get(self._repository.get_alarm_status())
        if next_status is not None:
            self.set_alarm_status(next_status)

    def _handle_sensor_deactivated(self) -> None:
        next_status = _DEESCALATE.get(self._repository.get_alarm_status())
        if next_status is not None:
            self.set_alarm_status(next_status)

    def _reset_sensors(self) -> None:
        """Mark every sensor inactive without touching the alarm status."""
        for sensor in sorted(self._repository.get_sensors()):
            if sensor.active:
                _LOGGER.debug(f"Resetting sensor {sensor.name}")
            sensor.active = False
            self._repository.update_sensor(sensor)

    def _all_sensors_inactive(self) -> bool:
        return not any(sensor.active for sensor in self._repository.get_sensors())

    def _snapshot_listeners(self) -> list[StatusListener]:
        return list(self._listeners)
