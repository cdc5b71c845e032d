"""
Repository interface for security system state.

The repository owns the alarm status, the arming status and the sensor
set. The engine reads and writes through it and never caches anything
itself. The host provides a concrete implementation backed by whatever
storage it has; ``InMemorySecurityRepository`` serves tests and demos.
"""

from abc import ABC, abstractmethod
from typing import Dict, Set
import logging

from catpoint_security.core.models import AlarmStatus, ArmingStatus, Sensor

logger = logging.getLogger(__name__)


class SecurityRepository(ABC):
    """
    Abstract interface for security state storage.

    All calls are synchronous. Implementations raise on storage failure;
    the engine does not catch anything.
    """

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Return the stored alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store a new alarm status."""
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Return the stored arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Store a new arming status."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """
        Get every known sensor.

        Returns:
            Set of sensors (callers may mutate and pass them back
            through update_sensor)
        """
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Start tracking a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Stop tracking a sensor. Removing an unknown sensor is a no-op."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist the current state of a sensor."""
        pass


class InMemorySecurityRepository(SecurityRepository):
    """
    Repository that keeps everything in process memory.

    Starts disarmed with no alarm and no sensors. State can be saved and
    restored as a plain dict; the host is responsible for storage.
    """

    STATE_VERSION = 1

    def __init__(self) -> None:
        self._alarm_status = AlarmStatus.NO_ALARM
        self._arming_status = ArmingStatus.DISARMED
        self._sensors: Dict[str, Sensor] = {}

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor
        logger.info(f"Added sensor: {sensor.name} ({sensor.sensor_type.value})")

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.sensor_id, None) is not None:
            logger.info(f"Removed sensor: {sensor.name}")

    def update_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor

    # State Persistence

    def dump_state(self) -> Dict:
        """
        Dump current state for persistence.

        Returns:
            State dictionary
        """
        return {
            "version": self.STATE_VERSION,
            "alarm_status": self._alarm_status.value,
            "arming_status": self._arming_status.value,
            "sensors": [sensor.to_dict() for sensor in sorted(self._sensors.values())],
        }

    def restore_state(self, state: Dict) -> None:
        """
        Restore state from persistence.

        Args:
            state: State dictionary from dump_state()

        Raises:
            ValueError: If a status or sensor type value is not recognized
        """
        version = state.get("version", self.STATE_VERSION)
        if version != self.STATE_VERSION:
            logger.warning(f"Unknown state version {version}, ignoring")
            return

        alarm_status = AlarmStatus(state.get("alarm_status", AlarmStatus.NO_ALARM.value))
        arming_status = ArmingStatus(state.get("arming_status", ArmingStatus.DISARMED.value))
        sensors = [Sensor.from_dict(data) for data in state.get("sensors", [])]

        self._alarm_status = alarm_status
        self._arming_status = arming_status
        self._sensors = {sensor.sensor_id: sensor for sensor in sensors}

        logger.info(
            f"Restored state: {arming_status.value}, {alarm_status.value}, "
            f"{len(self._sensors)} sensors"
        )
