"""Data models for the security system.

Alarm and arming statuses are closed enumerations. Sensors are mutable:
the engine flips their ``active`` flag and hands them back to the
repository, so identity is the ``sensor_id`` alone.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class AlarmStatus(Enum):
    """The system's current threat assessment.

    NO_ALARM: Nothing is wrong.
    PENDING_ALARM: One sensor tripped while armed; a second trip escalates.
    ALARM: Full alarm. Sticky against further sensor changes.
    """

    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"
    ALARM = "alarm"

    @property
    def description(self) -> str:
        """Human-readable text for display sinks."""
        return _ALARM_DESCRIPTIONS[self]


class ArmingStatus(Enum):
    """Whether the system is actively monitoring."""

    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        """Human-readable text for display sinks."""
        return _ARMING_DESCRIPTIONS[self]


class SensorType(Enum):
    """Kind of sensor. Never branched on by the engine."""

    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}

_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}


def _new_sensor_id() -> str:
    """Generate a random sensor ID (for default factory)."""
    return str(uuid.uuid4())


@dataclass(eq=False)
class Sensor:
    """
    A door, window or motion sensor.

    Attributes:
        name: Display name (e.g., "Front Door")
        sensor_type: Kind of sensor
        active: Whether the sensor is currently tripped
        sensor_id: Unique identifier; equality and hashing use only this
    """

    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: str = field(default_factory=_new_sensor_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __hash__(self) -> int:
        return hash(self.sensor_id)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[str, str, str]:
        return (self.name, self.sensor_type.value, self.sensor_id)

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "sensor_id": self.sensor_id,
            "name": self.name,
            "sensor_type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Sensor":
        """Deserialize from dict."""
        return cls(
            name=data["name"],
            sensor_type=SensorType(data["sensor_type"]),
            active=data.get("active", False),
            sensor_id=data.get("sensor_id") or _new_sensor_id(),
        )
