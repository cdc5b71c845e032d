"""
Core components of the security system.

This package contains:
- models: statuses and the Sensor dataclass
- repository: state storage interface
- classifier: cat detection interface
- listeners: notification sinks
- bus: Event Bus implementation
- service: SecurityService, the status-transition engine
"""

from catpoint_security.core.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint_security.core.bus import Event, EventBus, EventFilter
from catpoint_security.core.classifier import FakeImageClassifier, ImageClassifier
from catpoint_security.core.listeners import EventBusStatusListener, StatusListener
from catpoint_security.core.repository import InMemorySecurityRepository, SecurityRepository
from catpoint_security.core.service import CAT_CONFIDENCE_THRESHOLD, SecurityService

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "Sensor",
    "SensorType",
    "Event",
    "EventBus",
    "EventFilter",
    "ImageClassifier",
    "FakeImageClassifier",
    "StatusListener",
    "EventBusStatusListener",
    "SecurityRepository",
    "InMemorySecurityRepository",
    "SecurityService",
    "CAT_CONFIDENCE_THRESHOLD",
]
