"""
catpoint-security: the decision core of a home security monitor.

This library provides:
- The status-transition engine (SecurityService)
- Alarm, arming and sensor models
- Repository and classifier interfaces with in-memory/fake implementations
- Status listeners and an Event Bus bridge
"""

from catpoint_security.core.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint_security.core.bus import Event, EventBus, EventFilter
from catpoint_security.core.classifier import FakeImageClassifier, ImageClassifier
from catpoint_security.core.listeners import EventBusStatusListener, StatusListener
from catpoint_security.core.repository import InMemorySecurityRepository, SecurityRepository
from catpoint_security.core.service import CAT_CONFIDENCE_THRESHOLD, SecurityService

__version__ = "0.1.0"

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
