#!/usr/bin/env python3
"""
Quick example demonstrating catpoint-security basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging
import random

from catpoint_security.core.bus import EventBus, Event
from catpoint_security.core.classifier import FakeImageClassifier
from catpoint_security.core.listeners import EventBusStatusListener
from catpoint_security.core.models import ArmingStatus, Sensor, SensorType
from catpoint_security.core.repository import InMemorySecurityRepository
from catpoint_security.core.service import SecurityService

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

print("=" * 60)
print("catpoint-security Example")
print("=" * 60)

# 1. Collaborators
print("\n1. Creating collaborators...")
repository = InMemorySecurityRepository()
classifier = FakeImageClassifier(random.Random(7))
bus = EventBus()
print("   ✓ Repository, classifier and EventBus created")

# 2. The engine, reporting through the bus
print("\n2. Wiring the service...")
service = SecurityService(repository, classifier)
service.add_status_listener(EventBusStatusListener(bus))


def print_event(event: Event) -> None:
    print(f"   → {event.type}: {event.payload}")


bus.subscribe(print_event)
print("   ✓ Service created, bus listener attached")

# 3. Sensors
print("\n3. Adding sensors...")
door = Sensor(name="Front Door", sensor_type=SensorType.DOOR)
window = Sensor(name="Kitchen Window", sensor_type=SensorType.WINDOW)
motion = Sensor(name="Hall Motion", sensor_type=SensorType.MOTION)
for sensor in (door, window, motion):
    service.add_sensor(sensor)
    print(f"   ✓ Added: {sensor.name} ({sensor.sensor_type.value})")

# 4. Arm and trip two sensors
print("\n4. Arming (away) and tripping sensors...")
service.set_arming_status(ArmingStatus.ARMED_AWAY)
service.change_sensor_activation_status(door, True)
print(f"   ✓ Alarm: {service.get_alarm_status().description}")
service.change_sensor_activation_status(window, True)
print(f"   ✓ Alarm: {service.get_alarm_status().description}")

# 5. Disarm
print("\n5. Disarming...")
service.set_arming_status(ArmingStatus.DISARMED)
print(f"   ✓ Alarm: {service.get_alarm_status().description}")

# 6. Camera frames while armed home
print("\n6. Processing camera frames (armed home)...")
service.set_arming_status(ArmingStatus.ARMED_HOME)
for frame in range(3):
    service.process_image(frame)
    print(f"   ✓ Frame {frame}: {service.get_alarm_status().description}")

# 7. Snapshot
print("\n7. Dumping repository state...")
state = repository.dump_state()
print(f"   ✓ {state['arming_status']}, {state['alarm_status']}, {len(state['sensors'])} sensors")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
