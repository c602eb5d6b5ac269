"""Outbound host boundary plus in-process host implementations."""

from .protocol import EventType, Host, HostCall, PermissionType
from .recording import RecordingHost
from .simulated import SimulatedSession, SimulatedTab

__all__ = [
    "EventType",
    "Host",
    "HostCall",
    "PermissionType",
    "RecordingHost",
    "SimulatedSession",
    "SimulatedTab",
]
