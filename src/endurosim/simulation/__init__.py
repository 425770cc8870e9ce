"""Simulation engine components."""

from .events import AlertKind, EventType, RaceEvent
from .race import RaceResult, RaceSimulator, RaceStatus

__all__ = [
    "AlertKind",
    "EventType",
    "RaceEvent",
    "RaceResult",
    "RaceSimulator",
    "RaceStatus",
]
