"""Race events: penalties, alerts, failures."""

from dataclasses import dataclass
from enum import Enum


class EventType(str, Enum):
    """Types of race events."""

    PENALTY = "penalty"
    ALERT = "alert"
    FAILURE = "failure"
    FINISH = "finish"


class AlertKind(str, Enum):
    """Metrics that can raise a critical alert."""

    SUSPENSION = "suspension"
    ENGINE = "engine"


@dataclass
class RaceEvent:
    """Represents a race event."""

    event_type: EventType
    lap: int
    alert_kind: AlertKind | None = None
    value: float | None = None
    description: str = ""
