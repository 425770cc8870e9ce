"""Data models for the enduro simulation."""

from .config import DEFAULT_CONFIG, RaceConfig
from .vehicle import FailureCause, Vehicle

__all__ = [
    "DEFAULT_CONFIG",
    "FailureCause",
    "RaceConfig",
    "Vehicle",
]
