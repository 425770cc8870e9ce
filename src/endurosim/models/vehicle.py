"""Vehicle state model."""

from enum import Enum

from pydantic import BaseModel, Field


class FailureCause(str, Enum):
    """Reasons a vehicle is forced out of the race."""

    SUSPENSION = "total suspension failure"
    FUEL = "fuel exhaustion"


class Vehicle(BaseModel):
    """Wear and consumption state of the race vehicle.

    Suspension and fuel may drop below zero; only the display values are
    clamped. Once an alert flag is set it stays set.
    """

    suspension: float = Field(default=100.0, description="Suspension integrity (%)")
    fuel: float = Field(default=100.0, description="Fuel level (%)")
    engine_temp: float = Field(default=80.0, description="Engine temperature in Celsius")

    suspension_alert_shown: bool = Field(
        default=False,
        description="Whether the critical suspension alert was already emitted",
    )
    engine_alert_shown: bool = Field(
        default=False,
        description="Whether the engine temperature alert was already emitted",
    )

    @property
    def display_suspension(self) -> float:
        """Suspension clamped at zero for reports."""
        return self.suspension if self.suspension > 0 else 0.0

    @property
    def display_fuel(self) -> float:
        """Fuel clamped at zero for reports."""
        return self.fuel if self.fuel > 0 else 0.0

    @property
    def suspension_failed(self) -> bool:
        return self.suspension <= 0.0

    @property
    def fuel_exhausted(self) -> bool:
        return self.fuel <= 0.0

    @property
    def has_failed(self) -> bool:
        """Check if the vehicle can no longer race."""
        return self.suspension_failed or self.fuel_exhausted

    def failure_cause(self) -> FailureCause | None:
        """Determine why the vehicle failed.

        Suspension failure takes priority when fuel is also exhausted.

        Returns:
            The failure cause, or None if the vehicle is still running
        """
        if self.suspension_failed:
            return FailureCause.SUSPENSION
        if self.fuel_exhausted:
            return FailureCause.FUEL
        return None
