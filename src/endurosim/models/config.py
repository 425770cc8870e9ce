"""Race configuration constants."""

from pydantic import BaseModel, ConfigDict, Field


class RaceConfig(BaseModel):
    """Immutable set of parameters for one enduro race."""

    model_config = ConfigDict(frozen=True)

    total_laps: int = Field(default=100, gt=0, description="Number of laps in the race")

    # Starting state
    initial_suspension: float = Field(
        default=100.0,
        description="Suspension integrity at the start (%)",
    )
    initial_fuel: float = Field(
        default=100.0,
        description="Fuel level at the start (%)",
    )
    initial_engine_temp: float = Field(
        default=80.0,
        description="Engine temperature at the start in Celsius",
    )

    # Wear applied on every lap
    suspension_wear_per_lap: float = Field(
        default=2.0,
        ge=0.0,
        description="Suspension integrity lost per lap (%)",
    )
    fuel_consumption_per_lap: float = Field(
        default=1.5,
        ge=0.0,
        description="Fuel burned per lap (%)",
    )
    engine_temp_rise_per_lap: float = Field(
        default=1.0,
        ge=0.0,
        description="Engine temperature gained per lap in Celsius",
    )

    # Periodic penalty
    suspension_penalty: float = Field(
        default=3.0,
        ge=0.0,
        description="Extra suspension loss on penalty laps (%)",
    )
    engine_temp_penalty: float = Field(
        default=5.0,
        ge=0.0,
        description="Extra engine heating on penalty laps in Celsius",
    )
    penalty_interval: int = Field(
        default=10,
        gt=0,
        description="A penalty is applied every N laps",
    )

    # Alert thresholds
    suspension_alert_threshold: float = Field(
        default=20.0,
        description="Suspension alert fires below this level (%)",
    )
    engine_alert_threshold: float = Field(
        default=115.0,
        description="Engine alert fires above this temperature in Celsius",
    )

    report_interval: int = Field(
        default=20,
        gt=0,
        description="A status report is printed every N laps",
    )
    team_name: str = Field(
        default="IMPERADOR UTFPR",
        description="Team shown in the simulation header",
    )


DEFAULT_CONFIG = RaceConfig()
