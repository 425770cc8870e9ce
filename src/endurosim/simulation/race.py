"""Race simulation engine."""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from endurosim.models import DEFAULT_CONFIG, FailureCause, RaceConfig, Vehicle
from endurosim.output import ConsoleOutput
from endurosim.simulation.events import AlertKind, EventType, RaceEvent

logger = structlog.get_logger(__name__)


class RaceStatus(str, Enum):
    """Race progress status."""

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class RaceResult:
    """Outcome of a simulated race."""

    status: RaceStatus
    final_lap: int
    vehicle: Vehicle
    failure_cause: FailureCause | None = None
    events: list[RaceEvent] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.status == RaceStatus.COMPLETED

    def alerts(self) -> list[RaceEvent]:
        """Alert events in the order they fired."""
        return [e for e in self.events if e.event_type == EventType.ALERT]


class RaceSimulator:
    """Simulates a single-vehicle enduro race lap by lap."""

    def __init__(self, config: RaceConfig | None = None):
        """Initialize race simulator.

        Args:
            config: Race parameters, defaults to the standard enduro setup
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        self.status = RaceStatus.RUNNING

    def initialize(self) -> Vehicle:
        """Create a vehicle in race-start condition."""
        return Vehicle(
            suspension=self.config.initial_suspension,
            fuel=self.config.initial_fuel,
            engine_temp=self.config.initial_engine_temp,
        )

    def run_lap(self, vehicle: Vehicle) -> None:
        """Apply one lap of wear and consumption. No clamping."""
        vehicle.suspension -= self.config.suspension_wear_per_lap
        vehicle.fuel -= self.config.fuel_consumption_per_lap
        vehicle.engine_temp += self.config.engine_temp_rise_per_lap

    def is_penalty_lap(self, lap: int) -> bool:
        return lap % self.config.penalty_interval == 0

    def is_report_lap(self, lap: int) -> bool:
        return lap % self.config.report_interval == 0

    def apply_periodic_penalty(self, vehicle: Vehicle, lap: int) -> RaceEvent:
        """Apply extra suspension wear and engine heating.

        Args:
            vehicle: Vehicle to penalize
            lap: Current lap, shown in the notice

        Returns:
            The penalty event
        """
        vehicle.suspension -= self.config.suspension_penalty
        vehicle.engine_temp += self.config.engine_temp_penalty

        ConsoleOutput.print_penalty_notice(lap)
        logger.info(
            "penalty_applied",
            lap=lap,
            suspension=vehicle.suspension,
            engine_temp=vehicle.engine_temp,
        )

        return RaceEvent(
            event_type=EventType.PENALTY,
            lap=lap,
            description=f"penalty applied on lap {lap}",
        )

    def check_alerts(self, vehicle: Vehicle, lap: int) -> list[RaceEvent]:
        """Emit each critical alert the first time its threshold is crossed.

        The suspension and engine checks are independent, so both may fire
        on the same lap. A fired alert is latched on the vehicle and never
        repeats.

        Args:
            vehicle: Vehicle to inspect
            lap: Current lap number

        Returns:
            Alerts raised on this call
        """
        alerts: list[RaceEvent] = []

        if (
            vehicle.suspension < self.config.suspension_alert_threshold
            and not vehicle.suspension_alert_shown
        ):
            ConsoleOutput.print_suspension_alert(vehicle.suspension)
            vehicle.suspension_alert_shown = True
            alerts.append(RaceEvent(
                event_type=EventType.ALERT,
                lap=lap,
                alert_kind=AlertKind.SUSPENSION,
                value=vehicle.suspension,
                description="critical suspension level",
            ))

        if (
            vehicle.engine_temp > self.config.engine_alert_threshold
            and not vehicle.engine_alert_shown
        ):
            ConsoleOutput.print_engine_alert(vehicle.engine_temp)
            vehicle.engine_alert_shown = True
            alerts.append(RaceEvent(
                event_type=EventType.ALERT,
                lap=lap,
                alert_kind=AlertKind.ENGINE,
                value=vehicle.engine_temp,
                description="excessive engine temperature",
            ))

        for alert in alerts:
            logger.info(
                "alert_raised",
                lap=lap,
                kind=alert.alert_kind.value,
                value=alert.value,
            )

        return alerts

    def produce_status_report(self, vehicle: Vehicle, lap: int) -> None:
        ConsoleOutput.print_status_report(vehicle, lap)

    def produce_final_report(self, vehicle: Vehicle, final_lap: int, completed: bool) -> None:
        ConsoleOutput.print_final_report(
            vehicle,
            final_lap,
            completed,
            total_laps=self.config.total_laps,
        )

    def simulate(self) -> RaceResult:
        """Simulate a complete race.

        Each lap runs wear, the penalty (if due), alert checks, the periodic
        report (if due) and finally the failure check. A failure ends the
        race on that lap.

        Returns:
            RaceResult with the terminal status and every event raised
        """
        self.status = RaceStatus.RUNNING
        vehicle = self.initialize()
        events: list[RaceEvent] = []

        logger.info("race_started", total_laps=self.config.total_laps)
        ConsoleOutput.print_header(self.config.team_name)
        self.produce_status_report(vehicle, 0)

        for lap in range(1, self.config.total_laps + 1):
            self.run_lap(vehicle)

            if self.is_penalty_lap(lap):
                events.append(self.apply_periodic_penalty(vehicle, lap))

            events.extend(self.check_alerts(vehicle, lap))

            if self.is_report_lap(lap):
                self.produce_status_report(vehicle, lap)

            if vehicle.has_failed:
                self.status = RaceStatus.FAILED
                cause = vehicle.failure_cause()
                events.append(RaceEvent(
                    event_type=EventType.FAILURE,
                    lap=lap,
                    description=cause.value,
                ))
                logger.info("race_failed", lap=lap, cause=cause.value)
                self.produce_final_report(vehicle, lap, completed=False)
                return RaceResult(
                    status=self.status,
                    final_lap=lap,
                    vehicle=vehicle,
                    failure_cause=cause,
                    events=events,
                )

        self.status = RaceStatus.COMPLETED
        events.append(RaceEvent(
            event_type=EventType.FINISH,
            lap=self.config.total_laps,
            description=f"completed all {self.config.total_laps} laps",
        ))
        logger.info("race_completed", laps=self.config.total_laps)
        self.produce_final_report(vehicle, self.config.total_laps, completed=True)

        return RaceResult(
            status=self.status,
            final_lap=self.config.total_laps,
            vehicle=vehicle,
            events=events,
        )
