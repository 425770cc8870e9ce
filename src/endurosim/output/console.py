"""Console output formatting."""

from endurosim.models import Vehicle

BANNER_WIDTH = 50
REPORT_WIDTH = 33


class ConsoleOutput:
    """Formats race progress for console display."""

    @staticmethod
    def print_header(team_name: str) -> None:
        print(f"### ENDURO RACE SIMULATION - {team_name} TEAM ###\n")
        print("Initial conditions:")

    @staticmethod
    def print_status_report(vehicle: Vehicle, lap: int) -> None:
        """Print a status block for the given lap.

        Suspension and fuel are shown clamped at zero; engine temperature
        is shown as stored.

        Args:
            vehicle: Vehicle to report on
            lap: Lap number shown in the title
        """
        print(f"\n--- LAP {lap} REPORT ---")
        print("=" * REPORT_WIDTH)
        print(f"Suspension...: {vehicle.display_suspension:.2f}%")
        print(f"Fuel.........: {vehicle.display_fuel:.2f}%")
        print(f"Engine.......: {vehicle.engine_temp:.2f}°C")
        print("=" * REPORT_WIDTH + "\n")

    @staticmethod
    def print_penalty_notice(lap: int) -> None:
        print(f"\n>>> penalty applied on lap {lap} <<<")

    @staticmethod
    def print_suspension_alert(suspension: float) -> None:
        print(f"\n!!! ALERT: critical suspension level ({suspension:.1f}%) !!!")

    @staticmethod
    def print_engine_alert(engine_temp: float) -> None:
        print(f"\n!!! ALERT: excessive engine temperature ({engine_temp:.1f}°C) !!!")

    @staticmethod
    def print_final_report(
        vehicle: Vehicle,
        final_lap: int,
        completed: bool,
        total_laps: int,
    ) -> None:
        """Print the end-of-race banner, outcome and final vehicle state.

        Args:
            vehicle: Vehicle in its final state
            final_lap: Last lap processed
            completed: Whether every lap was completed
            total_laps: Scheduled race length
        """
        print("\n" + "#" * BANNER_WIDTH)
        print("### END OF SIMULATION ###")
        print("#" * BANNER_WIDTH)

        if completed:
            print("\nRACE COMPLETED SUCCESSFULLY!")
            print(f"The vehicle completed all {total_laps} laps.")
        else:
            print(f"\nCRITICAL FAILURE ON LAP {final_lap}!")
            cause = vehicle.failure_cause()
            if cause is not None:
                print(f"Cause: {cause.value}.")

        print("\n--- FINAL VEHICLE STATE ---")
        ConsoleOutput.print_status_report(vehicle, final_lap)
