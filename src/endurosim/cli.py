"""Command-line entry point for the enduro simulation."""

import argparse
import sys

from endurosim.logging_config import configure_logging
from endurosim.models import DEFAULT_CONFIG
from endurosim.simulation import RaceSimulator


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="endurosim",
        description=(
            f"Simulate a {DEFAULT_CONFIG.total_laps}-lap enduro race and print "
            "status, alert and final reports"
        ),
    )


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)
    configure_logging(log_level="WARNING")

    RaceSimulator(DEFAULT_CONFIG).simulate()
    return 0


if __name__ == "__main__":
    sys.exit(main())
