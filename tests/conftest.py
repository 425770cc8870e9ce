"""Shared pytest configuration and fixtures."""

import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from endurosim.models import RaceConfig, Vehicle
from endurosim.simulation import RaceSimulator


def pytest_configure(config):
    """Register custom markers and configure test logging."""
    config.addinivalue_line("markers", "integration: mark test as full race run")
    _configure_test_logging()


def _configure_test_logging() -> None:
    """Send structlog output to stderr so stdout assertions stay clean."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.BoundLogger,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore test logging after tests that reconfigure structlog."""
    yield
    _configure_test_logging()


@pytest.fixture
def simulator() -> RaceSimulator:
    return RaceSimulator()


@pytest.fixture
def vehicle(simulator) -> Vehicle:
    return simulator.initialize()


@pytest.fixture
def run_race(capsys):
    """Run a full race and return the result with its stdout."""

    def _run(config: RaceConfig | None = None):
        result = RaceSimulator(config).simulate()
        return result, capsys.readouterr().out

    return _run


SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def run_python():
    """Run Python code in a fresh interpreter with the package importable."""

    def _run(*args: str) -> subprocess.CompletedProcess:
        env = dict(os.environ, PYTHONIOENCODING="utf-8")
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
        )
        return subprocess.run(
            [sys.executable, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
            check=False,
        )

    return _run
