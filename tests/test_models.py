"""Tests for the vehicle and race configuration models."""

import pytest
from pydantic import ValidationError

from endurosim.models import DEFAULT_CONFIG, FailureCause, RaceConfig, Vehicle


class TestRaceConfig:
    """Test RaceConfig defaults and validation."""

    def test_defaults(self):
        config = RaceConfig()
        assert config.total_laps == 100
        assert config.initial_suspension == 100.0
        assert config.initial_fuel == 100.0
        assert config.initial_engine_temp == 80.0
        assert config.suspension_wear_per_lap == 2.0
        assert config.fuel_consumption_per_lap == 1.5
        assert config.engine_temp_rise_per_lap == 1.0
        assert config.suspension_penalty == 3.0
        assert config.engine_temp_penalty == 5.0
        assert config.penalty_interval == 10
        assert config.suspension_alert_threshold == 20.0
        assert config.engine_alert_threshold == 115.0
        assert config.report_interval == 20

    def test_default_instance_matches_defaults(self):
        assert DEFAULT_CONFIG == RaceConfig()

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.total_laps = 50

    @pytest.mark.parametrize(
        "field,value",
        [
            ("total_laps", 0),
            ("penalty_interval", 0),
            ("report_interval", -5),
            ("suspension_wear_per_lap", -1.0),
            ("engine_temp_penalty", -0.5),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            RaceConfig(**{field: value})


class TestVehicle:
    """Test Vehicle state helpers."""

    def test_default_state(self):
        vehicle = Vehicle()
        assert vehicle.suspension == 100.0
        assert vehicle.fuel == 100.0
        assert vehicle.engine_temp == 80.0
        assert vehicle.suspension_alert_shown is False
        assert vehicle.engine_alert_shown is False

    def test_display_values_clamp_negative(self):
        vehicle = Vehicle(suspension=-130.0, fuel=-50.0, engine_temp=230.0)
        assert vehicle.display_suspension == 0.0
        assert vehicle.display_fuel == 0.0
        # Stored values are untouched
        assert vehicle.suspension == -130.0
        assert vehicle.fuel == -50.0

    def test_display_values_pass_through_positive(self):
        vehicle = Vehicle(suspension=42.5, fuel=7.25)
        assert vehicle.display_suspension == 42.5
        assert vehicle.display_fuel == 7.25

    def test_healthy_vehicle_has_not_failed(self):
        vehicle = Vehicle(suspension=0.5, fuel=0.5)
        assert vehicle.has_failed is False
        assert vehicle.failure_cause() is None

    def test_zero_suspension_is_failure(self):
        vehicle = Vehicle(suspension=0.0)
        assert vehicle.has_failed is True
        assert vehicle.failure_cause() == FailureCause.SUSPENSION

    def test_zero_fuel_is_failure(self):
        vehicle = Vehicle(fuel=0.0)
        assert vehicle.has_failed is True
        assert vehicle.failure_cause() == FailureCause.FUEL

    def test_suspension_failure_takes_priority(self):
        vehicle = Vehicle(suspension=-1.0, fuel=-0.5)
        assert vehicle.failure_cause() == FailureCause.SUSPENSION
