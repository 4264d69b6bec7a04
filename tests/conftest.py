"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest
import yaml

from bfl.common.angle import Angle
from bfl.core.logging_system import initialize_logging
from bfl.data.aircraft import AerodynamicData, AircraftData, EngineData
from bfl.data.settings import BalancedFieldLengthCalculation, GeneralSimulationSettings


def pytest_configure(config: pytest.Config) -> None:
    """Send log output of the test session to a temporary directory.

    Runs before test modules are imported, so module level loggers never
    initialize logging in the platform log directory.
    """
    log_dir = Path(tempfile.mkdtemp(prefix="bfl-test-logs-"))
    logging_config = log_dir / "logging.yaml"
    logging_config.write_text(
        yaml.safe_dump(
            {
                "log_dir": str(log_dir),
                "file": {"enabled": True, "filename": "bfl-test.log", "level": "DEBUG"},
                "console": {"enabled": False},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(logging_config, use_platform_dir=False)


@pytest.fixture
def aerodynamic_data() -> AerodynamicData:
    """Aerodynamic data of a twin-engine transport aircraft."""
    return AerodynamicData(
        aspect_ratio=10.0,
        wing_area=100.0,
        zero_lift_angle_of_attack=Angle.zero(),
        lift_coefficient_gradient=4.85,
        maximum_lift_coefficient=1.6,
        rest_drag_coefficient_without_engine_failure=0.021,
        rest_drag_coefficient_with_engine_failure=0.026,
        oswald_factor=0.85,
    )


@pytest.fixture
def aircraft_data(aerodynamic_data: AerodynamicData) -> AircraftData:
    """Twin-engine transport aircraft (500 kN, 2 x 75 kN)."""
    return AircraftData(
        nr_of_engines=2,
        maximum_thrust_per_engine=75.0,
        takeoff_weight=500.0,
        pitch_angle_gradient=Angle.from_degrees(6.0),
        maximum_pitch_angle=Angle.from_degrees(16.0),
        rolling_resistance_coefficient=0.02,
        braking_resistance_coefficient=0.2,
        aerodynamic_data=aerodynamic_data,
    )


@pytest.fixture
def calculation(aircraft_data: AircraftData) -> BalancedFieldLengthCalculation:
    """Complete calculation sweeping the failure speed from 0 to 89 m/s."""
    return BalancedFieldLengthCalculation(
        aircraft_data=aircraft_data,
        engine_data=EngineData(nr_of_engines=2, nr_of_failed_engines=1, thrust_per_engine=75.0),
        simulation_settings=GeneralSimulationSettings(
            density=1.225,
            gravitational_acceleration=9.81,
            maximum_nr_of_iterations=10000,
            time_step=0.1,
            end_failure_velocity=90,
        ),
    )
