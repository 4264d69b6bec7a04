"""Tests for the normal, aborted and continued take-off dynamics."""

import math

import pytest

from bfl.common.angle import Angle
from bfl.core.exceptions import InvalidArgumentError
from bfl.data.aircraft import AircraftData
from bfl.data.state import AircraftState
from bfl.physics.aerodynamics import calculate_stall_speed
from bfl.physics.takeoff_dynamics import (
    TakeOffDynamicsCalculator,
    calculate_accelerations,
    create_aborted_takeoff_dynamics_calculator,
    create_continued_takeoff_dynamics_calculator,
    create_normal_takeoff_dynamics_calculator,
    normal_takeoff_policy,
)

DENSITY = 1.225
GRAVITY = 9.81
WEIGHT = 500000.0


def rotation_speed(aircraft_data: AircraftData) -> float:
    return 1.2 * calculate_stall_speed(aircraft_data.aerodynamic_data, WEIGHT, DENSITY)


class TestAccelerationsAtRest:
    """Test the accelerations at brake release."""

    def test_normal_takeoff(self, aircraft_data: AircraftData) -> None:
        """Test all engines against rolling friction."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState())

        assert result.true_airspeed_rate == pytest.approx(GRAVITY * (150000.0 - 0.02 * WEIGHT) / WEIGHT)
        assert result.pitch_rate == 0.0
        assert result.flight_path_rate == 0.0
        assert result.climb_rate == 0.0

    def test_aborted_takeoff(self, aircraft_data: AircraftData) -> None:
        """Test idle thrust against braking friction."""
        dynamics = create_aborted_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState())

        assert result.true_airspeed_rate == pytest.approx(-GRAVITY * 0.2)

    def test_continued_takeoff(self, aircraft_data: AircraftData) -> None:
        """Test the remaining engine against rolling friction."""
        dynamics = create_continued_takeoff_dynamics_calculator(aircraft_data, 1, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState())

        assert result.true_airspeed_rate == pytest.approx(GRAVITY * (75000.0 - 0.02 * WEIGHT) / WEIGHT)


class TestGroundRoll:
    """Test accelerations while rolling on the runway."""

    def test_flight_path_rate_zero_while_weight_on_wheels(self, aircraft_data: AircraftData) -> None:
        """Test that the runway carries the weight not carried by the wing."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(pitch_angle=Angle.from_degrees(5.0), true_airspeed=70.0))

        assert result.flight_path_rate == 0.0

    def test_drag_reduces_acceleration(self, aircraft_data: AircraftData) -> None:
        """Test that the acceleration decreases with airspeed."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        slow = dynamics.calculate(AircraftState(true_airspeed=10.0))
        fast = dynamics.calculate(AircraftState(true_airspeed=60.0))

        assert fast.true_airspeed_rate < slow.true_airspeed_rate

    def test_no_flight_path_rate_below_minimum_velocity(self, aircraft_data: AircraftData) -> None:
        """Test that the flight path rate is not evaluated near standstill."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(true_airspeed=0.5))

        assert result.flight_path_rate == 0.0


class TestRotation:
    """Test when the aircraft rotates."""

    def test_no_rotation_below_rotation_speed(self, aircraft_data: AircraftData) -> None:
        """Test that the pitch is held below 1.2 times the stall speed."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(true_airspeed=rotation_speed(aircraft_data) - 1.0))

        assert result.pitch_rate == 0.0

    def test_rotation_at_rotation_speed(self, aircraft_data: AircraftData) -> None:
        """Test that the aircraft rotates with the pitch angle gradient."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(true_airspeed=rotation_speed(aircraft_data) + 0.1))

        assert result.pitch_rate == pytest.approx(math.radians(6.0))

    def test_no_rotation_beyond_maximum_pitch(self, aircraft_data: AircraftData) -> None:
        """Test that rotation stops at the maximum pitch angle."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)
        state = AircraftState(
            pitch_angle=Angle.from_degrees(16.0),
            true_airspeed=rotation_speed(aircraft_data) + 5.0,
        )

        result = dynamics.calculate(state)

        assert result.pitch_rate == 0.0

    def test_aborted_takeoff_does_not_rotate(self, aircraft_data: AircraftData) -> None:
        """Test that an aborted take-off never rotates."""
        dynamics = create_aborted_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(true_airspeed=rotation_speed(aircraft_data) + 5.0))

        assert result.pitch_rate == 0.0

    def test_continued_takeoff_rotates(self, aircraft_data: AircraftData) -> None:
        """Test that a continued take-off rotates."""
        dynamics = create_continued_takeoff_dynamics_calculator(aircraft_data, 1, DENSITY, GRAVITY)

        result = dynamics.calculate(AircraftState(true_airspeed=rotation_speed(aircraft_data) + 5.0))

        assert result.pitch_rate == pytest.approx(math.radians(6.0))


class TestInFlight:
    """Test accelerations after lift-off."""

    def test_climb(self, aircraft_data: AircraftData) -> None:
        """Test that excess lift bends the flight path upwards."""
        state = AircraftState(
            pitch_angle=Angle.from_degrees(16.0),
            flight_path_angle=Angle.from_degrees(2.0),
            true_airspeed=90.0,
            height=5.0,
        )

        result = calculate_accelerations(aircraft_data, DENSITY, GRAVITY, normal_takeoff_policy(), state)

        assert result.flight_path_rate > 0.0
        assert result.climb_rate == pytest.approx(90.0 * math.sin(math.radians(2.0)))


class TestTakeOffDynamicsCalculator:
    """Test argument validation of the calculator."""

    def test_missing_aircraft_data_raises(self) -> None:
        """Test that aircraft data is required."""
        with pytest.raises(InvalidArgumentError):
            TakeOffDynamicsCalculator(None, DENSITY, GRAVITY, normal_takeoff_policy())  # type: ignore[arg-type]

    def test_missing_state_raises(self, aircraft_data: AircraftData) -> None:
        """Test that a state is required."""
        dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, DENSITY, GRAVITY)

        with pytest.raises(InvalidArgumentError):
            dynamics.calculate(None)  # type: ignore[arg-type]
