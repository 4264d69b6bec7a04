"""Take-off dynamics for normal, aborted and continued take-offs.

All three take-offs share one equation set. A TakeOffDynamicsPolicy selects
the friction coefficient, the available thrust and the drag polar, and states
whether the pilot may rotate. A TakeOffDynamicsCalculator binds a policy to an
aircraft and its environment.

Typical usage example:
    from bfl.physics.takeoff_dynamics import create_normal_takeoff_dynamics_calculator

    dynamics = create_normal_takeoff_dynamics_calculator(aircraft_data, density=1.225,
                                                         gravitational_acceleration=9.81)
    accelerations = dynamics.calculate(state)
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

from bfl.common.number_guard import ensure_not_none
from bfl.core.logging_system import get_logger
from bfl.data.aircraft import AerodynamicData, AircraftData
from bfl.data.state import AircraftAccelerations, AircraftState
from bfl.physics.aerodynamics import (
    calculate_drag_with_engine_failure,
    calculate_drag_without_engine_failure,
    calculate_lift,
    calculate_lift_coefficient,
    calculate_stall_speed,
)

logger = get_logger(__name__)

KILO_NEWTON_TO_NEWTON = 1000.0

# Height below which the aircraft is considered on the runway [m]
GROUND_HEIGHT_THRESHOLD = 0.01

# Rotation starts at this multiple of the stall speed
ROTATION_SPEED_FACTOR = 1.2

# Below this airspeed the flight path rate is not evaluated [m/s]
MINIMUM_FLIGHT_PATH_VELOCITY = 1.0

FrictionCoefficientSelector = Callable[[AircraftData], float]
ThrustFunction = Callable[[AircraftData], float]
DragFunction = Callable[[AerodynamicData, float, float, float], float]


@dataclass(frozen=True)
class TakeOffDynamicsPolicy:
    """Strategy values of a take-off type.

    Attributes:
        friction_coefficient: Selects the runway friction coefficient.
        thrust: Returns the available thrust [kN].
        drag: Drag polar, called with (aerodynamic data, lift coefficient,
            density, velocity) and returning the drag [N].
        allows_rotation: Whether the aircraft rotates at the rotation speed.
        name: Human readable name used in log messages.
    """

    friction_coefficient: FrictionCoefficientSelector
    thrust: ThrustFunction
    drag: DragFunction
    allows_rotation: bool
    name: str = "takeoff"


def normal_takeoff_policy() -> TakeOffDynamicsPolicy:
    """All engines operating, rolling friction."""
    return TakeOffDynamicsPolicy(
        friction_coefficient=lambda aircraft: aircraft.rolling_resistance_coefficient,
        thrust=lambda aircraft: aircraft.nr_of_engines * aircraft.maximum_thrust_per_engine,
        drag=calculate_drag_without_engine_failure,
        allows_rotation=True,
        name="normal",
    )


def aborted_takeoff_policy() -> TakeOffDynamicsPolicy:
    """Engines at idle, brakes applied and no further rotation."""
    return TakeOffDynamicsPolicy(
        friction_coefficient=lambda aircraft: aircraft.braking_resistance_coefficient,
        thrust=lambda aircraft: 0.0,
        drag=calculate_drag_with_engine_failure,
        allows_rotation=False,
        name="aborted",
    )


def continued_takeoff_policy(nr_of_failed_engines: int) -> TakeOffDynamicsPolicy:
    """Remaining engines operating, rolling friction.

    Args:
        nr_of_failed_engines: Number of engines that failed.
    """
    return TakeOffDynamicsPolicy(
        friction_coefficient=lambda aircraft: aircraft.rolling_resistance_coefficient,
        thrust=lambda aircraft: (aircraft.nr_of_engines - nr_of_failed_engines)
        * aircraft.maximum_thrust_per_engine,
        drag=calculate_drag_with_engine_failure,
        allows_rotation=True,
        name="continued",
    )


def calculate_accelerations(
    aircraft_data: AircraftData,
    density: float,
    gravitational_acceleration: float,
    policy: TakeOffDynamicsPolicy,
    state: AircraftState,
) -> AircraftAccelerations:
    """Calculate the time derivatives of the aircraft state.

    Args:
        aircraft_data: Aircraft to calculate for.
        density: Air density [kg/m3].
        gravitational_acceleration: Gravitational acceleration [m/s2].
        policy: Take-off type specific strategies.
        state: Current state.

    Returns:
        The accelerations at ``state``.

    Raises:
        InvalidArgumentError: If aircraft_data, policy or state is None.
        InvalidCalculationError: If the aerodynamic input is physically invalid.
        AngleRangeError: If the flight path angle exceeds the pitch angle.
    """
    ensure_not_none(aircraft_data, "aircraft_data")
    ensure_not_none(policy, "policy")
    ensure_not_none(state, "state")

    aerodynamic_data = aircraft_data.aerodynamic_data
    weight = aircraft_data.takeoff_weight * KILO_NEWTON_TO_NEWTON
    thrust = policy.thrust(aircraft_data) * KILO_NEWTON_TO_NEWTON
    velocity = state.true_airspeed
    flight_path_angle = state.flight_path_angle.radians

    angle_of_attack = state.pitch_angle - state.flight_path_angle
    lift_coefficient = calculate_lift_coefficient(aerodynamic_data, angle_of_attack)
    lift = calculate_lift(aerodynamic_data, angle_of_attack, density, velocity)
    drag = policy.drag(aerodynamic_data, lift_coefficient, density, velocity)

    normal_force = 0.0
    if state.height < GROUND_HEIGHT_THRESHOLD and weight > lift:
        normal_force = weight - lift
    friction = policy.friction_coefficient(aircraft_data) * normal_force

    true_airspeed_rate = (
        gravitational_acceleration * (thrust - drag - friction - weight * math.sin(flight_path_angle)) / weight
    )

    flight_path_rate = 0.0
    if velocity >= MINIMUM_FLIGHT_PATH_VELOCITY:
        flight_path_rate = gravitational_acceleration * (lift - weight + normal_force) / (weight * velocity)

    return AircraftAccelerations(
        pitch_rate=_calculate_pitch_rate(aircraft_data, density, policy, state, weight),
        flight_path_rate=flight_path_rate,
        true_airspeed_rate=true_airspeed_rate,
        climb_rate=velocity * math.sin(flight_path_angle),
    )


def _calculate_pitch_rate(
    aircraft_data: AircraftData,
    density: float,
    policy: TakeOffDynamicsPolicy,
    state: AircraftState,
    weight: float,
) -> float:
    if not policy.allows_rotation:
        return 0.0

    rotation_speed = ROTATION_SPEED_FACTOR * calculate_stall_speed(aircraft_data.aerodynamic_data, weight, density)
    if state.true_airspeed >= rotation_speed and state.pitch_angle < aircraft_data.maximum_pitch_angle:
        return aircraft_data.pitch_angle_gradient.radians

    return 0.0


class TakeOffDynamicsCalculator:
    """Accelerations of one take-off type for one aircraft and environment.

    Examples:
        >>> dynamics = create_aborted_takeoff_dynamics_calculator(aircraft_data, 1.225, 9.81)
        >>> dynamics.calculate(AircraftState(true_airspeed=50.0)).true_airspeed_rate < 0
        True
    """

    def __init__(
        self,
        aircraft_data: AircraftData,
        density: float,
        gravitational_acceleration: float,
        policy: TakeOffDynamicsPolicy,
    ) -> None:
        """Initialize the calculator.

        Raises:
            InvalidArgumentError: If aircraft_data or policy is None.
        """
        ensure_not_none(aircraft_data, "aircraft_data")
        ensure_not_none(policy, "policy")

        self.aircraft_data = aircraft_data
        self.density = density
        self.gravitational_acceleration = gravitational_acceleration
        self.policy = policy

    def calculate(self, state: AircraftState) -> AircraftAccelerations:
        """Calculate the accelerations at ``state``.

        Raises:
            InvalidArgumentError: If state is None.
        """
        ensure_not_none(state, "state")
        return calculate_accelerations(
            self.aircraft_data, self.density, self.gravitational_acceleration, self.policy, state
        )

    def __repr__(self) -> str:
        return f"TakeOffDynamicsCalculator(policy={self.policy.name!r})"


def create_normal_takeoff_dynamics_calculator(
    aircraft_data: AircraftData, density: float, gravitational_acceleration: float
) -> TakeOffDynamicsCalculator:
    return TakeOffDynamicsCalculator(aircraft_data, density, gravitational_acceleration, normal_takeoff_policy())


def create_aborted_takeoff_dynamics_calculator(
    aircraft_data: AircraftData, density: float, gravitational_acceleration: float
) -> TakeOffDynamicsCalculator:
    return TakeOffDynamicsCalculator(aircraft_data, density, gravitational_acceleration, aborted_takeoff_policy())


def create_continued_takeoff_dynamics_calculator(
    aircraft_data: AircraftData, nr_of_failed_engines: int, density: float, gravitational_acceleration: float
) -> TakeOffDynamicsCalculator:
    """Create the dynamics after an engine failure during a continued take-off."""
    logger.debug("Creating continued take-off dynamics with %d failed engine(s)", nr_of_failed_engines)
    return TakeOffDynamicsCalculator(
        aircraft_data, density, gravitational_acceleration, continued_takeoff_policy(nr_of_failed_engines)
    )
