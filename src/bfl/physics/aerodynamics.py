"""Aerodynamic force model of the take-off simulation.

Lift follows a linear lift curve, drag a parabolic drag polar with a rest drag
coefficient selected by whether an engine has failed. All forces are returned
in Newton.

Typical usage example:
    from bfl.physics.aerodynamics import calculate_lift, calculate_lift_coefficient

    cl = calculate_lift_coefficient(aero, angle_of_attack)
    lift = calculate_lift(aero, angle_of_attack, density=1.225, velocity=60.0)
"""

import math

from bfl.common.angle import Angle
from bfl.common.number_guard import ensure_not_none
from bfl.core.exceptions import InvalidCalculationError
from bfl.data.aircraft import AerodynamicData


def calculate_stall_speed(data: AerodynamicData, takeoff_weight: float, density: float) -> float:
    """Calculate the stall speed of the aircraft.

    Args:
        data: Aerodynamic data of the aircraft.
        takeoff_weight: Take-off weight [N].
        density: Air density [kg/m3].

    Returns:
        Stall speed [m/s].

    Raises:
        InvalidArgumentError: If data is None.
        InvalidCalculationError: If density is not positive.
    """
    ensure_not_none(data, "data")
    _validate_density(density)

    return math.sqrt(2 * takeoff_weight / (density * data.wing_area * data.maximum_lift_coefficient))


def calculate_lift_coefficient(data: AerodynamicData, angle_of_attack: Angle) -> float:
    """Calculate the lift coefficient at the given angle of attack.

    Raises:
        InvalidArgumentError: If data is None.
        InvalidCalculationError: If the angle of attack is below the zero
            lift angle of attack or the lift coefficient exceeds the
            maximum lift coefficient.
    """
    ensure_not_none(data, "data")

    if angle_of_attack < data.zero_lift_angle_of_attack:
        raise InvalidCalculationError(
            f"Angle of attack {angle_of_attack.degrees:.2f} deg must be larger than the zero lift "
            f"angle of attack {data.zero_lift_angle_of_attack.degrees:.2f} deg."
        )

    lift_coefficient = data.lift_coefficient_gradient * (
        angle_of_attack.radians - data.zero_lift_angle_of_attack.radians
    )
    _validate_lift_coefficient(data, lift_coefficient)

    return lift_coefficient


def calculate_lift(data: AerodynamicData, angle_of_attack: Angle, density: float, velocity: float) -> float:
    """Calculate the lift [N].

    Args:
        data: Aerodynamic data of the aircraft.
        angle_of_attack: Current angle of attack.
        density: Air density [kg/m3].
        velocity: True airspeed [m/s].

    Raises:
        InvalidArgumentError: If data is None.
        InvalidCalculationError: If density is not positive, velocity is
            negative or the wing is stalled.
    """
    ensure_not_none(data, "data")
    _validate_density(density)
    _validate_velocity(velocity)

    if angle_of_attack == data.zero_lift_angle_of_attack:
        return 0.0

    lift_coefficient = calculate_lift_coefficient(data, angle_of_attack)
    return 0.5 * lift_coefficient * density * velocity**2 * data.wing_area


def calculate_drag_with_engine_failure(
    data: AerodynamicData, lift_coefficient: float, density: float, velocity: float
) -> float:
    """Calculate the drag [N] with a failed engine."""
    ensure_not_none(data, "data")
    return _calculate_drag(
        data, data.rest_drag_coefficient_with_engine_failure, lift_coefficient, density, velocity
    )


def calculate_drag_without_engine_failure(
    data: AerodynamicData, lift_coefficient: float, density: float, velocity: float
) -> float:
    """Calculate the drag [N] with all engines operating."""
    ensure_not_none(data, "data")
    return _calculate_drag(
        data, data.rest_drag_coefficient_without_engine_failure, lift_coefficient, density, velocity
    )


def _calculate_drag(
    data: AerodynamicData,
    rest_drag_coefficient: float,
    lift_coefficient: float,
    density: float,
    velocity: float,
) -> float:
    _validate_density(density)
    _validate_velocity(velocity)
    _validate_lift_coefficient(data, lift_coefficient)

    induced_drag_coefficient = lift_coefficient**2 / (math.pi * data.aspect_ratio * data.oswald_factor)
    drag_coefficient = rest_drag_coefficient + induced_drag_coefficient
    return drag_coefficient * 0.5 * density * velocity**2 * data.wing_area


def _validate_density(density: float) -> None:
    if density <= 0:
        raise InvalidCalculationError(f"Density must be larger than 0, got {density}.")


def _validate_velocity(velocity: float) -> None:
    if velocity < 0:
        raise InvalidCalculationError(f"Velocity must be larger or equal to 0, got {velocity}.")


def _validate_lift_coefficient(data: AerodynamicData, lift_coefficient: float) -> None:
    # Above the maximum the wing is stalled and the linear lift curve no longer holds
    if lift_coefficient < 0 or lift_coefficient > data.maximum_lift_coefficient:
        raise InvalidCalculationError(
            f"Lift coefficient {lift_coefficient:.3f} must lie within [0, "
            f"{data.maximum_lift_coefficient:.3f}]."
        )
