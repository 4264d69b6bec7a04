"""Integration variables of the take-off simulation and their derivatives."""

from dataclasses import dataclass, field

from bfl.common.angle import Angle


@dataclass(frozen=True)
class AircraftState:
    """Aircraft state at a single time step.

    A new instance is created for every integration step.

    Attributes:
        pitch_angle: Pitch angle of the aircraft.
        flight_path_angle: Angle of the flight path with the runway.
        true_airspeed: True airspeed [m/s].
        height: Height above the runway [m].
        distance: Distance covered since brake release [m].
    """

    pitch_angle: Angle = field(default_factory=Angle.zero)
    flight_path_angle: Angle = field(default_factory=Angle.zero)
    true_airspeed: float = 0.0
    height: float = 0.0
    distance: float = 0.0


@dataclass(frozen=True)
class AircraftAccelerations:
    """Time derivatives of the aircraft state.

    Angular rates are signed and therefore kept in plain radians per second;
    the integrated angles are validated again by the integrator.

    Attributes:
        pitch_rate: Pitch angle rate [rad/s].
        flight_path_rate: Flight path angle rate [rad/s].
        true_airspeed_rate: True airspeed rate [m/s2].
        climb_rate: Rate of climb [m/s].
    """

    pitch_rate: float = 0.0
    flight_path_rate: float = 0.0
    true_airspeed_rate: float = 0.0
    climb_rate: float = 0.0
