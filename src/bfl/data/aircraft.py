"""Aircraft, aerodynamic and engine parameter records.

Units follow the conventions of the simulation input: forces in kilonewton,
areas in square meter and angles as Angle instances.
"""

from dataclasses import dataclass

from bfl.common.angle import Angle
from bfl.common.number_guard import ensure_not_none


@dataclass(frozen=True)
class AerodynamicData:
    """Aerodynamic properties of the aircraft.

    Attributes:
        aspect_ratio: Wing aspect ratio [-].
        wing_area: Wing reference area [m2].
        zero_lift_angle_of_attack: Angle of attack at which the lift is zero.
        lift_coefficient_gradient: Lift curve slope [1/rad].
        maximum_lift_coefficient: Maximum lift coefficient [-].
        rest_drag_coefficient_without_engine_failure: Zero-lift drag coefficient
            with all engines operating [-].
        rest_drag_coefficient_with_engine_failure: Zero-lift drag coefficient
            with an engine failure (windmilling engine, rudder deflection) [-].
        oswald_factor: Oswald efficiency factor [-].
    """

    aspect_ratio: float
    wing_area: float
    zero_lift_angle_of_attack: Angle
    lift_coefficient_gradient: float
    maximum_lift_coefficient: float
    rest_drag_coefficient_without_engine_failure: float
    rest_drag_coefficient_with_engine_failure: float
    oswald_factor: float


@dataclass(frozen=True)
class AircraftData:
    """Aircraft properties used by the take-off simulation.

    Attributes:
        nr_of_engines: Total number of engines.
        maximum_thrust_per_engine: Maximum thrust of a single engine [kN].
        takeoff_weight: Take-off weight [kN].
        pitch_angle_gradient: Pitch rate during rotation [per second].
        maximum_pitch_angle: Pitch angle at which rotation stops.
        rolling_resistance_coefficient: Friction coefficient while rolling [-].
        braking_resistance_coefficient: Friction coefficient while braking [-].
        aerodynamic_data: The aerodynamic properties of the aircraft.

    Raises:
        InvalidArgumentError: If aerodynamic_data is None.
    """

    nr_of_engines: int
    maximum_thrust_per_engine: float
    takeoff_weight: float
    pitch_angle_gradient: Angle
    maximum_pitch_angle: Angle
    rolling_resistance_coefficient: float
    braking_resistance_coefficient: float
    aerodynamic_data: AerodynamicData

    def __post_init__(self) -> None:
        ensure_not_none(self.aerodynamic_data, "aerodynamic_data")


@dataclass(frozen=True)
class EngineData:
    """Engine configuration of a calculation.

    Attributes:
        nr_of_engines: Total number of engines.
        nr_of_failed_engines: Number of engines failing at the failure speed.
        thrust_per_engine: Maximum thrust of a single engine [kN].
    """

    nr_of_engines: int
    nr_of_failed_engines: int
    thrust_per_engine: float
