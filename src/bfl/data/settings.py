"""Numerical settings of a simulation run and of a complete calculation."""

from dataclasses import dataclass

from bfl.common.number_guard import (
    ensure_concrete_number,
    ensure_larger_or_equal_to_zero,
    ensure_larger_than_zero,
    ensure_not_none,
)
from bfl.data.aircraft import AircraftData, EngineData


@dataclass(frozen=True)
class CalculationSettings:
    """Settings of a single distance calculation.

    Attributes:
        failure_speed: True airspeed at which the engine failure occurs [m/s].
        maximum_nr_of_iterations: Number of time steps after which the
            calculation is aborted.
        time_step: Integration time step [s].

    Raises:
        InvalidArgumentError: If failure_speed is negative, the iteration
            budget is not positive, or time_step is not a positive number.
    """

    failure_speed: int
    maximum_nr_of_iterations: int
    time_step: float

    def __post_init__(self) -> None:
        ensure_larger_or_equal_to_zero(self.failure_speed, "failure_speed")
        ensure_larger_than_zero(self.maximum_nr_of_iterations, "maximum_nr_of_iterations")
        ensure_larger_than_zero(self.time_step, "time_step")
        ensure_concrete_number(self.time_step, "time_step")


@dataclass(frozen=True)
class GeneralSimulationSettings:
    """Environment and sweep settings shared by all runs of a calculation.

    Attributes:
        density: Air density [kg/m3].
        gravitational_acceleration: Gravitational acceleration [m/s2].
        maximum_nr_of_iterations: Iteration budget of a single run.
        time_step: Integration time step [s].
        end_failure_velocity: Exclusive upper bound of the failure speed sweep [m/s].
    """

    density: float = 1.225
    gravitational_acceleration: float = 9.81
    maximum_nr_of_iterations: int = 10000
    time_step: float = 0.1
    end_failure_velocity: int = 90


@dataclass(frozen=True)
class BalancedFieldLengthCalculation:
    """Complete definition of a balanced field length calculation.

    Attributes:
        aircraft_data: The aircraft to simulate.
        engine_data: Engine configuration, including the failed engine count.
        simulation_settings: Environment and numerical settings.
    """

    aircraft_data: AircraftData
    engine_data: EngineData
    simulation_settings: GeneralSimulationSettings

    def __post_init__(self) -> None:
        ensure_not_none(self.aircraft_data, "aircraft_data")
        ensure_not_none(self.engine_data, "engine_data")
        ensure_not_none(self.simulation_settings, "simulation_settings")
