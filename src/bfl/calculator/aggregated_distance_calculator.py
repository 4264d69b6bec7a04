"""Continued and aborted take-off distances for a single failure speed."""

from bfl.calculator.distance_calculator import DistanceCalculator
from bfl.common.number_guard import ensure_not_none
from bfl.core.logging_system import get_logger
from bfl.data.aircraft import AircraftData
from bfl.data.outputs import AggregatedDistanceOutput
from bfl.data.settings import CalculationSettings
from bfl.physics.integrators import IIntegrator
from bfl.physics.takeoff_dynamics import (
    create_aborted_takeoff_dynamics_calculator,
    create_continued_takeoff_dynamics_calculator,
    create_normal_takeoff_dynamics_calculator,
)

logger = get_logger(__name__)


def create_continued_takeoff_distance_calculator(
    aircraft_data: AircraftData,
    integrator: IIntegrator,
    nr_of_failed_engines: int,
    density: float,
    gravitational_acceleration: float,
    calculation_settings: CalculationSettings,
) -> DistanceCalculator:
    """Create a distance calculator that continues the take-off after the failure."""
    return DistanceCalculator(
        create_normal_takeoff_dynamics_calculator(aircraft_data, density, gravitational_acceleration),
        create_continued_takeoff_dynamics_calculator(
            aircraft_data, nr_of_failed_engines, density, gravitational_acceleration
        ),
        integrator,
        calculation_settings,
    )


def create_aborted_takeoff_distance_calculator(
    aircraft_data: AircraftData,
    integrator: IIntegrator,
    density: float,
    gravitational_acceleration: float,
    calculation_settings: CalculationSettings,
) -> DistanceCalculator:
    """Create a distance calculator that aborts the take-off at the failure."""
    return DistanceCalculator(
        create_normal_takeoff_dynamics_calculator(aircraft_data, density, gravitational_acceleration),
        create_aborted_takeoff_dynamics_calculator(aircraft_data, density, gravitational_acceleration),
        integrator,
        calculation_settings,
    )


class AggregatedDistanceCalculator:
    """Calculates both take-off distances for one failure speed."""

    def calculate(
        self,
        aircraft_data: AircraftData,
        integrator: IIntegrator,
        nr_of_failed_engines: int,
        density: float,
        gravitational_acceleration: float,
        calculation_settings: CalculationSettings,
    ) -> AggregatedDistanceOutput:
        """Calculate the continued and aborted take-off distance.

        Args:
            aircraft_data: Aircraft to calculate for.
            integrator: Integrator advancing the state.
            nr_of_failed_engines: Number of engines failing at the failure speed.
            density: Air density [kg/m3].
            gravitational_acceleration: Gravitational acceleration [m/s2].
            calculation_settings: Failure speed and numerical settings.

        Returns:
            The distances of both take-offs at the failure speed.

        Raises:
            InvalidArgumentError: If aircraft_data, integrator or
                calculation_settings is None.
            InvalidCalculationError: If either take-off cannot be calculated.
        """
        ensure_not_none(aircraft_data, "aircraft_data")
        ensure_not_none(integrator, "integrator")
        ensure_not_none(calculation_settings, "calculation_settings")

        continued_output = create_continued_takeoff_distance_calculator(
            aircraft_data, integrator, nr_of_failed_engines, density, gravitational_acceleration, calculation_settings
        ).calculate()
        aborted_output = create_aborted_takeoff_distance_calculator(
            aircraft_data, integrator, density, gravitational_acceleration, calculation_settings
        ).calculate()

        logger.debug(
            "Failure speed %d m/s: continued=%.1f m, aborted=%.1f m",
            calculation_settings.failure_speed,
            continued_output.distance,
            aborted_output.distance,
        )

        return AggregatedDistanceOutput(
            calculation_settings.failure_speed, continued_output.distance, aborted_output.distance
        )
