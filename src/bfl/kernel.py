"""Aggregated distance calculation kernel.

The kernel is the entry point of the simulation for callers that sweep the
failure speed. It validates the environment and engine input once and then
calculates the aggregated distances per failure speed.
"""

from dataclasses import dataclass, field
from enum import Enum

from bfl.calculator.aggregated_distance_calculator import AggregatedDistanceCalculator
from bfl.common.number_guard import ensure_not_none
from bfl.data.aircraft import AircraftData
from bfl.data.outputs import AggregatedDistanceOutput
from bfl.data.settings import CalculationSettings
from bfl.physics.integrators import IIntegrator


class KernelValidationError(Enum):
    """Reasons why the kernel rejects its input."""

    INVALID_DENSITY = "invalid_density"
    INVALID_GRAVITATIONAL_ACCELERATION = "invalid_gravitational_acceleration"
    INVALID_NR_OF_FAILED_ENGINES = "invalid_nr_of_failed_engines"


@dataclass(frozen=True)
class KernelValidationResult:
    """Outcome of a kernel validation.

    Attributes:
        errors: All validation errors found, empty when the input is valid.
    """

    errors: tuple[KernelValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class AggregatedDistanceCalculatorKernel:
    """Validates simulation input and calculates aggregated distances.

    Examples:
        >>> kernel = AggregatedDistanceCalculatorKernel()
        >>> result = kernel.validate(aircraft_data, density=1.225, gravitational_acceleration=9.81,
        ...                          nr_of_failed_engines=1)
        >>> result.is_valid
        True
    """

    def __init__(self, calculator: AggregatedDistanceCalculator | None = None) -> None:
        self._calculator = calculator or AggregatedDistanceCalculator()

    def validate(
        self,
        aircraft_data: AircraftData,
        density: float,
        gravitational_acceleration: float,
        nr_of_failed_engines: int,
    ) -> KernelValidationResult:
        """Validate the simulation input.

        Args:
            aircraft_data: Aircraft to calculate for.
            density: Air density [kg/m3].
            gravitational_acceleration: Gravitational acceleration [m/s2].
            nr_of_failed_engines: Number of engines failing at the failure speed.

        Returns:
            A result listing every violated rule.

        Raises:
            InvalidArgumentError: If aircraft_data is None.
        """
        ensure_not_none(aircraft_data, "aircraft_data")

        errors = []
        if density <= 0:
            errors.append(KernelValidationError.INVALID_DENSITY)
        if gravitational_acceleration <= 0:
            errors.append(KernelValidationError.INVALID_GRAVITATIONAL_ACCELERATION)
        if nr_of_failed_engines >= aircraft_data.nr_of_engines:
            errors.append(KernelValidationError.INVALID_NR_OF_FAILED_ENGINES)

        return KernelValidationResult(tuple(errors))

    def calculate(
        self,
        aircraft_data: AircraftData,
        integrator: IIntegrator,
        nr_of_failed_engines: int,
        density: float,
        gravitational_acceleration: float,
        calculation_settings: CalculationSettings,
    ) -> AggregatedDistanceOutput:
        """Calculate the aggregated distances for one failure speed.

        See ``AggregatedDistanceCalculator.calculate``.
        """
        return self._calculator.calculate(
            aircraft_data, integrator, nr_of_failed_engines, density, gravitational_acceleration, calculation_settings
        )
