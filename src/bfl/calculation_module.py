"""Balanced field length calculation over a failure speed sweep.

Typical usage example:
    from bfl.calculation_module import BalancedFieldLengthCalculationModule

    module = BalancedFieldLengthCalculationModule()
    output = module.calculate(calculation)
    print(output.velocity, output.distance)
"""

import dataclasses

from bfl.calculator.balanced_field_length_calculator import calculate_balanced_field_length
from bfl.common.number_guard import ensure_not_none
from bfl.core.exceptions import KernelValidationFailedError
from bfl.core.logging_system import get_logger
from bfl.data.aircraft import AircraftData
from bfl.data.outputs import BalancedFieldLengthOutput
from bfl.data.settings import BalancedFieldLengthCalculation, CalculationSettings
from bfl.kernel import AggregatedDistanceCalculatorKernel, KernelValidationError
from bfl.physics.integrators import EulerIntegrator, IIntegrator

logger = get_logger(__name__)

_VALIDATION_MESSAGES = {
    KernelValidationError.INVALID_DENSITY: "Density must be larger than 0.",
    KernelValidationError.INVALID_GRAVITATIONAL_ACCELERATION: "Gravitational acceleration must be larger than 0.",
    KernelValidationError.INVALID_NR_OF_FAILED_ENGINES: (
        "Number of failed engines must be less than the number of engines."
    ),
}


def create_kernel_aircraft_data(calculation: BalancedFieldLengthCalculation) -> AircraftData:
    """Combine the aircraft and engine data of a calculation.

    The engine data defines the engine count and thrust of the aircraft.
    """
    engine_data = calculation.engine_data
    return dataclasses.replace(
        calculation.aircraft_data,
        nr_of_engines=engine_data.nr_of_engines,
        maximum_thrust_per_engine=engine_data.thrust_per_engine,
    )


class BalancedFieldLengthCalculationModule:
    """Sweeps the failure speed and resolves the balanced field length.

    Every failure speed is calculated independently with the same integrator.
    """

    def __init__(
        self,
        kernel: AggregatedDistanceCalculatorKernel | None = None,
        integrator: IIntegrator | None = None,
    ) -> None:
        self.kernel = kernel or AggregatedDistanceCalculatorKernel()
        self.integrator = integrator or EulerIntegrator()

    def validate(self, calculation: BalancedFieldLengthCalculation) -> list[str]:
        """Validate a calculation.

        Args:
            calculation: The calculation to validate.

        Returns:
            Human readable validation messages, empty when the calculation is valid.

        Raises:
            InvalidArgumentError: If calculation is None.
        """
        ensure_not_none(calculation, "calculation")

        settings = calculation.simulation_settings
        messages = []
        if settings.end_failure_velocity < 1:
            messages.append("End failure velocity must be larger than 0.")

        result = self.kernel.validate(
            create_kernel_aircraft_data(calculation),
            settings.density,
            settings.gravitational_acceleration,
            calculation.engine_data.nr_of_failed_engines,
        )
        messages.extend(_VALIDATION_MESSAGES[error] for error in result.errors)
        return messages

    def calculate(self, calculation: BalancedFieldLengthCalculation) -> BalancedFieldLengthOutput:
        """Calculate the balanced field length.

        Args:
            calculation: The calculation to perform.

        Returns:
            The balanced field length with the distances of every failure speed.

        Raises:
            InvalidArgumentError: If calculation is None or the sweep holds
                fewer than two failure speeds.
            KernelValidationFailedError: If the kernel rejects the input.
            InvalidCalculationError: If a take-off cannot be calculated.
        """
        ensure_not_none(calculation, "calculation")

        settings = calculation.simulation_settings
        nr_of_failed_engines = calculation.engine_data.nr_of_failed_engines
        aircraft_data = create_kernel_aircraft_data(calculation)

        result = self.kernel.validate(
            aircraft_data, settings.density, settings.gravitational_acceleration, nr_of_failed_engines
        )
        if not result.is_valid:
            raise KernelValidationFailedError(list(result.errors))

        logger.info(
            "Calculating balanced field length for failure speeds 0-%d m/s (%d failed engine(s))",
            settings.end_failure_velocity - 1,
            nr_of_failed_engines,
        )

        outputs = []
        for failure_speed in range(settings.end_failure_velocity):
            calculation_settings = CalculationSettings(
                failure_speed, settings.maximum_nr_of_iterations, settings.time_step
            )
            outputs.append(
                self.kernel.calculate(
                    aircraft_data,
                    self.integrator,
                    nr_of_failed_engines,
                    settings.density,
                    settings.gravitational_acceleration,
                    calculation_settings,
                )
            )

        balanced_field_length = calculate_balanced_field_length(outputs)
        if balanced_field_length.is_defined():
            logger.info(
                "Balanced field length: %.1f m at %.2f m/s",
                balanced_field_length.distance,
                balanced_field_length.velocity,
            )
        else:
            logger.warning("Continued and aborted take-off distances do not cross")

        return BalancedFieldLengthOutput(
            balanced_field_length.velocity, balanced_field_length.distance, tuple(outputs)
        )
