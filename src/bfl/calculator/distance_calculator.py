"""Distance calculator for a single take-off with an engine failure.

The take-off starts at rest on the runway. The normal take-off dynamics apply
until the true airspeed exceeds the failure speed, after which the failure
dynamics (continued or aborted) take over. The run ends at the screen height
or when the aircraft has come to a standstill.
"""

from enum import Enum

from bfl.common.angle import Angle
from bfl.common.number_guard import ensure_not_none
from bfl.core.exceptions import InvalidCalculationError
from bfl.core.logging_system import get_logger
from bfl.data.outputs import DistanceCalculatorOutput
from bfl.data.settings import CalculationSettings
from bfl.data.state import AircraftState
from bfl.physics.integrators import IIntegrator
from bfl.physics.takeoff_dynamics import TakeOffDynamicsCalculator

logger = get_logger(__name__)

# Obstacle height to clear at the end of a continued take-off [m]
SCREEN_HEIGHT = 10.7


class TakeOffPhase(Enum):
    """Phase of a take-off run."""

    GROUND_ROLL = "ground_roll"
    ROTATION = "rotation"
    CLIMB = "climb"
    TERMINAL = "terminal"


def determine_phase(state: AircraftState, maximum_pitch_angle: Angle) -> TakeOffPhase:
    """Determine the take-off phase of ``state``.

    Args:
        state: State to classify.
        maximum_pitch_angle: Pitch angle at which rotation ends.

    Returns:
        The take-off phase. TERMINAL takes precedence over all other phases.
    """
    if state.height >= SCREEN_HEIGHT or state.true_airspeed <= 0:
        return TakeOffPhase.TERMINAL
    if state.pitch_angle >= maximum_pitch_angle:
        return TakeOffPhase.CLIMB
    if state.pitch_angle > Angle.zero():
        return TakeOffPhase.ROTATION
    return TakeOffPhase.GROUND_ROLL


class DistanceCalculator:
    """Simulates one take-off and reports the distance to its terminal state.

    Examples:
        >>> calculator = DistanceCalculator(normal, continued, EulerIntegrator(), settings)
        >>> output = calculator.calculate()
        >>> print(f"{output.distance:.0f} m")
    """

    def __init__(
        self,
        normal_takeoff_dynamics: TakeOffDynamicsCalculator,
        failure_takeoff_dynamics: TakeOffDynamicsCalculator,
        integrator: IIntegrator,
        calculation_settings: CalculationSettings,
    ) -> None:
        """Initialize the distance calculator.

        Args:
            normal_takeoff_dynamics: Dynamics before the engine failure.
            failure_takeoff_dynamics: Dynamics after the engine failure.
            integrator: Integrator advancing the state.
            calculation_settings: Failure speed and numerical settings.

        Raises:
            InvalidArgumentError: If any argument is None.
        """
        ensure_not_none(normal_takeoff_dynamics, "normal_takeoff_dynamics")
        ensure_not_none(failure_takeoff_dynamics, "failure_takeoff_dynamics")
        ensure_not_none(integrator, "integrator")
        ensure_not_none(calculation_settings, "calculation_settings")

        self.normal_takeoff_dynamics = normal_takeoff_dynamics
        self.failure_takeoff_dynamics = failure_takeoff_dynamics
        self.integrator = integrator
        self.calculation_settings = calculation_settings

    def calculate(self) -> DistanceCalculatorOutput:
        """Run the take-off until its terminal state.

        Returns:
            The failure speed and the distance covered at the terminal state.

        Raises:
            InvalidCalculationError: If the terminal state is reached before the
                failure occurred, or not within the iteration budget.
        """
        settings = self.calculation_settings
        maximum_pitch_angle = self.normal_takeoff_dynamics.aircraft_data.maximum_pitch_angle

        state = AircraftState()
        phase = TakeOffPhase.GROUND_ROLL
        has_failed = False

        for iteration in range(settings.maximum_nr_of_iterations):
            dynamics = self.failure_takeoff_dynamics if has_failed else self.normal_takeoff_dynamics
            accelerations = dynamics.calculate(state)
            state = self.integrator.integrate(state, accelerations, settings.time_step)

            if not has_failed and state.true_airspeed > settings.failure_speed:
                has_failed = True
                logger.debug(
                    "Engine failure at iteration %d (V=%.2f m/s, s=%.1f m)",
                    iteration,
                    state.true_airspeed,
                    state.distance,
                )

            next_phase = determine_phase(state, maximum_pitch_angle)
            if next_phase is not phase:
                logger.debug("%s -> %s at s=%.1f m", phase.name, next_phase.name, state.distance)
                phase = next_phase

            if phase is TakeOffPhase.TERMINAL:
                if not has_failed:
                    raise InvalidCalculationError(
                        f"Calculation converged before the failure occurred at {settings.failure_speed} m/s."
                    )
                return DistanceCalculatorOutput(settings.failure_speed, state.distance)

        raise InvalidCalculationError(
            f"Calculation did not converge within {settings.maximum_nr_of_iterations} iterations."
        )
