"""Time integration of the aircraft state.

Typical usage example:
    from bfl.physics.integrators import EulerIntegrator

    integrator = EulerIntegrator()
    next_state = integrator.integrate(state, accelerations, time_step=0.1)
"""

from abc import ABC, abstractmethod

from bfl.common.angle import Angle
from bfl.common.number_guard import ensure_not_none
from bfl.data.state import AircraftAccelerations, AircraftState


class IIntegrator(ABC):
    """Abstract interface for state integrators.

    Implementations must be stateless: the next state depends only on the
    arguments of ``integrate``.
    """

    @abstractmethod
    def integrate(
        self, state: AircraftState, accelerations: AircraftAccelerations, time_step: float
    ) -> AircraftState:
        """Advance the state by one time step.

        Args:
            state: Current aircraft state.
            accelerations: Time derivatives at the current state.
            time_step: Time step [s].

        Returns:
            The state after the time step.

        Raises:
            InvalidArgumentError: If state or accelerations is None.
            AngleRangeError: If an integrated angle leaves the valid range.
        """


class EulerIntegrator(IIntegrator):
    """Explicit (forward) Euler integrator.

    The distance integrates the true airspeed of the current state.

    Examples:
        >>> integrator = EulerIntegrator()
        >>> state = AircraftState(true_airspeed=10.0)
        >>> integrator.integrate(state, AircraftAccelerations(true_airspeed_rate=2.0), 0.5).distance
        5.0
    """

    def integrate(
        self, state: AircraftState, accelerations: AircraftAccelerations, time_step: float
    ) -> AircraftState:
        ensure_not_none(state, "state")
        ensure_not_none(accelerations, "accelerations")

        return AircraftState(
            pitch_angle=Angle.from_radians(state.pitch_angle.radians + accelerations.pitch_rate * time_step),
            flight_path_angle=Angle.from_radians(
                state.flight_path_angle.radians + accelerations.flight_path_rate * time_step
            ),
            true_airspeed=state.true_airspeed + accelerations.true_airspeed_rate * time_step,
            height=state.height + accelerations.climb_rate * time_step,
            distance=state.distance + state.true_airspeed * time_step,
        )
