"""Result records of the distance calculations and the crossing resolver."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DistanceCalculatorOutput:
    """Result of a single continued or aborted take-off simulation.

    Attributes:
        failure_speed: Failure speed of the run [m/s].
        distance: Distance until the terminal state [m].
    """

    failure_speed: float
    distance: float


@dataclass(frozen=True)
class AggregatedDistanceOutput:
    """Continued and aborted take-off distance for one failure speed.

    Attributes:
        failure_speed: Failure speed [m/s].
        continued_takeoff_distance: Distance to reach the screen height [m].
        aborted_takeoff_distance: Distance to come to a standstill [m].
    """

    failure_speed: float
    continued_takeoff_distance: float
    aborted_takeoff_distance: float


@dataclass(frozen=True)
class BalancedFieldLength:
    """Crossing of the continued and aborted take-off distance curves.

    Both values are NaN when the curves do not cross.

    Attributes:
        velocity: Failure speed at the crossing [m/s].
        distance: Balanced field length [m].
    """

    velocity: float = math.nan
    distance: float = math.nan

    def is_defined(self) -> bool:
        return not (math.isnan(self.velocity) or math.isnan(self.distance))


@dataclass(frozen=True)
class BalancedFieldLengthOutput:
    """Output of a complete calculation sweep.

    Attributes:
        velocity: Failure speed at the crossing [m/s] (NaN when not found).
        distance: Balanced field length [m] (NaN when not found).
        distance_outputs: The aggregated output for every swept failure speed.
    """

    velocity: float
    distance: float
    distance_outputs: tuple[AggregatedDistanceOutput, ...] = field(default_factory=tuple)
