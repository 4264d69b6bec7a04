"""Balanced field length from a sweep of aggregated distance outputs.

The continued and aborted take-off distances form two piecewise-linear curves
over the failure speed. The balanced field length is where they cross.

Typical usage example:
    from bfl.calculator.balanced_field_length_calculator import calculate_balanced_field_length

    result = calculate_balanced_field_length(outputs)
    if result.is_defined():
        print(f"BFL {result.distance:.0f} m at {result.velocity:.1f} m/s")
"""

from collections.abc import Iterable

from bfl.common.geometry import LineSegment, Point2D, determine_segment_intersection
from bfl.common.number_guard import ensure_not_none
from bfl.core.exceptions import DuplicateFailureSpeedError, InvalidArgumentError
from bfl.data.outputs import AggregatedDistanceOutput, BalancedFieldLength


def calculate_balanced_field_length(outputs: Iterable[AggregatedDistanceOutput]) -> BalancedFieldLength:
    """Find the crossing of the continued and aborted take-off distance curves.

    The outputs are ordered by failure speed. When the curves cross more than
    once, the crossing at the lowest failure speed is returned.

    Args:
        outputs: Aggregated distance outputs, one per failure speed.

    Returns:
        The balanced field length, or NaN/NaN when the curves do not cross.

    Raises:
        InvalidArgumentError: If outputs is None or holds fewer than two entries.
        DuplicateFailureSpeedError: If a failure speed occurs more than once.
    """
    ensure_not_none(outputs, "outputs")

    outputs_by_speed: dict[float, AggregatedDistanceOutput] = {}
    for output in outputs:
        if output.failure_speed in outputs_by_speed:
            raise DuplicateFailureSpeedError(output.failure_speed)
        outputs_by_speed[output.failure_speed] = output

    if len(outputs_by_speed) < 2:
        raise InvalidArgumentError("outputs must contain at least two entries.")

    sorted_outputs = [outputs_by_speed[speed] for speed in sorted(outputs_by_speed)]
    for previous, current in zip(sorted_outputs, sorted_outputs[1:]):
        continued = LineSegment(
            Point2D(previous.failure_speed, previous.continued_takeoff_distance),
            Point2D(current.failure_speed, current.continued_takeoff_distance),
        )
        aborted = LineSegment(
            Point2D(previous.failure_speed, previous.aborted_takeoff_distance),
            Point2D(current.failure_speed, current.aborted_takeoff_distance),
        )

        crossing = determine_segment_intersection(continued, aborted)
        if not crossing.is_nan():
            return BalancedFieldLength(crossing.x, crossing.y)

    return BalancedFieldLength()
