"""Take-off distance calculators.

This package provides:
- DistanceCalculator: one take-off with an engine failure
- AggregatedDistanceCalculator: continued and aborted distance per failure speed
- calculate_balanced_field_length: crossing of the two distance curves
"""

from bfl.calculator.aggregated_distance_calculator import AggregatedDistanceCalculator
from bfl.calculator.balanced_field_length_calculator import calculate_balanced_field_length
from bfl.calculator.distance_calculator import DistanceCalculator, TakeOffPhase

__all__ = [
    "AggregatedDistanceCalculator",
    "DistanceCalculator",
    "TakeOffPhase",
    "calculate_balanced_field_length",
]
