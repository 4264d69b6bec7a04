"""Immutable data records consumed and produced by the simulation.

This package provides:
- Parameter records (aircraft, aerodynamics, engines, settings)
- Simulation state and its time derivatives
- Distance and balanced field length results
"""

from bfl.data.aircraft import AerodynamicData, AircraftData, EngineData
from bfl.data.outputs import (
    AggregatedDistanceOutput,
    BalancedFieldLength,
    BalancedFieldLengthOutput,
    DistanceCalculatorOutput,
)
from bfl.data.settings import (
    BalancedFieldLengthCalculation,
    CalculationSettings,
    GeneralSimulationSettings,
)
from bfl.data.state import AircraftAccelerations, AircraftState

__all__ = [
    "AerodynamicData",
    "AggregatedDistanceOutput",
    "AircraftAccelerations",
    "AircraftData",
    "AircraftState",
    "BalancedFieldLength",
    "BalancedFieldLengthCalculation",
    "BalancedFieldLengthOutput",
    "CalculationSettings",
    "DistanceCalculatorOutput",
    "EngineData",
    "GeneralSimulationSettings",
]
