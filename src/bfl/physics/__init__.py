"""Physics of the take-off simulation.

This package provides:
- Aerodynamic force model (lift, drag, stall speed)
- State integrators
- Take-off dynamics for normal, aborted and continued take-offs
"""

from bfl.physics.integrators import EulerIntegrator, IIntegrator
from bfl.physics.takeoff_dynamics import TakeOffDynamicsCalculator, TakeOffDynamicsPolicy

__all__ = ["EulerIntegrator", "IIntegrator", "TakeOffDynamicsCalculator", "TakeOffDynamicsPolicy"]
