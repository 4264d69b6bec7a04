"""Exception types raised by the balanced field length calculation.

All errors are raised at the point of detection and propagate to the caller;
none of them describe a transient condition that could be retried.

Typical usage example:
    from bfl.core.exceptions import InvalidArgumentError

    if aircraft_data is None:
        raise InvalidArgumentError("aircraft_data is required")
"""

from typing import Any


class BalancedFieldLengthError(Exception):
    """Base class for all calculation errors."""


class InvalidArgumentError(BalancedFieldLengthError, ValueError):
    """Raised when a required argument is missing or has an invalid value."""


class DuplicateFailureSpeedError(InvalidArgumentError):
    """Raised when distance outputs contain the same failure speed twice.

    Attributes:
        failure_speed: The failure speed that was defined more than once.
    """

    def __init__(self, failure_speed: float) -> None:
        super().__init__(
            f"Outputs cannot contain duplicate definitions for failure speed {failure_speed}."
        )
        self.failure_speed = failure_speed


class AngleRangeError(BalancedFieldLengthError, ValueError):
    """Raised when an angle is created outside of its valid range."""


class InvalidCalculationError(BalancedFieldLengthError):
    """Raised when a calculation cannot produce a physically meaningful result.

    Typical causes are an exhausted iteration budget, a simulation that
    terminates before the failure occurred, or aerodynamic input outside the
    valid range of the model.
    """


class KernelValidationFailedError(InvalidArgumentError):
    """Raised when the kernel rejects the simulation input.

    Attributes:
        errors: The validation errors reported by the kernel.
    """

    def __init__(self, errors: list[Any]) -> None:
        names = ", ".join(error.name for error in errors)
        super().__init__(f"Invalid calculation input: {names}")
        self.errors = list(errors)
