"""Argument validation helpers for numeric input.

Each helper raises InvalidArgumentError naming the offending parameter, so
callers can validate constructor arguments in one line per rule.
"""

import math

from bfl.common.angle import Angle
from bfl.core.exceptions import InvalidArgumentError


def ensure_not_none(value: object, name: str) -> None:
    """Raise if a required reference is missing."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required and cannot be None.")


def ensure_larger_than_zero(value: float, name: str) -> None:
    """Raise if ``value`` is not strictly positive.

    NaN passes this check; combine with ``ensure_concrete_number``.
    """
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be larger than 0.")


def ensure_larger_or_equal_to_zero(value: float, name: str) -> None:
    """Raise if ``value`` is negative."""
    if value < 0:
        raise InvalidArgumentError(f"{name} must be larger or equal to 0.")


def ensure_concrete_number(value: float, name: str) -> None:
    """Raise if ``value`` is NaN or infinite."""
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgumentError(f"{name} must be a concrete number and cannot be NaN or Infinity.")


def ensure_concrete_angle(value: Angle, name: str) -> None:
    """Raise if ``value`` is not a concrete (initialized, finite) angle."""
    if not value.is_concrete():
        raise InvalidArgumentError(f"{name} must be a concrete angle.")


def ensure_angle_larger_than_zero(value: Angle, name: str) -> None:
    """Raise if ``value`` is not a concrete angle larger than zero."""
    ensure_concrete_angle(value, name)
    if value <= Angle.zero():
        raise InvalidArgumentError(f"{name} must be larger than 0.")
