"""Angle value type.

An Angle holds both its radian and degree representation and can only be
created within [0, 360] degrees ([0, 2*pi] radians). Arithmetic re-validates
the result, so an angle never wraps around silently.

A NaN input creates the *uninitialized* angle. It is a distinct state rather
than a NaN payload: it compares equal only to itself, reads back NaN for both
representations and cannot be ordered.

Typical usage example:
    from bfl.common.angle import Angle

    max_pitch = Angle.from_degrees(16.0)
    if state.pitch_angle < max_pitch:
        ...
"""

import math
from typing import Any

from bfl.core.exceptions import AngleRangeError, InvalidCalculationError

TWO_PI = 2.0 * math.pi


class Angle:
    """Immutable, range-validated angle.

    Examples:
        >>> a = Angle.from_degrees(90.0)
        >>> a.radians
        1.5707963267948966
        >>> (a + Angle.from_degrees(45.0)).degrees
        135.0
    """

    __slots__ = ("_radians", "_degrees")

    def __init__(self, radians: float = 0.0) -> None:
        """Create an angle from radians.

        Args:
            radians: Angle in radians, within [0, 2*pi] or NaN.

        Raises:
            AngleRangeError: If radians is outside [0, 2*pi].
        """
        if math.isnan(radians):
            self._set(None, None)
            return

        if not 0.0 <= radians <= TWO_PI:
            raise AngleRangeError(f"Invalid angle {radians} rad, angle must be in the range of [0, 2pi].")

        self._set(radians, math.degrees(radians))

    def _set(self, radians: float | None, degrees: float | None) -> None:
        object.__setattr__(self, "_radians", radians)
        object.__setattr__(self, "_degrees", degrees)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Angle is immutable")

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        """Create an angle from degrees.

        Args:
            degrees: Angle in degrees, within [0, 360] or NaN.

        Raises:
            AngleRangeError: If degrees is outside [0, 360].
        """
        if math.isnan(degrees):
            return cls.uninitialized()

        if not 0.0 <= degrees <= 360.0:
            raise AngleRangeError(f"Invalid angle {degrees} deg, angle must be in the range of [0, 360].")

        angle = cls.__new__(cls)
        angle._set(math.radians(degrees), degrees)
        return angle

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        """Create an angle from radians (see ``__init__``)."""
        return cls(radians)

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    @classmethod
    def uninitialized(cls) -> "Angle":
        """Create the uninitialized angle."""
        return cls(math.nan)

    @property
    def radians(self) -> float:
        """Angle in radians (NaN when uninitialized)."""
        return math.nan if self._radians is None else self._radians

    @property
    def degrees(self) -> float:
        """Angle in degrees (NaN when uninitialized)."""
        return math.nan if self._degrees is None else self._degrees

    @property
    def is_initialized(self) -> bool:
        return self._radians is not None

    def is_concrete(self) -> bool:
        """Whether the angle holds a finite value."""
        return self._radians is not None and math.isfinite(self._radians)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self) -> int:
        return hash(self._radians)

    def _ordering_operands(self, other: object) -> tuple[float, float]:
        if not isinstance(other, Angle):
            raise TypeError(f"Cannot compare Angle with {type(other).__name__}")
        if self._radians is None or other._radians is None:
            raise InvalidCalculationError("Cannot order an uninitialized angle.")
        return self._radians, other._radians

    def __lt__(self, other: "Angle") -> bool:
        left, right = self._ordering_operands(other)
        return left < right

    def __le__(self, other: "Angle") -> bool:
        left, right = self._ordering_operands(other)
        return left <= right

    def __gt__(self, other: "Angle") -> bool:
        left, right = self._ordering_operands(other)
        return left > right

    def __ge__(self, other: "Angle") -> bool:
        left, right = self._ordering_operands(other)
        return left >= right

    def __repr__(self) -> str:
        if self._radians is None:
            return "Angle(uninitialized)"
        return f"Angle(degrees={self._degrees!r})"
