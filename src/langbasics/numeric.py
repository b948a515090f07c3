"""
Numeric Types for langbasics

Fixed-width integers and explicit float precision.

Python integers never overflow, so the programs in this package use
FixedWidthInt subclasses instead. Arithmetic on them is checked: leaving
the type's range raises ArithmeticOverflowError, the equivalent of a
fatal arithmetic trap. Nothing in this package catches it.

Floats are numpy scalars so that single precision (float32) is a real
storage format and not just a formatting trick.

ARCHITECTURAL RULE:
    No implicit coercion.
    Mixing two numeric kinds is a TypeError.
    Widening must be spelled out with as_f64().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

import numpy as np


class ArithmeticOverflowError(OverflowError):
    """Checked fixed-width arithmetic left the range of its type."""


@dataclass(frozen=True)
class FixedWidthInt:
    """
    Base class for immutable fixed-width integers.

    Subclasses set BITS and SIGNED. The stored value is always a plain
    Python int inside [MIN, MAX] for the subclass.

    Operands:
        Another value of the SAME type, or a plain int literal that fits
        the type. Anything else (floats, bools, other widths) is rejected.

    IMPORTANT:
        +, - and * trap on overflow.
        Use wrapping_* for modular arithmetic, checked_* for a None result.
    """

    value: int

    BITS: ClassVar[int] = 32
    SIGNED: ClassVar[bool] = False

    def __post_init__(self):
        if type(self) is FixedWidthInt:
            raise TypeError("FixedWidthInt is abstract; use U32 or I32")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} requires an int, got {type(self.value).__name__}"
            )
        if not self.min_value() <= self.value <= self.max_value():
            raise ValueError(
                f"Literal {self.value} out of range for {type(self).__name__}"
            )

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.BITS - 1)) if cls.SIGNED else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.BITS - 1)) - 1 if cls.SIGNED else (1 << cls.BITS) - 1

    @classmethod
    def _wrap(cls, raw: int) -> int:
        raw &= (1 << cls.BITS) - 1
        if cls.SIGNED and raw > cls.max_value():
            raw -= 1 << cls.BITS
        return raw

    def _operand(self, other) -> int:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            # Literal inference: a bare int adopts this type, so it must fit.
            return type(self)(other).value
        raise TypeError(
            f"Cannot mix {type(self).__name__} with {type(other).__name__} "
            f"without an explicit conversion"
        )

    def _checked(self, raw: int) -> Optional[FixedWidthInt]:
        if self.min_value() <= raw <= self.max_value():
            return type(self)(raw)
        return None

    def _trap(self, raw: int, op: str, other) -> FixedWidthInt:
        result = self._checked(raw)
        if result is None:
            raise ArithmeticOverflowError(
                f"attempt to {op} with overflow: {self.value} {op} {other} "
                f"({type(self).__name__})"
            )
        return result

    # Checked (trapping) operators

    def __add__(self, other) -> FixedWidthInt:
        return self._trap(self.value + self._operand(other), "add", other)

    def __sub__(self, other) -> FixedWidthInt:
        return self._trap(self.value - self._operand(other), "subtract", other)

    def __mul__(self, other) -> FixedWidthInt:
        return self._trap(self.value * self._operand(other), "multiply", other)

    # Non-trapping variants

    def checked_add(self, other) -> Optional[FixedWidthInt]:
        return self._checked(self.value + self._operand(other))

    def checked_sub(self, other) -> Optional[FixedWidthInt]:
        return self._checked(self.value - self._operand(other))

    def checked_mul(self, other) -> Optional[FixedWidthInt]:
        return self._checked(self.value * self._operand(other))

    def wrapping_add(self, other) -> FixedWidthInt:
        return type(self)(self._wrap(self.value + self._operand(other)))

    def wrapping_sub(self, other) -> FixedWidthInt:
        return type(self)(self._wrap(self.value - self._operand(other)))

    def wrapping_mul(self, other) -> FixedWidthInt:
        return type(self)(self._wrap(self.value * self._operand(other)))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class U32(FixedWidthInt):
    """Unsigned 32-bit integer."""

    BITS: ClassVar[int] = 32
    SIGNED: ClassVar[bool] = False


@dataclass(frozen=True)
class I32(FixedWidthInt):
    """Signed 32-bit integer (the default integer type of the literals)."""

    BITS: ClassVar[int] = 32
    SIGNED: ClassVar[bool] = True


Numeric = Union[FixedWidthInt, int, float, np.floating]


def f32(literal: float) -> np.float32:
    """Store a float literal in single precision (rounds to nearest)."""
    return np.float32(literal)


def f64(literal: float) -> np.float64:
    return np.float64(literal)


def as_f64(value: Union[FixedWidthInt, int, np.floating]) -> np.float64:
    """
    Explicit widening cast to double precision.

    Accepts integers (plain or fixed-width) and numpy floats. Plain Python
    floats are already doubles and go through f64() instead.
    """
    if isinstance(value, FixedWidthInt):
        return np.float64(value.value)
    if isinstance(value, bool):
        raise TypeError("Cannot cast bool to f64")
    if isinstance(value, (int, np.integer, np.floating)):
        return np.float64(value)
    raise TypeError(f"Cannot cast {type(value).__name__} to f64")


def format_value(value: Numeric) -> str:
    """
    Render a numeric value for console output.

    Integers print in decimal. Floats print the shortest digit string that
    round-trips at their own precision, without a trailing ".0":

        format_value(f64(110.0))               -> "110"
        format_value(f32(21.321654651651651))  -> "21.321655"
    """
    if isinstance(value, FixedWidthInt):
        return str(value.value)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        value = np.float64(value)
    if isinstance(value, np.floating):
        if np.isnan(value):
            return "NaN"
        if np.isinf(value):
            return "inf" if value > 0 else "-inf"
        return np.format_float_positional(value, unique=True, trim="-")
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")
