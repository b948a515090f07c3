"""
Tests for langbasics numeric types

These tests verify:
    - Fixed-width integers stay inside their range
    - Checked arithmetic traps, wrapping arithmetic wraps
    - No implicit coercion between numeric kinds
    - Float precision and console formatting
"""

import numpy as np
import pytest

from langbasics.numeric import (
    ArithmeticOverflowError,
    FixedWidthInt,
    I32,
    U32,
    as_f64,
    f32,
    f64,
    format_value,
)


class TestFixedWidthConstruction:
    """Test construction and range limits."""

    def test_u32_bounds(self):
        """U32 covers 0 .. 2**32 - 1."""
        assert U32.min_value() == 0
        assert U32.max_value() == 4294967295

    def test_i32_bounds(self):
        """I32 covers -2**31 .. 2**31 - 1."""
        assert I32.min_value() == -2147483648
        assert I32.max_value() == 2147483647

    def test_out_of_range_literal_rejected(self):
        """Negative literals do not fit an unsigned type."""
        with pytest.raises(ValueError):
            U32(-1)
        with pytest.raises(ValueError):
            I32(2**31)

    def test_non_int_rejected(self):
        """Floats and bools are not integer literals."""
        with pytest.raises(TypeError):
            U32(1.0)
        with pytest.raises(TypeError):
            U32(True)

    def test_base_class_is_abstract(self):
        """Only concrete widths can be constructed."""
        with pytest.raises(TypeError):
            FixedWidthInt(1)

    def test_immutable(self):
        """Fixed-width values cannot be reassigned in place."""
        n = U32(5)
        with pytest.raises(AttributeError):
            n.value = 6

    def test_string_form(self):
        """Values print as plain decimal numbers."""
        assert str(U32(3628800)) == "3628800"
        assert f"{I32(-7)}" == "-7"
        assert int(U32(42)) == 42


class TestCheckedArithmetic:
    """Test trapping operators."""

    def test_in_range_operations(self):
        assert U32(3) + U32(4) == U32(7)
        assert U32(10) - 1 == U32(9)
        assert I32(6) * 2 == I32(12)

    def test_add_overflow_traps(self):
        with pytest.raises(ArithmeticOverflowError):
            U32(4294967295) + 1

    def test_sub_underflow_traps(self):
        """Unsigned subtraction below zero is an overflow, not a negative number."""
        with pytest.raises(ArithmeticOverflowError):
            U32(0) - 1

    def test_mul_overflow_traps(self):
        with pytest.raises(ArithmeticOverflowError):
            U32(479001600) * 13

    def test_signed_overflow_traps(self):
        with pytest.raises(ArithmeticOverflowError):
            I32(-2147483648) - 1

    def test_overflow_error_is_overflow_error(self):
        assert issubclass(ArithmeticOverflowError, OverflowError)

    def test_checked_variants_return_none(self):
        assert U32(1).checked_sub(2) is None
        assert U32(70000).checked_mul(70000) is None
        assert U32(1).checked_add(2) == U32(3)


class TestWrappingArithmetic:
    """Test modular arithmetic."""

    def test_unsigned_wraps(self):
        assert U32(4294967295).wrapping_add(1) == U32(0)
        assert U32(0).wrapping_sub(1) == U32(4294967295)

    def test_signed_wraps(self):
        assert I32(2147483647).wrapping_add(1) == I32(-2147483648)
        assert I32(-2147483648).wrapping_sub(1) == I32(2147483647)

    def test_wrapping_mul(self):
        assert U32(65536).wrapping_mul(65536) == U32(0)


class TestNoImplicitCoercion:
    """Mixed numeric kinds need an explicit conversion."""

    def test_mixed_widths_rejected(self):
        with pytest.raises(TypeError):
            U32(1) + I32(1)

    def test_float_operand_rejected(self):
        with pytest.raises(TypeError):
            U32(1) + 1.5

    def test_bool_operand_rejected(self):
        with pytest.raises(TypeError):
            I32(1) * True

    def test_literal_must_fit(self):
        """A bare int adopts the other operand's type."""
        with pytest.raises(ValueError):
            U32(1) + 2**32


class TestFloats:
    """Test float precision and widening."""

    def test_f32_loses_precision(self):
        """A long literal stored in single precision is not the literal any more."""
        value = f32(21.321654651651651)
        assert value.dtype == np.float32
        assert float(value) != 21.321654651651651

    def test_f64_keeps_double(self):
        value = f64(21.21354651654165165416)
        assert value.dtype == np.float64
        assert float(value) == 21.21354651654165165416

    def test_as_f64_widens_integers(self):
        assert as_f64(20) == 20.0
        assert isinstance(as_f64(20), np.float64)
        assert as_f64(U32(5)) == 5.0
        assert as_f64(f32(0.5)) == 0.5

    def test_as_f64_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_f64(True)
        with pytest.raises(TypeError):
            as_f64("20")


class TestFormatValue:
    """Test console rendering."""

    def test_integers(self):
        assert format_value(U32(14515200)) == "14515200"
        assert format_value(10) == "10"

    def test_integral_float_drops_fraction(self):
        assert format_value(f64(110.0)) == "110"
        assert format_value(110.0) == "110"

    def test_shortest_round_trip(self):
        assert format_value(f32(21.321654651651651)) == "21.321655"
        assert format_value(f64(21.21354651654165165416)) == "21.21354651654165"
        assert format_value(as_f64(5) / f64(5.5)) == "0.9090909090909091"

    def test_special_values(self):
        assert format_value(float("nan")) == "NaN"
        assert format_value(float("inf")) == "inf"
        assert format_value(float("-inf")) == "-inf"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            format_value("5")

    def test_bool_is_not_a_number(self):
        with pytest.raises(TypeError):
            format_value(True)
        with pytest.raises(TypeError):
            format_value(np.bool_(False))
