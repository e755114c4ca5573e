"""
32-bit arithmetic tests for mathop.

Checks the wrap/overflow helpers against hand-computed two's-complement
results at the edges of the signed range.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from mathop.int32 import (
    INT32_MAX, INT32_MIN, ArithmeticOverflowError, Int32RangeError,
    MathOpError, add32, check_range, checked_add, checked_mul, fits32,
    mul32, to_signed32,
)


class TestWrap:
    def test_in_range_unchanged(self):
        for v in (0, 1, -1, 15, INT32_MAX, INT32_MIN):
            assert to_signed32(v) == v

    def test_wraps_past_max(self):
        """2**31 is one past INT32_MAX → INT32_MIN"""
        assert to_signed32(2**31) == INT32_MIN

    def test_wraps_unsigned_all_ones(self):
        assert to_signed32(0xFFFFFFFF) == -1

    def test_wraps_below_min(self):
        assert to_signed32(INT32_MIN - 1) == INT32_MAX

    def test_fits32_edges(self):
        assert fits32(INT32_MAX)
        assert fits32(INT32_MIN)
        assert not fits32(INT32_MAX + 1)
        assert not fits32(INT32_MIN - 1)


class TestRangeCheck:
    def test_returns_value(self):
        assert check_range(10, "num1") == 10

    def test_out_of_range_raises(self):
        with pytest.raises(Int32RangeError) as exc:
            check_range(2**31, "num1")
        assert exc.value.name == "num1"
        assert exc.value.value == 2**31
        assert "num1" in str(exc.value)

    def test_range_error_is_mathop_error(self):
        assert issubclass(Int32RangeError, MathOpError)


class TestAdd:
    def test_simple(self):
        assert add32(10, 5) == (15, False)

    def test_negative_operands(self):
        assert add32(-1, -1) == (-2, False)

    def test_mixed_signs_never_overflow(self):
        assert add32(INT32_MAX, INT32_MIN) == (-1, False)

    def test_positive_overflow(self):
        """MAX + 1 → MIN, V set"""
        assert add32(INT32_MAX, 1) == (INT32_MIN, True)

    def test_negative_overflow(self):
        """MIN + -1 → MAX, V set"""
        assert add32(INT32_MIN, -1) == (INT32_MAX, True)

    def test_checked_add_ok(self):
        assert checked_add(10, 5) == 15

    def test_checked_add_raises(self):
        with pytest.raises(ArithmeticOverflowError) as exc:
            checked_add(INT32_MAX, 5)
        assert exc.value.operation == "add"
        assert exc.value.lhs == INT32_MAX
        assert exc.value.rhs == 5
        assert "attempt to add with overflow" in str(exc.value)


class TestMultiply:
    def test_doubling(self):
        assert mul32(10, 2) == (20, False)

    def test_doubling_negative(self):
        assert mul32(-7, 2) == (-14, False)

    def test_doubling_max_wraps(self):
        """0x7FFFFFFF * 2 = 0xFFFFFFFE → -2"""
        assert mul32(INT32_MAX, 2) == (-2, True)

    def test_doubling_min_wraps_to_zero(self):
        assert mul32(INT32_MIN, 2) == (0, True)

    def test_largest_safe_double(self):
        assert mul32(0x3FFFFFFF, 2) == (0x7FFFFFFE, False)

    def test_checked_mul_raises(self):
        with pytest.raises(ArithmeticOverflowError, match="attempt to multiply with overflow"):
            checked_mul(0x40000000, 2)
