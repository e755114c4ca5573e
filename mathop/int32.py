"""
Signed 32-bit integer arithmetic.

Python ints are unbounded, so every value that stands in for a native
32-bit integer passes through this module. Each arithmetic helper
returns ``(result, overflowed)``: the result already wrapped to 32 bits
and a flag telling whether signed overflow happened. The caller decides
whether to accept the wrapped value or abort.

Overflow formula (same as any two's-complement ALU):
  add: V = (A31 & B31 & ~R31) | (~A31 & ~B31 & R31)
  mul: V = exact product does not fit in [INT32_MIN, INT32_MAX]
"""

from typing import Tuple


INT32_BITS = 32
INT32_MASK = 0xFFFFFFFF
INT32_SIGN = 0x80000000
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


class MathOpError(Exception):
    """Base class for every error raised by mathop."""


class Int32RangeError(MathOpError):
    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(
            f"{name} = {value} does not fit in a 32-bit signed integer "
            f"({INT32_MIN}..{INT32_MAX})"
        )


class ArithmeticOverflowError(MathOpError):
    def __init__(self, operation: str, lhs: int, rhs: int):
        self.operation = operation
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"attempt to {operation} with overflow ({lhs}, {rhs})")


def to_signed32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    value &= INT32_MASK
    if value & INT32_SIGN:
        return value - (1 << INT32_BITS)
    return value


def fits32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def check_range(value: int, name: str = "value") -> int:
    """Return value unchanged, or raise Int32RangeError if it needs more than 32 bits."""
    if not fits32(value):
        raise Int32RangeError(name, value)
    return value


def add32(a: int, b: int) -> Tuple[int, bool]:
    """Add two int32 values. Returns (wrapped_result, signed_overflow)."""
    raw = (a & INT32_MASK) + (b & INT32_MASK)
    # Both operands same sign, result different
    overflowed = bool((a & b & ~raw | ~a & ~b & raw) & INT32_SIGN)
    return (to_signed32(raw), overflowed)


def mul32(a: int, b: int) -> Tuple[int, bool]:
    """Multiply two int32 values. Returns (wrapped_result, signed_overflow)."""
    exact = a * b
    return (to_signed32(exact), not fits32(exact))


def checked_add(a: int, b: int) -> int:
    result, overflowed = add32(a, b)
    if overflowed:
        raise ArithmeticOverflowError("add", a, b)
    return result


def checked_mul(a: int, b: int) -> int:
    result, overflowed = mul32(a, b)
    if overflowed:
        raise ArithmeticOverflowError("multiply", a, b)
    return result
