"""
mathop: primitive operators on 32-bit signed integers
======================================================
Demonstrates addition, comparison, logical AND and compound assignment
on two fixed-width integers and prints one line per operation:

    10 + 5 = 15
    10 > 5 = true
    10 > 0 && 5 > 0 = true
    20

Architecture:
    ┌───────────┐    ┌────────────┐    ┌──────────────┐    ┌──────────┐
    │ Variables │───>│ Step list  │───>│ OperatorDemo │───>│ stdout   │
    │ (int32)   │    │ (dataclass)│    │ (tree-walk)  │    │ 4 lines  │
    └───────────┘    └────────────┘    └──────────────┘    └──────────┘

    - int32.py: two's-complement wrap + overflow detection
    - steps.py: Variables record and the four step nodes
    - demo.py:  OperatorDemo evaluator and overflow modes
"""

__version__ = "0.1.0"

from .int32 import (
    INT32_MAX, INT32_MIN, ArithmeticOverflowError, Int32RangeError,
    MathOpError, add32, check_range, checked_add, checked_mul, mul32,
    to_signed32,
)
from .steps import (
    DEFAULT_NUM1, DEFAULT_NUM2, DEFAULT_PROGRAM, Addition, BothPositive,
    DoubleInPlace, GreaterThan, ImmutableVariableError, Step, StepResult,
    Variables,
)
from .demo import OVERFLOW_MODES, OperatorDemo, format_value


def run_demo(num1: int = DEFAULT_NUM1, num2: int = DEFAULT_NUM2, *,
             overflow: str = "wrapping") -> list:
    """Run the four-step operator demo and return its output lines.

    Args:
        num1: Starting value of num1 (doubled by the last step).
        num2: Value of num2.
        overflow: 'wrapping' (default) or 'checked'.

    Returns:
        List of four output lines, without line terminators.
    """
    demo = OperatorDemo(Variables(num1, num2), overflow=overflow)
    demo.run()
    return demo.lines()
