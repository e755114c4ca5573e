"""
Operator demo evaluator.

Walks a step program against a ``Variables`` record and renders one
output line per step. Evaluation order is the program order; the only
mutation is the in-place doubling of num1.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple, Union

from .int32 import add32, checked_add, checked_mul, mul32
from .steps import (
    DEFAULT_PROGRAM, Addition, BothPositive, DoubleInPlace, GreaterThan,
    Step, StepResult, Variables,
)

logger = logging.getLogger(__name__)


OVERFLOW_MODES = {
    "wrapping": {
        "checked": False,
        "description": "Two's-complement wraparound on overflow (optimized native build)",
    },
    "checked": {
        "checked": True,
        "description": "Abort on signed overflow (debug native build)",
    },
}

WRAPPING_OPS = {"add": add32, "multiply": mul32}
CHECKED_OPS = {"add": checked_add, "multiply": checked_mul}


def format_value(value: Union[int, bool]) -> str:
    """Render a step value: lowercase true/false for booleans, decimal for ints."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OperatorDemo:
    """Evaluates demo steps in order and collects their output lines."""

    def __init__(self, variables: Optional[Variables] = None, overflow: str = "wrapping"):
        if overflow not in OVERFLOW_MODES:
            raise ValueError(f"Unknown overflow mode: {overflow!r}")
        self.variables = variables if variables is not None else Variables()
        self.overflow = overflow
        self.checked = OVERFLOW_MODES[overflow]["checked"]
        self.results: List[StepResult] = []

    # ── Entry point ───────────────────────────

    def run(self, program: Iterable[Step] = DEFAULT_PROGRAM,
            emit: Optional[Callable[[str], None]] = None) -> List[StepResult]:
        """Evaluate every step. Returns the results of this run.

        Results from a previous run are discarded, but num1 keeps its
        doubled value, so a second run starts from where the first ended.

        ``emit`` is called with each output line as soon as its step
        finishes. In checked mode an overflowing step raises
        ArithmeticOverflowError; earlier lines have already been emitted
        and their results remain in ``self.results``.
        """
        logger.debug("Running demo: num1=%d num2=%d overflow=%s",
                     self.variables.num1, self.variables.num2, self.overflow)
        self.results = []
        for step in program:
            result = self.evaluate(step)
            self.results.append(result)
            if emit is not None:
                emit(result.line)
        return self.results

    def lines(self) -> List[str]:
        return [r.line for r in self.results]

    def evaluate(self, step: Step) -> StepResult:
        if isinstance(step, Addition):
            result = self._eval_addition(step)
        elif isinstance(step, GreaterThan):
            result = self._eval_greater_than(step)
        elif isinstance(step, BothPositive):
            result = self._eval_both_positive(step)
        elif isinstance(step, DoubleInPlace):
            result = self._eval_double(step)
        else:
            raise TypeError(f"Unknown step type: {type(step).__name__}")
        logger.debug("Step %d (%s): %s", step.index, step.title, result.line)
        return result

    # ── Step handlers ─────────────────────────

    def _arith(self, op: str, lhs: int, rhs: int) -> Tuple[int, bool]:
        """Apply op under the overflow mode. Returns (value, overflowed)."""
        if self.checked:
            return (CHECKED_OPS[op](lhs, rhs), False)
        value, overflowed = WRAPPING_OPS[op](lhs, rhs)
        if overflowed:
            logger.warning("%s overflowed 32 bits: %d, %d wrapped to %d", op, lhs, rhs, value)
        return (value, overflowed)

    def _eval_addition(self, step: Addition) -> StepResult:
        num1, num2 = self.variables.num1, self.variables.num2
        num3, overflowed = self._arith("add", num1, num2)
        return StepResult(step, num3, f"{num1} + {num2} = {format_value(num3)}", overflowed)

    def _eval_greater_than(self, step: GreaterThan) -> StepResult:
        num1, num2 = self.variables.num1, self.variables.num2
        num4 = num1 > num2
        return StepResult(step, num4, f"{num1} > {num2} = {format_value(num4)}")

    def _eval_both_positive(self, step: BothPositive) -> StepResult:
        num1, num2 = self.variables.num1, self.variables.num2
        num5 = num1 > 0 and num2 > 0
        return StepResult(step, num5, f"{num1} > 0 && {num2} > 0 = {format_value(num5)}")

    def _eval_double(self, step: DoubleInPlace) -> StepResult:
        num1 = self.variables.num1
        doubled, overflowed = self._arith("multiply", num1, 2)
        self.variables.num1 = doubled
        logger.debug("num1: %d -> %d", num1, doubled)
        return StepResult(step, doubled, format_value(doubled), overflowed)
