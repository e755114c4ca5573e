"""
Step and variable definitions for the operator demo.

The demo is a fixed program of four steps. Each step type is a small
dataclass node; ``OperatorDemo`` in demo.py walks the nodes in order
and evaluates them against a ``Variables`` record.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from .int32 import MathOpError, check_range


DEFAULT_NUM1 = 10
DEFAULT_NUM2 = 5


class ImmutableVariableError(MathOpError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"cannot assign twice to immutable variable `{name}`")


# ──────────────────────────────────────────────
# Variables
# ──────────────────────────────────────────────

@dataclass
class Variables:
    """The two operands. num1 is mutable, num2 is fixed after construction."""
    num1: int = DEFAULT_NUM1
    num2: int = DEFAULT_NUM2
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        check_range(self.num1, "num1")
        check_range(self.num2, "num2")
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            if name in ("num2", "_frozen"):
                raise ImmutableVariableError(name)
            if name == "num1":
                check_range(value, "num1")
        super().__setattr__(name, value)


# ──────────────────────────────────────────────
# Steps
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Step:
    """Base class for all demo steps."""
    index: int = 0

    @property
    def title(self) -> str:
        return type(self).__name__

@dataclass(frozen=True)
class Addition(Step):
    """num3 = num1 + num2"""

    @property
    def title(self) -> str:
        return "Addition"

@dataclass(frozen=True)
class GreaterThan(Step):
    """num4 = num1 > num2"""

    @property
    def title(self) -> str:
        return "Comparison"

@dataclass(frozen=True)
class BothPositive(Step):
    """num5 = num1 > 0 && num2 > 0"""

    @property
    def title(self) -> str:
        return "Logical AND"

@dataclass(frozen=True)
class DoubleInPlace(Step):
    """num1 *= 2"""

    @property
    def title(self) -> str:
        return "Assignment"


AnyStep = Union[Addition, GreaterThan, BothPositive, DoubleInPlace]


DEFAULT_PROGRAM: Tuple[AnyStep, ...] = (
    Addition(index=1),
    GreaterThan(index=2),
    BothPositive(index=3),
    DoubleInPlace(index=4),
)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one evaluated step."""
    step: Step
    value: Union[int, bool]
    line: str
    overflowed: bool = False
