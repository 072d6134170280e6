"""Arithmetic operations recorded by the calculator."""

import math
from enum import Enum


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    SQRT = "sqrt"
    POWER = "power"

    @property
    def arity(self) -> int:
        return 1 if self is Operation.SQRT else 2


def add(a: float, b: float) -> float:
    """Add two numbers."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Subtract b from a."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Multiply two numbers."""
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b. Raises ZeroDivisionError when b is zero."""
    return a / b


def sqrt(a: float) -> float:
    """Principal (non-negative) square root. Raises ValueError for a < 0."""
    return math.sqrt(a)


def _is_odd_integer(x: float) -> bool:
    return float(x).is_integer() and int(x) % 2 == 1


def power(base: float, exponent: float) -> float:
    """Raise base to exponent following IEEE-754 pow().

    Python's ``**`` raises or goes complex where pow() returns a special
    value, so those cases are mapped back:

    - negative base with a non-integer exponent -> nan
    - zero to a negative power -> inf (signed for -0.0 and odd exponents)
    - float overflow -> inf, negative for a negative base and odd exponent,
      nan for a negative base and non-integer exponent
    """
    try:
        result = base**exponent
    except ZeroDivisionError:
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    except OverflowError:
        if base < 0 and not float(exponent).is_integer():
            return math.nan
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


FUNCTIONS = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.SQRT: sqrt,
    Operation.POWER: power,
}
