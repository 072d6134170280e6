"""Calculator with a power switch and an operation history."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.operations import FUNCTIONS, Operation

logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Base class for errors raised by Calculator operations."""

    message = "Calculator error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NotPoweredError(CalculatorError):
    """Raised when an operation is attempted while the calculator is off."""

    message = "Calculator is off"


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when dividing by zero."""

    message = "Division by zero is not allowed"


class NegativeRadicandError(CalculatorError, ValueError):
    """Raised when taking the square root of a negative number."""

    message = "Cannot calculate square root of negative number"


@dataclass(frozen=True)
class HistoryEntry:
    operation: Operation
    operands: tuple[float, ...]
    result: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Calculator:
    """A calculator that must be switched on before use and records each result.

    The history is cleared every time the calculator is turned on. Turning
    it off keeps the history but rejects further operations.
    """

    def __init__(self):
        self._on = False
        self._history: list[HistoryEntry] = []

    # Power management

    def turn_on(self) -> None:
        """Switch the calculator on and clear the history."""
        self._on = True
        self._history = []
        logger.info("Calculator turned on; history cleared")

    def turn_off(self) -> None:
        """Switch the calculator off, keeping the history."""
        self._on = False
        logger.info("Calculator turned off (%d history entries kept)", len(self._history))

    def is_power_on(self) -> bool:
        """Return True if the calculator is on."""
        return self._on

    @property
    def is_on(self) -> bool:
        return self._on

    # Arithmetic

    def add(self, a: float, b: float) -> float:
        """Add two numbers."""
        return self._apply(Operation.ADD, a, b)

    def subtract(self, a: float, b: float) -> float:
        """Subtract b from a."""
        return self._apply(Operation.SUBTRACT, a, b)

    def multiply(self, a: float, b: float) -> float:
        """Multiply two numbers."""
        return self._apply(Operation.MULTIPLY, a, b)

    def divide(self, a: float, b: float) -> float:
        """Divide a by b. Raises DivisionByZeroError when b is zero."""
        self._require_power(Operation.DIVIDE)
        if b == 0:
            raise DivisionByZeroError()
        return self._apply(Operation.DIVIDE, a, b)

    def sqrt(self, a: float) -> float:
        """Square root of a. Raises NegativeRadicandError when a is negative."""
        self._require_power(Operation.SQRT)
        if a < 0:
            raise NegativeRadicandError()
        return self._apply(Operation.SQRT, a)

    def power(self, base: float, exponent: float) -> float:
        """Raise base to exponent."""
        return self._apply(Operation.POWER, base, exponent)

    # History

    def get_history(self) -> list[HistoryEntry]:
        """Return a copy of the history, oldest entry first."""
        return list(self._history)

    def get_last_result(self) -> float | None:
        """Return the most recent result, or None if the history is empty."""
        if not self._history:
            return None
        return self._history[-1].result

    def clear_history(self) -> None:
        """Empty the history without changing the power state."""
        self._history = []
        logger.info("History cleared")

    def _require_power(self, operation: Operation) -> None:
        if not self._on:
            logger.debug("Rejected %s: calculator is off", operation.value)
            raise NotPoweredError()

    def _apply(self, operation: Operation, *operands: float) -> float:
        self._require_power(operation)
        result = FUNCTIONS[operation](*operands)
        self._history.append(HistoryEntry(operation, tuple(operands), result))
        logger.debug("%s%r = %r", operation.value, operands, result)
        return result
