"""Tests for Calculator class."""
import math
from datetime import datetime

import pytest

from src.calculator import (
    Calculator,
    CalculatorError,
    DivisionByZeroError,
    HistoryEntry,
    NegativeRadicandError,
    NotPoweredError,
)
from src.operations import Operation


@pytest.fixture
def calc():
    calculator = Calculator()
    calculator.turn_on()
    yield calculator
    calculator.turn_off()


# --- power management ---

def test_off_by_default():
    assert Calculator().is_power_on() is False


def test_turn_on():
    calculator = Calculator()
    calculator.turn_on()
    assert calculator.is_power_on() is True
    assert calculator.is_on is True


def test_turn_off(calc):
    calc.turn_off()
    assert calc.is_power_on() is False


@pytest.mark.parametrize(
    "method, args",
    [
        ("add", (1, 2)),
        ("subtract", (1, 2)),
        ("multiply", (1, 2)),
        ("divide", (1, 2)),
        ("sqrt", (4,)),
        ("power", (2, 3)),
    ],
)
def test_operations_rejected_while_off(method, args):
    calculator = Calculator()
    with pytest.raises(NotPoweredError, match="Calculator is off"):
        getattr(calculator, method)(*args)


def test_power_check_comes_before_argument_checks():
    calculator = Calculator()
    with pytest.raises(NotPoweredError):
        calculator.divide(1, 0)
    with pytest.raises(NotPoweredError):
        calculator.sqrt(-1)


def test_turn_off_keeps_history_but_rejects_operations(calc):
    calc.add(1, 2)
    calc.turn_off()
    assert len(calc.get_history()) == 1
    with pytest.raises(NotPoweredError):
        calc.add(1, 2)
    assert len(calc.get_history()) == 1


# --- arithmetic ---

def test_add(calc):
    assert calc.add(5, 3) == 8
    assert calc.add(10, -3) == 7
    assert calc.add(-5, -3) == -8
    assert calc.add(0, 0) == 0


def test_add_decimals(calc):
    assert math.isclose(calc.add(0.1, 0.2), 0.3)


def test_subtract(calc):
    assert calc.subtract(10, 3) == 7
    assert calc.subtract(3, 10) == -7
    assert calc.subtract(5, -3) == 8


def test_multiply(calc):
    assert calc.multiply(6, 7) == 42
    assert calc.multiply(5, 0) == 0
    assert calc.multiply(-3, 4) == -12
    assert calc.multiply(-3, -4) == 12
    assert calc.multiply(0.5, 0.5) == 0.25


def test_divide(calc):
    assert calc.divide(15, 3) == 5
    assert calc.divide(-10, 2) == -5
    assert calc.divide(10, -2) == -5
    assert calc.divide(-10, -2) == 5
    assert math.isclose(calc.divide(10, 3), 3.3333333333)


@pytest.mark.parametrize("dividend", [0, 1, -7, 2.5])
def test_divide_by_zero(calc, dividend):
    with pytest.raises(DivisionByZeroError, match="Division by zero is not allowed"):
        calc.divide(dividend, 0)


def test_divide_by_zero_is_a_zero_division_error(calc):
    with pytest.raises(ZeroDivisionError):
        calc.divide(5, 0.0)


def test_sqrt(calc):
    assert calc.sqrt(9) == 3
    assert calc.sqrt(16) == 4
    assert calc.sqrt(0) == 0
    assert math.isclose(calc.sqrt(2), 1.41421356, rel_tol=1e-8)


@pytest.mark.parametrize("x", [0, 0.25, 2, 10, 12345.678])
def test_sqrt_squared_gives_input_back(calc, x):
    assert math.isclose(calc.sqrt(x) ** 2, x)


@pytest.mark.parametrize("x", [-1, -4, -0.5])
def test_sqrt_negative(calc, x):
    with pytest.raises(NegativeRadicandError, match="square root of negative number"):
        calc.sqrt(x)


def test_power(calc):
    assert calc.power(2, 3) == 8
    assert calc.power(5, 0) == 1
    assert calc.power(0, 5) == 0
    assert calc.power(2, -2) == 0.25
    assert calc.power(9, 0.5) == 3


def test_power_never_raises_domain_errors(calc):
    assert math.isnan(calc.power(-8, 1 / 3))
    assert calc.power(0, -1) == math.inf
    assert calc.power(10.0, 400) == math.inf


def test_errors_share_base_class(calc):
    with pytest.raises(CalculatorError):
        calc.divide(1, 0)
    with pytest.raises(CalculatorError):
        calc.sqrt(-1)


# --- history ---

def test_history_starts_empty(calc):
    assert calc.get_history() == []
    assert calc.get_last_result() is None


def test_history_records_operation(calc):
    calc.add(5, 3)
    entry = calc.get_history()[0]
    assert isinstance(entry, HistoryEntry)
    assert entry.operation == Operation.ADD
    assert entry.operation == "add"
    assert entry.operands == (5, 3)
    assert entry.result == 8
    assert isinstance(entry.timestamp, datetime)
    assert entry.timestamp.tzinfo is not None


def test_history_records_all_operations_in_order(calc):
    calc.add(1, 2)
    calc.subtract(5, 3)
    calc.multiply(4, 5)
    calc.divide(10, 2)
    calc.sqrt(9)
    calc.power(2, 3)

    history = calc.get_history()
    assert [e.operation for e in history] == [
        "add", "subtract", "multiply", "divide", "sqrt", "power",
    ]
    assert [e.operands for e in history] == [
        (1, 2), (5, 3), (4, 5), (10, 2), (9,), (2, 3),
    ]
    assert [e.result for e in history] == [3, 2, 20, 5.0, 3.0, 8]
    timestamps = [e.timestamp for e in history]
    assert timestamps == sorted(timestamps)


def test_history_not_recorded_on_errors(calc):
    with pytest.raises(DivisionByZeroError):
        calc.divide(5, 0)
    with pytest.raises(NegativeRadicandError):
        calc.sqrt(-1)
    assert calc.get_history() == []


def test_history_is_a_copy(calc):
    calc.add(1, 1)
    history = calc.get_history()
    history.clear()
    assert len(calc.get_history()) == 1


def test_history_entries_are_immutable(calc):
    calc.add(1, 1)
    entry = calc.get_history()[0]
    with pytest.raises(AttributeError):
        entry.result = 99


def test_last_result(calc):
    calc.add(5, 3)
    calc.multiply(2, 5)
    assert calc.get_last_result() == 10


def test_clear_history_keeps_power(calc):
    calc.add(5, 3)
    calc.clear_history()
    assert calc.get_history() == []
    assert calc.get_last_result() is None
    assert calc.is_power_on() is True


def test_turn_on_clears_history(calc):
    calc.add(5, 3)
    calc.turn_off()
    calc.turn_on()
    assert calc.get_history() == []


def test_turn_on_when_already_on_clears_history(calc):
    calc.add(5, 3)
    calc.turn_on()
    assert calc.get_history() == []


@pytest.mark.parametrize(
    "name",
    [
        "turn_on", "turn_off", "is_power_on",
        "add", "subtract", "multiply", "divide", "sqrt", "power",
        "get_history", "get_last_result", "clear_history",
    ],
)
def test_public_methods_have_docstrings(name):
    assert getattr(Calculator, name).__doc__


@pytest.mark.parametrize(
    "error", [CalculatorError, NotPoweredError, DivisionByZeroError, NegativeRadicandError]
)
def test_errors_have_docstrings(error):
    assert error.__doc__
