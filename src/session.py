"""Load calculator sessions from YAML and replay them on a Calculator."""

import logging
from dataclasses import dataclass, field
from numbers import Real
from pathlib import Path

import yaml

from src.calculator import Calculator, CalculatorError, HistoryEntry
from src.operations import Operation

logger = logging.getLogger(__name__)

# Steps that change calculator state rather than compute a value.
CONTROL_STEPS = ("turn_on", "turn_off", "clear_history")


@dataclass
class Step:
    op: str
    args: list[float] = field(default_factory=list)


@dataclass
class Session:
    steps: list[Step]
    power_on: bool = True


@dataclass
class StepFailure:
    index: int
    step: Step
    error: str


@dataclass
class ReplayResult:
    history: list[HistoryEntry]
    failures: list[StepFailure] = field(default_factory=list)
    last_result: float | None = None

    @property
    def ok(self) -> bool:
        return not self.failures


def _expected_arity(op: str) -> int:
    if op in CONTROL_STEPS:
        return 0
    try:
        return Operation(op).arity
    except ValueError:
        raise ValueError(f"Unknown operation: {op!r}") from None


def _parse_step(index: int, entry) -> Step:
    if not isinstance(entry, dict) or "op" not in entry:
        raise ValueError(f"Step {index} has no 'op' key")
    op = entry["op"]
    args = entry.get("args", [])
    if args is None:
        args = []
    elif not isinstance(args, list):
        args = [args]

    expected = _expected_arity(op)
    if len(args) != expected:
        raise ValueError(
            f"Step {index} ({op}) takes {expected} argument(s), got {len(args)}"
        )
    for arg in args:
        if isinstance(arg, bool) or not isinstance(arg, Real):
            raise ValueError(f"Step {index} ({op}) has a non-numeric argument: {arg!r}")
    return Step(op=op, args=args)


def load_session(path: str | Path) -> Session:
    """Read a YAML session file and return a Session.

    The YAML must have a top-level 'steps' key holding a list of step dicts.
    Each step has an 'op' (an arithmetic operation or one of turn_on,
    turn_off, clear_history) and, for arithmetic, an 'args' list.
    Optional top-level 'power_on' (default true) switches the calculator
    on before the first step.

    Raises ValueError if the file is malformed.
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Session file {path} must contain a mapping")
    raw_steps = data.get("steps")
    if not raw_steps:
        raise ValueError(f"No 'steps' key found in {path}")
    if not isinstance(raw_steps, list):
        raise ValueError(f"'steps' in {path} must be a list")

    power_on = data.get("power_on", True)
    if not isinstance(power_on, bool):
        raise ValueError(f"'power_on' in {path} must be true or false, got {power_on!r}")

    steps = [_parse_step(i, entry) for i, entry in enumerate(raw_steps)]
    return Session(steps=steps, power_on=power_on)


def replay(
    session: Session,
    calculator: Calculator | None = None,
    stop_on_error: bool = False,
) -> ReplayResult:
    """Run every step of session against calculator (a fresh one by default).

    A CalculatorError raised by a step is recorded as a StepFailure and the
    replay moves on, unless stop_on_error is set, in which case it propagates.
    """
    calc = calculator if calculator is not None else Calculator()
    if session.power_on:
        calc.turn_on()

    failures: list[StepFailure] = []
    for index, step in enumerate(session.steps):
        try:
            getattr(calc, step.op)(*step.args)
        except CalculatorError as exc:
            if stop_on_error:
                raise
            logger.warning("Step %d (%s) failed: %s", index, step.op, exc)
            failures.append(StepFailure(index=index, step=step, error=str(exc)))

    return ReplayResult(
        history=calc.get_history(),
        failures=failures,
        last_result=calc.get_last_result(),
    )
