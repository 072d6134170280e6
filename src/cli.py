"""Command-line entry point: replay a YAML session and print the history."""

import argparse
import logging
import sys

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.calculator import CalculatorError, HistoryEntry
from src.session import ReplayResult, load_session, replay

log = logging.getLogger("calc-replay")
console = Console()

EXIT_OK = 0
EXIT_STEP_FAILED = 1
EXIT_BAD_SESSION = 2


def build_history_table(history: list[HistoryEntry]) -> Table:
    table = Table(title="Calculator History", expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Operands", style="white")
    table.add_column("Result", justify="right", style="bold")
    table.add_column("Time (UTC)", justify="right")

    for i, entry in enumerate(history, start=1):
        operands = ", ".join(repr(x) for x in entry.operands)
        table.add_row(
            str(i),
            entry.operation.value,
            operands,
            repr(entry.result),
            entry.timestamp.strftime("%H:%M:%S.%f")[:-3],
        )
    return table


def print_result(result: ReplayResult) -> None:
    if result.history:
        console.print(build_history_table(result.history))
    else:
        console.print("[dim]History is empty.[/dim]")

    for failure in result.failures:
        console.print(
            f"[bold red]Step {failure.index} ({failure.step.op}) failed:[/bold red] "
            f"{escape(failure.error)}"
        )
    console.print(f"[bold]Last result:[/bold] {result.last_result!r}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a calculator session")
    parser.add_argument("session", help="Path to a YAML session file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        default=False,
        help="Abort the replay at the first failing step (default: False)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        session = load_session(args.session)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[bold red]Invalid session:[/bold red] {escape(str(exc))}")
        log.error("Could not load session %s: %s", args.session, exc)
        return EXIT_BAD_SESSION

    try:
        result = replay(session, stop_on_error=args.stop_on_error)
    except CalculatorError as exc:
        console.print(f"[bold red]Replay aborted:[/bold red] {escape(str(exc))}")
        return EXIT_STEP_FAILED

    print_result(result)
    return EXIT_OK if result.ok else EXIT_STEP_FAILED


if __name__ == "__main__":
    sys.exit(main())
