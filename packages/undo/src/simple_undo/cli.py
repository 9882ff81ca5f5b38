"""
Command-line demo for simple_undo.

Runs a sequence of steps against a VersionedValue and prints each state:

    simple-undo text "append:Simple " "append:undo !" undo undo redo "append:redo !"
    simple-undo number add:1 add:1 add:1 undo undo redo mul:10 redo
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import APP_NAME, VERSION, configure_logging
from .versioned_value import VersionedValue

app = typer.Typer(
    name=APP_NAME,
    help="Apply, undo and redo updates on a value",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_CONTROL_STEPS = ("undo", "redo")


# ─────────────────────────────────────────────────────────────────────────────
# Step parsing
# ─────────────────────────────────────────────────────────────────────────────

def _text_op(step: str) -> Callable[[str], str]:
    verb, sep, arg = step.partition(":")
    if not sep:
        raise ValueError(f"expected append:TEXT or prepend:TEXT, got {step!r}")
    if verb == "append":
        return lambda s: s + arg
    if verb == "prepend":
        return lambda s: arg + s
    raise ValueError(f"unknown text operation {verb!r}")


def _number_op(step: str) -> Callable[[int], int]:
    verb, sep, arg = step.partition(":")
    if not sep:
        raise ValueError(f"expected add:N, sub:N or mul:N, got {step!r}")
    try:
        n = int(arg)
    except ValueError:
        raise ValueError(f"not an integer: {arg!r}") from None
    if verb == "add":
        return lambda v: v + n
    if verb == "sub":
        return lambda v: v - n
    if verb == "mul":
        return lambda v: v * n
    raise ValueError(f"unknown number operation {verb!r}")


def parse_steps(
    steps: list[str],
    parse_op: Callable[[str], Callable[[Any], Any]],
) -> list[tuple[str, Callable[[Any], Any] | None]]:
    """Turn raw step strings into (step, operation) pairs; control steps carry None."""
    parsed: list[tuple[str, Callable[[Any], Any] | None]] = []
    for step in steps:
        if step in _CONTROL_STEPS:
            parsed.append((step, None))
        else:
            parsed.append((step, parse_op(step)))
    return parsed


# ─────────────────────────────────────────────────────────────────────────────
# Running
# ─────────────────────────────────────────────────────────────────────────────

def _run(
    initial: Any,
    steps: list[str],
    parse_op: Callable[[str], Callable[[Any], Any]],
    show_history: bool,
    verbose: bool,
) -> None:
    configure_logging(logging.DEBUG if verbose else None)

    try:
        parsed = parse_steps(steps, parse_op)
    except ValueError as exc:
        err_console.print(f"[red]Invalid step:[/red] {escape(str(exc))}")
        raise typer.Exit(2)

    value: VersionedValue[Any] = VersionedValue(initial)

    table = Table(title="Steps")
    table.add_column("#", justify="right")
    table.add_column("Step")
    table.add_column("Value")
    table.add_column("Cursor")

    for i, (step, op) in enumerate(parsed, 1):
        if step == "undo":
            value.undo()
        elif step == "redo":
            value.redo()
        else:
            value.update(op, label=step)
        table.add_row(
            str(i),
            escape(step),
            escape(repr(value.value)),
            f"{value.cursor}/{len(value)}",
        )

    console.print(table)

    if show_history:
        history = Table(title="History")
        history.add_column("#", justify="right")
        history.add_column("Operation")
        history.add_column("Applied")
        for entry in value.history():
            history.add_row(str(entry.index), escape(entry.label or ""), "✓" if entry.applied else "")
        console.print(history)

    console.print(f"Final value: {escape(repr(value.unwrap()))}", highlight=False)


@app.command()
def text(
    steps: list[str] = typer.Argument(..., help="Steps: append:TEXT, prepend:TEXT, undo, redo"),
    initial: str = typer.Option("", "--initial", "-i", help="Initial text"),
    show_history: bool = typer.Option(False, "--history", help="Print the operation history"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Edit a string."""
    _run(initial, steps, _text_op, show_history, verbose)


@app.command()
def number(
    steps: list[str] = typer.Argument(..., help="Steps: add:N, sub:N, mul:N, undo, redo"),
    initial: int = typer.Option(0, "--initial", "-i", help="Initial integer"),
    show_history: bool = typer.Option(False, "--history", help="Print the operation history"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Edit an integer."""
    _run(initial, steps, _number_op, show_history, verbose)


@app.command()
def version() -> None:
    """Print the version."""
    typer.echo(f"{APP_NAME} {VERSION}")


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
