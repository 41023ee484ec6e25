from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from config.settings import setup_logging
from core.errors import TimerError
from core.timing.interval_timer import IntervalTimer, load_timing_data


app = typer.Typer(add_completion=False, no_args_is_help=True, help="Interval timing utilities.")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (defaults to PERFTIMER_LOG_LEVEL or WARNING)"
    ),
) -> None:
    try:
        setup_logging(log_level)
    except ValidationError:
        if log_level is None:
            bad, hint = os.getenv("PERFTIMER_LOG_LEVEL"), "PERFTIMER_LOG_LEVEL"
        else:
            bad, hint = log_level, "--log-level"
        raise typer.BadParameter(f"unknown log level: {bad}", param_hint=hint)


@app.command()
def report(
    files: List[Path] = typer.Argument(..., help="Timing files written by save_timing_data"),
) -> None:
    """Print the summary of one or more saved timing files."""
    failed = False
    for path in files:
        try:
            timer = load_timing_data(path)
            typer.echo(timer.summary(), nl=False)
        except (OSError, ValueError, TimerError) as exc:
            typer.echo(f"[perftimer] {path}: {exc}", err=True)
            failed = True
    if failed:
        raise typer.Exit(code=1)


@app.command()
def run(
    command: List[str] = typer.Argument(..., help="Command to time; put it after --"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Timer name (defaults to the command line)"),
    repeat: int = typer.Option(10, "--repeat", "-r", min=1, help="Number of timed runs"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Save summary and raw samples here"),
) -> None:
    """Run a command repeatedly and report how long each run took."""
    timer = IntervalTimer(name or " ".join(command))

    for i in range(repeat):
        try:
            with timer:
                proc = subprocess.run(command)
        except OSError as exc:
            typer.echo(f"[perftimer] failed to run {command[0]!r}: {exc}", err=True)
            raise typer.Exit(code=127)
        if proc.returncode != 0:
            typer.echo(f"[perftimer] run {i + 1} exited with status {proc.returncode}", err=True)
            raise typer.Exit(code=proc.returncode)

    typer.echo(timer.summary(), nl=False)

    if out is not None:
        if not timer.save_timing_data(out):
            typer.echo(f"[perftimer] could not write {out}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"[perftimer] saved {len(timer)} samples → {out}")


if __name__ == "__main__":
    app()
