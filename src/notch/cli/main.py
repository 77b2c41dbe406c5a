"""CLI entry point for notch.

Uses Click to expose the ``notch`` command, which runs the interactive
timer or prints a single frame.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.console import Console

import notch
from notch.core.timer import Timer


def _fail(message: str) -> None:
    """Print *message* to stderr and exit with code 1."""
    click.echo(f"notch: {message}", err=True)
    sys.exit(1)


def _configure_logging(log_file: Optional[str]) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(version=notch.__version__, prog_name="notch")
@click.option(
    "--minutes",
    type=int,
    default=25,
    show_default=True,
    help="Starting duration, rounded down to a multiple of 5.",
)
@click.option("--snapshot", is_flag=True, help="Print one frame and exit.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write debug logging to this file.",
)
def cli(minutes: int, snapshot: bool, log_file: Optional[str]) -> None:
    """notch: a ruler countdown timer for the terminal.

    Use the left and right arrows to change the duration by five minutes.
    The countdown starts four seconds after the last change; q quits.
    """
    _configure_logging(log_file)
    duration = max(minutes, 0) * 60

    if snapshot:
        from notch.ui.render import render

        console = Console(no_color=True, highlight=False)
        console.print(render(Timer(duration)))
        return

    from notch.ui.app import NotchApp

    app = NotchApp(duration)
    try:
        app.run()
    except OSError as exc:
        _fail(f"cannot start the terminal UI: {exc}")
    if app.return_code:
        _fail(f"terminal UI exited with code {app.return_code}")
