from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import cast

import typer
from rich.console import Console

from . import __version__
from .demo_data import LEAGUE_HEADERS, league_rows
from .edit.grid import GridEditModel
from .ui.summary import render_grid, render_table

logger = logging.getLogger(__name__)

_VARIANTS = ("dialog", "inline")

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(log_file: Path | None) -> None:
    # The Textual UI owns the terminal, so logs only go to a file when asked for.
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Logging to %s", log_file)


def _can_launch_interactive(console: Console) -> bool:
    return console.is_terminal and sys.stdin.isatty() and sys.stdout.isatty()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Print version and exit.",
        is_eager=True,
    ),
) -> None:
    if version:
        typer.echo(f"beetables {__version__}")
        raise typer.Exit(0)


@app.command()
def table(
    variant: str = typer.Option(  # noqa: B008
        "dialog",
        "--variant",
        envvar="BEETABLES_VARIANT",
        help="Cell editing style: dialog (modal confirm/cancel) or inline (edit in place).",
    ),
    log_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--log-file",
        envvar="BEETABLES_LOG_FILE",
        help="Write debug logs of edit transitions to this file.",
    ),
) -> None:
    """Show the editable league table demo."""

    variant_value = variant.strip().lower()
    if variant_value not in _VARIANTS:
        typer.echo("Invalid --variant value. Expected one of: dialog, inline.", err=True)
        raise typer.Exit(2)
    _configure_logging(log_file)

    rows = league_rows()
    console = Console()
    if not _can_launch_interactive(console):
        render_table(console, LEAGUE_HEADERS, rows, title="League table")
        typer.echo("Interactive editing requires a TTY terminal.", err=True)
        raise typer.Exit(0)

    from .ui.table_textual import RowVariant, run_table_demo

    edited = run_table_demo(
        LEAGUE_HEADERS,
        rows,
        variant=cast(RowVariant, variant_value),
    )
    render_table(console, LEAGUE_HEADERS, edited, title="League table")


@app.command()
def grid(
    log_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--log-file",
        envvar="BEETABLES_LOG_FILE",
        help="Write debug logs of edit transitions to this file.",
    ),
) -> None:
    """Show the editable grid demo (16 items plus a single item)."""

    _configure_logging(log_file)
    model = GridEditModel()
    console = Console()
    if not _can_launch_interactive(console):
        render_grid(console, model)
        typer.echo("Interactive editing requires a TTY terminal.", err=True)
        raise typer.Exit(0)

    from .ui.grid_textual import run_grid_demo

    render_grid(console, run_grid_demo(model))
