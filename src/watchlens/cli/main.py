"""
Main CLI entry point for watchlens.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from watchlens import __version__
from watchlens.cli.commands.analyze import analyze_takeout
from watchlens.cli.errors import EXIT_SUCCESS, EXIT_USER_ERROR, display_settings_error
from watchlens.config.settings import get_settings

console = Console()

app = typer.Typer(
    name="watchlens",
    help="Personal YouTube watch-history statistics",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("analyze")(analyze_takeout)


def configure_logging(level: str) -> None:
    """Route library logging to stderr at the requested level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]watchlens[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        envvar="LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR); overrides settings",
    ),
) -> None:
    """
    watchlens - Personal YouTube watch-history statistics.

    Reads a Google Takeout export and summarises what you watched:
    top channels, busiest hours and days, and activity per month.
    """
    if version:
        console.print(f"watchlens v{__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)

    if log_level is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            raise typer.Exit(display_settings_error(e))
        log_level = "DEBUG" if settings.debug else settings.log_level

    configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'watchlens --help' for available commands[/yellow]")
        raise typer.Exit(code=EXIT_USER_ERROR)


if __name__ == "__main__":
    app()
