"""Main CLI command for showing recent activity."""

from datetime import datetime
from typing import Optional

import typer

from devmoji_log import __version__
from devmoji_log.exceptions import SpanError
from devmoji_log.formatters import render_activity
from devmoji_log.git import get_last_commits
from devmoji_log.cli.utils import configure_logging, get_effective_config


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"devmoji-log {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-c",
        min=1,
        metavar="NUMBER",
        help="Number of commits to retrieve [default: 5, or 'count' from config]",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force ANSI colors and emphasis on or off",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Show recent Git activity with conventional commit parsing + devmoji ✨"""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(verbose)
    config = get_effective_config(count=count, color=color)

    now = datetime.now().astimezone()
    commits = get_last_commits(config.count, remote=config.remote)

    lines = render_activity(
        commits,
        now,
        registry=config.build_registry(),
        color=config.color,
    )

    try:
        for line in lines:
            typer.echo(line, color=color)
    except SpanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
