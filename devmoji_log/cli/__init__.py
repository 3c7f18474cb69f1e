"""CLI entry point for devmoji-log.

This module provides the main CLI application that combines the default
activity command and the config subcommands into a single interface.
"""

import typer

from devmoji_log.cli.config import config_app
from devmoji_log.cli.main import main_command


# Main application
app = typer.Typer(
    name="devmoji-log",
    help="Show recent Git activity with conventional commit parsing + devmoji",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
