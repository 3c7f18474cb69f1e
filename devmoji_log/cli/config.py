"""CLI commands for global configuration management."""

import typer

from devmoji_log import global_config
from devmoji_log.config import load_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global devmoji-log configuration in ~/.devmoji-log/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
        shortcodes = global_config.get_shortcodes()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Current devmoji-log configuration ({global_config.get_config_file_path()}):")
    else:
        typer.echo("No configuration file found, showing defaults:")
    typer.echo()
    typer.echo(f"  Count: {config.count}")
    typer.echo(f"  Remote: {config.remote}")
    typer.echo(f"  Color: {'on' if config.color else 'off'}")

    if shortcodes:
        typer.echo()
        typer.echo("  Custom Shortcodes:")
        for code, glyph in shortcodes.items():
            typer.echo(f"    :{code}: {glyph}")


@config_app.command("set-count")
def config_set_count(
    count: int = typer.Argument(..., min=1, help="Number of commits to show"),
) -> None:
    """Set the default number of commits to show."""
    try:
        global_config.set_count(count)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Count set to {count}")


@config_app.command("set-remote")
def config_set_remote(
    remote: str = typer.Argument(..., help="Remote used to build commit links (e.g., origin)"),
) -> None:
    """Set the remote used to build commit links."""
    if not remote.strip():
        typer.echo("Remote name cannot be empty", err=True)
        raise typer.Exit(1)
    try:
        global_config.set_remote(remote.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Remote set to '{remote.strip()}'")


@config_app.command("set-color")
def config_set_color(
    enabled: bool = typer.Argument(..., help="Whether to emit ANSI colors (true/false)"),
) -> None:
    """Turn colored output on or off."""
    try:
        global_config.set_color(enabled)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Color turned {'on' if enabled else 'off'}")


@config_app.command("add-shortcode")
def config_add_shortcode(
    code: str = typer.Argument(..., help="Shortcode without colons (e.g., feat-api)"),
    glyph: str = typer.Argument(..., help="Emoji the code resolves to"),
) -> None:
    """Add or replace a custom emoji shortcode."""
    code = code.strip().strip(":")
    if not code or ":" in code or not glyph.strip():
        typer.echo("Shortcode and emoji must be non-empty, and the code cannot contain ':'", err=True)
        raise typer.Exit(1)
    try:
        global_config.set_shortcode(code, glyph.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Added :{code}: {glyph.strip()}")


@config_app.command("remove-shortcode")
def config_remove_shortcode(
    code: str = typer.Argument(..., help="Shortcode to remove"),
) -> None:
    """Remove a custom emoji shortcode."""
    code = code.strip().strip(":")
    try:
        removed = global_config.remove_shortcode(code)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    if not removed:
        typer.echo(f"Shortcode not found: {code}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Removed :{code}:")
