"""Main entry point for the fmcli interactive file manager."""

from typing import Optional

import typer
from rich.console import Console

from fmcli.config import ConfigurationError, load_configuration
from fmcli.session import Session
from fmcli.shell import FileManagerShell
from fmcli.ui import setup_logging

# Initialize Typer app with rich formatting
app = typer.Typer(
    name="fmcli",
    help="Interactive command-line file manager",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        from . import __version__

        console.print(f"fmcli version {__version__}")
        raise typer.Exit()


def show_config_callback(value: bool):
    """Show current configuration and exit."""
    if value:
        try:
            config = load_configuration()
        except ConfigurationError as e:
            console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
            raise typer.Exit(1)

        console.print("\n[bold blue]fmcli Configuration[/bold blue]")
        console.print(f"Prompt: [cyan]{config.prompt!r}[/cyan]")
        console.print(
            f"Start directory: [cyan]{config.start_directory or 'current directory'}[/cyan]"
        )
        console.print(f"Chunk size: [cyan]{config.chunk_size}[/cyan]")
        console.print(
            f"Compression quality: [cyan]{config.compression_quality}[/cyan]"
        )
        console.print(
            f"Rich output: [cyan]{'Enabled' if config.rich_output else 'Disabled'}[/cyan]"
        )
        console.print(f"Log level: [cyan]{config.log_level.value}[/cyan]")
        raise typer.Exit()


def validate_username(value: str) -> str:
    if not value or not value.strip():
        raise typer.BadParameter("Username must not be empty")
    return value


@app.command()
def main(
    username: str = typer.Option(
        ...,
        "--username",
        "-u",
        help="Name to greet the session user with (--username=<name>)",
        callback=validate_username,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output and detailed error information",
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config-file", "-c", help="Path to custom configuration file"
    ),
    start_dir: Optional[str] = typer.Option(
        None, "--start-dir", "-s", help="Directory to start the session in"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
    show_config: Optional[bool] = typer.Option(
        None,
        "--show-config",
        callback=show_config_callback,
        is_eager=True,
        help="Show current configuration and exit.",
    ),
):
    """Start an interactive file manager session."""
    try:
        config = load_configuration(
            config_file=config_file,
            debug=debug,
            start_directory=start_dir,
        )
        setup_logging(config)
        try:
            session = Session(username, config.start_directory)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot start in {config.start_directory}: {e}"
            ) from e
    except ConfigurationError as e:
        handle_error(e, debug)
        raise typer.Exit(1)

    FileManagerShell(session, config).run()


def handle_error(error: Exception, debug: bool = False):
    """Handle and display startup errors with appropriate formatting."""
    if debug:
        console.print("\n[bold red]Debug Error Details:[/bold red]")
        console.print_exception()
    else:
        console.print(f"\n[bold red]Error:[/bold red] {str(error)}")
        console.print("[dim]Use --debug for more details[/dim]")


if __name__ == "__main__":
    app()
