"""
Code Source Tracker CLI - Main entry point using Typer.

This module configures the main Typer application, registers all commands and
command groups, and defines global options like --version and --verbose.
"""

import typer
from rich.console import Console
from rich.traceback import install

from .commands import config, declare, stats
from .core.logging_util import setup_logging

# Install a rich traceback handler for readable exceptions
install(show_locals=False)

console = Console()

app = typer.Typer(
    name="sct",
    help="Declare code as self-written, copied, or AI-generated and track the share of each.",
    epilog="Use `sct [COMMAND] --help` for more info on a specific command.",
    no_args_is_help=True,
    invoke_without_command=True,  # let --version run without a command
    pretty_exceptions_enable=False,  # Disable Typer's default handler to use Rich's
)

app.command("declare", help="📝 Declare the source of a file or line selection.")(
    declare.declare_source
)
app.add_typer(stats.app, name="stats", help="📊 View accumulated code source statistics.")
app.add_typer(config.app, name="config", help="⚙️ Manage where statistics are stored.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the application version and exit.",
        is_eager=True,
    ),
    verbose: bool = typer.Option(None, "--verbose", help="Enable DEBUG-level logging."),
    quiet: bool = typer.Option(None, "--quiet", help="Only log errors."),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines to stderr."
    ),
):
    """
    Code Source Tracker CLI.
    """
    if version:
        from . import __version__

        console.print(f"Code Source Tracker v{__version__}")
        raise typer.Exit()

    setup_logging(json_logs=json_logs, verbose=bool(verbose), quiet=bool(quiet))


def cli():
    """Main entry point for the console script defined in pyproject.toml."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]👋 Operation cancelled by user.[/yellow]")
        raise typer.Exit()
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    cli()
