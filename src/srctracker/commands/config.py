"""
Configuration commands (`sct config`).

View and update where statistics are stored and which answer the
classification prompt preselects.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..core.categories import parse_category
from ..core.config import (
    USER_SETTINGS_FILE,
    create_default_settings,
    get_settings,
    reset_settings,
    save_settings,
)
from ..core.errors import TrackerError

console = Console()
app = typer.Typer(
    no_args_is_help=True,
    help="Manage where statistics are stored and prompt defaults.",
)


@app.command("set")
def config_set(
    stats_path: Optional[Path] = typer.Option(
        None, "--stats-path", help="Set the path of the statistics JSON file."
    ),
    default_source: Optional[str] = typer.Option(
        None,
        "--default-source",
        help="Preselect this answer in the classification prompt (self-written, copied, ai-generated).",
    ),
    clear_default: bool = typer.Option(
        False, "--clear-default", help="Stop preselecting an answer in the prompt."
    ),
    reset: bool = typer.Option(False, "--reset", help="Reset all settings to their default values."),
):
    """
    Update settings. Running the command with no options shows the current values.
    """
    if reset:
        console.print("[yellow]Resetting settings to default...[/yellow]")
        reset_settings()
        save_settings(create_default_settings())
        console.print("[green]✅ Settings reset and saved.[/green]")
        return

    settings = get_settings()
    changed = False
    if stats_path:
        settings.stats_path = Path(str(stats_path)).expanduser().resolve()
        console.print(f"Stats file set to: [blue]{settings.stats_path}[/blue]")
        changed = True

    if default_source:
        try:
            settings.default_source = parse_category(default_source)
        except TrackerError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        console.print(f"Default prompt answer set to: [blue]{settings.default_source.value}[/blue]")
        changed = True
    elif clear_default:
        settings.default_source = None
        console.print("Default prompt answer cleared.")
        changed = True

    if changed:
        save_settings(settings)
        console.print("[green]✅ Settings saved.[/green]")
    else:
        _print_settings()


@app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output settings as styled JSON"),
):
    """Display the current configuration."""
    if json_output:
        settings = get_settings()
        data = {
            "stats_path": str(settings.stats_path),
            "default_source": settings.default_source.value if settings.default_source else None,
            "settings_file": str(USER_SETTINGS_FILE),
        }
        console.print_json(json.dumps(data))
        return
    _print_settings()


def _print_settings():
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Stats file:     [blue]{settings.stats_path}[/blue]")
    default = settings.default_source.value if settings.default_source else "none"
    console.print(f"  Default answer: [blue]{default}[/blue]")
    console.print(f"  Settings file:  [blue]{USER_SETTINGS_FILE}[/blue]")
