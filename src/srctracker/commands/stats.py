"""
Statistics commands (`sct stats`).

Shows the accumulated character counts per declared source, either as the
plain-text summary or as JSON.
"""

import json
from typing import Optional

import typer
from rich.console import Console

from ..core.config import TrackerSettings, get_settings
from ..core.stats import StatsAggregator

console = Console()
app = typer.Typer(no_args_is_help=True, help="View accumulated code source statistics.")


def open_aggregator(settings: Optional[TrackerSettings] = None) -> StatsAggregator:
    """Build the aggregator for this invocation from the active settings."""
    settings = settings or get_settings()
    return StatsAggregator(settings.stats_path)


@app.command("show")
def stats_show(
    json_output: bool = typer.Option(False, "--json", help="Output statistics as styled JSON"),
    json_raw: bool = typer.Option(False, "--json-raw", help="Output raw JSON to stdout"),
):
    """Display total characters and each source's share."""
    stats = open_aggregator()
    if json_raw:
        typer.echo(json.dumps(stats.to_dict()))
        return
    if json_output:
        console.print_json(json.dumps(stats.to_dict()))
        return
    typer.echo(stats.summary(), nl=False)


@app.command("path")
def stats_path():
    """Print where statistics are stored."""
    path = get_settings().stats_path
    console.print(f"Stats file: [blue]{path}[/blue]")
    if path.exists():
        console.print("  [green]exists[/green]")
    else:
        console.print("  [yellow]not created yet[/yellow] (written on the first declaration)")
