"""
Declare the source of a block of code (`sct declare`).

Counts the characters of a line selection (or the whole document), asks
whether the code was self-written, copied, or AI-generated, and adds the
count to the chosen category. Cancelling leaves the statistics untouched.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.prompt import InvalidResponse, Prompt

from ..core.categories import PROMPT_CHOICES, Category, parse_choice
from ..core.config import get_settings
from ..core.errors import TrackerError, UnknownCategoryError
from ..sources import Selection, StreamDocument, open_document
from .stats import open_aggregator

console = Console()


class SourcePrompt(Prompt):
    """Prompt accepting any category alias or cancel word, case-insensitively."""

    def process_response(self, value: str) -> Optional[Category]:  # type: ignore[override]
        try:
            return parse_choice(value)
        except UnknownCategoryError:
            raise InvalidResponse(self.illegal_choice_message) from None


def ask_source(char_count: int, default: Optional[Category] = None) -> Optional[Category]:
    """Ask the user to classify `char_count` characters. None means cancel."""
    console.print(f"Selected code: [bold]{char_count:,}[/bold] characters\n")
    kwargs = {"default": default.value} if default else {}
    try:
        answer = SourcePrompt.ask(
            "What is the source of this code?",
            choices=PROMPT_CHOICES,
            console=console,
            **kwargs,
        )
    except EOFError:
        return None
    # An accepted default comes back unprocessed
    return parse_choice(answer) if answer is not None else None


def declare_source(
    document: Optional[str] = typer.Argument(
        None, help="File holding the code, or '-' to read standard input."
    ),
    lines: Optional[str] = typer.Option(
        None, "--lines", "-l", help="Line range to count, e.g. 10-42. Default: whole document."
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="self-written | copied | ai-generated. Prompts when omitted.",
    ),
):
    """
    Declare where a block of code came from and add its characters to the stats.
    """
    try:
        doc = open_document(document)
        if doc is None:
            console.print("[yellow]No active document.[/yellow] Pass a file path or '-' for stdin.")
            return

        category = parse_choice(source) if source else None
        if source and category is None:
            console.print("Cancelled; statistics unchanged.")
            return
        if category is None and isinstance(doc, StreamDocument):
            raise TrackerError("--source is required when the document is read from stdin.")

        selection = Selection.parse(lines) if lines else None
        char_count = doc.character_count(selection)
    except TrackerError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if category is None:
        category = ask_source(char_count, get_settings().default_source)
        if category is None:
            console.print("Cancelled; statistics unchanged.")
            return

    stats = open_aggregator()
    stats.add(category, char_count)
    console.print(f"[green]Added {char_count:,} characters as {category.label}[/green]")
